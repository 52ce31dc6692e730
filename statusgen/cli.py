"""CLI entry point: generates the registry module and reports to stdout."""

import argparse
import sys
from typing import List, Optional

from .config import load_config
from .errors import StatusgenError
from .generator import build, check
from .stats import GenStats


def _parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="statusgen", description="Generate a status code registry module"
    )
    ap.add_argument(
        "output", nargs="?", help="destination module (default: configured output)"
    )
    ap.add_argument("--table", metavar="PATH", help="status table to read")
    ap.add_argument(
        "--check",
        action="store_true",
        help="exit 1 if OUTPUT is missing or out of date; write nothing",
    )
    return ap


def main(argv: Optional[List[str]] = None) -> None:
    args = _parser().parse_args(argv)
    run_stats = GenStats()

    try:
        config = load_config()
        output = args.output or config.output
        if args.check:
            if not check(output, args.table, config=config, stats=run_stats):
                print(f"statusgen: {output} is out of date", file=sys.stderr)
                sys.exit(1)
            print(f"{output}: up to date")
            return
        build(output, args.table, config=config, stats=run_stats)
    except (StatusgenError, OSError) as exc:
        print(f"statusgen: {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"{output}: wrote {run_stats.total_entries} states")
    for line in run_stats.format_summary():
        print(line)
