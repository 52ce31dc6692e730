"""Parse the status table, emit the registry module, and write it out."""

from pathlib import Path
from typing import Optional, Union

from .config import StatusgenConfig
from .emitter import generate_source
from .stats import GenStats
from .table_parser import load_table, parse_table

PathLike = Union[str, Path]


def generate(
    table_text: str,
    config: Optional[StatusgenConfig] = None,
    stats: Optional[GenStats] = None,
) -> str:
    """Return the registry module source for *table_text*.

    Pure: no file is read or written.  Raises :class:`MalformedRowError`
    before any source is produced when the table does not parse.
    """
    if config is None:
        config = StatusgenConfig()
    entries = parse_table(table_text, config)
    source = generate_source(entries, config)
    if stats is not None:
        stats.record_entries(entries)
    return source


def _render(
    table_path: Optional[PathLike],
    config: StatusgenConfig,
    stats: Optional[GenStats],
) -> str:
    if table_path is None:
        table_path = config.table
    return generate(load_table(table_path), config, stats)


def _read_previous(output: Path) -> str:
    """Return the artifact at *output* for diffing; undecodable bytes are replaced."""
    if not output.is_file():
        return ""
    return output.read_text(encoding="utf-8", errors="replace")


def build(
    output_path: PathLike,
    table_path: Optional[PathLike] = None,
    config: Optional[StatusgenConfig] = None,
    stats: Optional[GenStats] = None,
) -> None:
    """Generate the registry module and write it to *output_path*.

    The table is parsed and the module rendered in memory before the
    destination is opened, so a malformed table leaves it untouched.  A
    previous artifact is overwritten.  ``OSError`` propagates unchanged.
    """
    if config is None:
        config = StatusgenConfig()
    source = _render(table_path, config, stats)

    output = Path(output_path)
    if stats is not None:
        stats.count_lines_changed(_read_previous(output), source)
    output.write_text(source, encoding="utf-8")
    if stats is not None:
        stats.files_written.append(str(output))


def check(
    output_path: PathLike,
    table_path: Optional[PathLike] = None,
    config: Optional[StatusgenConfig] = None,
    stats: Optional[GenStats] = None,
) -> bool:
    """Return True if *output_path* matches what :func:`build` would write.

    A missing artifact counts as out of date.  Nothing is written.
    """
    if config is None:
        config = StatusgenConfig()
    source = _render(table_path, config, stats)

    output = Path(output_path)
    if not output.is_file():
        return False
    if stats is not None:
        stats.count_lines_changed(_read_previous(output), source)
    return output.read_bytes() == source.encode("utf-8")
