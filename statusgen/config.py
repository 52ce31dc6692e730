"""Load statusgen configuration from pyproject.toml and optional .statusgen.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import ConfigError


@dataclass
class StatusgenConfig:
    """Runtime configuration for statusgen."""

    # Path to the status table.  None means the errcodes.txt bundled with
    # the package.
    table: Optional[str] = None
    # Default destination of the generated module when the CLI is given none.
    output: str = "states.py"

    # Prefix removed from the start of the identifier column.
    identifier_prefix: str = "ERRCODE_"
    # Lines whose first non-blank character is this marker are skipped.
    comment_marker: str = "#"
    # Lines whose first token starts with this keyword are section headers
    # and are skipped.
    section_keyword: str = "Section"

    # Package the generated module imports State, Severity and
    # UnknownCodeError from.
    runtime_package: str = "statusgen"
    # Name of the generated code -> State lookup function.
    lookup_name: str = "from_code"


def _read_toml(path: Path) -> dict:
    """Read a TOML file; return empty dict if missing or unparseable."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError, UnicodeDecodeError):
        return {}


def _apply(cfg: StatusgenConfig, d: dict, source: str = "config") -> None:
    """Overlay dict values onto cfg, ignoring unknown keys.

    Every option is a string; any other TOML value raises :class:`ConfigError`.
    """
    valid = set(cfg.__dataclass_fields__)
    for key, val in d.items():
        if key not in valid:
            continue
        if not isinstance(val, str):
            raise ConfigError(
                f"{source}: {key} must be a string, got {type(val).__name__}"
            )
        setattr(cfg, key, val)


def load_config(project_root: Optional[Path] = None) -> StatusgenConfig:
    """Load config from pyproject.toml [tool.statusgen], then .statusgen.toml."""
    if project_root is None:
        project_root = Path.cwd()
    cfg = StatusgenConfig()
    pyproject = _read_toml(project_root / "pyproject.toml")
    _apply(cfg, pyproject.get("tool", {}).get("statusgen", {}), "pyproject.toml")
    local = _read_toml(project_root / ".statusgen.toml")
    _apply(cfg, local, ".statusgen.toml")
    return cfg
