"""Parse a status code table into code-sorted status entries.

The table is line oriented.  Blank lines, comment lines and section headers
carry no entry; every other line is a row of whitespace-separated fields::

    42601    E    ERRCODE_SYNTAX_ERROR    syntax_error

read positionally as code, severity token, identifier and an optional
underscore-joined description.
"""

from __future__ import annotations

import builtins
import keyword
import re
import unicodedata
from dataclasses import dataclass, field
from enum import Enum
from importlib import resources
from pathlib import Path
from typing import Dict, Optional, Union

from .config import StatusgenConfig
from .errors import MalformedRowError
from .state import Severity

# Names the generated module binds itself; a row may not shadow them.
RESERVED_NAMES = frozenset({"State", "Severity", "UnknownCodeError", "_BY_CODE"})

_CODE_RE = re.compile(r"[0-9A-Z]{5}")

# Bundled with the package, used when no table path is configured.
BUNDLED_TABLE = "errcodes.txt"


class LineKind(Enum):
    """What a single table line holds."""

    BLANK = "blank"
    COMMENT = "comment"
    SECTION = "section"
    ROW = "row"


@dataclass(frozen=True)
class StatusEntry:
    """One row of the status table."""

    code: str
    severity: Severity
    identifier: str
    description: Optional[str] = None
    line: int = field(default=0, compare=False)  # 1-indexed, diagnostics only


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------


def classify_line(line: str, config: Optional[StatusgenConfig] = None) -> LineKind:
    """Return the :class:`LineKind` of a raw table line."""
    if config is None:
        config = StatusgenConfig()
    stripped = line.strip()
    if not stripped:
        return LineKind.BLANK
    if stripped.startswith(config.comment_marker):
        return LineKind.COMMENT
    if stripped.split(None, 1)[0].startswith(config.section_keyword):
        return LineKind.SECTION
    return LineKind.ROW


def _strip_prefix(raw: str, prefix: str) -> str:
    if prefix and raw.startswith(prefix):
        return raw[len(prefix) :]
    return raw


def tokenize_row(
    line: str, lineno: int, config: Optional[StatusgenConfig] = None
) -> StatusEntry:
    """Turn a data row into a :class:`StatusEntry`.

    Raises :class:`MalformedRowError` when a required field is missing, the
    code is not five characters of ``[0-9A-Z]``, the severity token is not
    one of ``E``/``W``/``S``, the identifier is not usable as a constant
    name (keywords, builtins and names the generated module binds are
    refused), or the description holds non-printable characters.  Fields
    past the fourth are ignored.
    """
    if config is None:
        config = StatusgenConfig()
    fields = line.split()
    if len(fields) < 3:
        raise MalformedRowError(
            lineno, line, f"expected at least 3 fields, got {len(fields)}"
        )

    code, token, raw_identifier = fields[:3]
    if not _CODE_RE.fullmatch(code):
        raise MalformedRowError(lineno, line, f"invalid code {code!r}")

    try:
        severity = Severity.from_token(token)
    except ValueError:
        raise MalformedRowError(
            lineno, line, f"unknown severity token {token!r}"
        ) from None

    # Python folds identifiers to NFKC; compare and emit the folded name.
    identifier = unicodedata.normalize(
        "NFKC", _strip_prefix(raw_identifier, config.identifier_prefix)
    )
    if not identifier:
        raise MalformedRowError(lineno, line, "empty identifier")
    if not identifier.isidentifier() or keyword.iskeyword(identifier):
        raise MalformedRowError(lineno, line, f"invalid identifier {identifier!r}")
    if (
        identifier in RESERVED_NAMES
        or identifier == config.lookup_name
        or hasattr(builtins, identifier)
    ):
        raise MalformedRowError(lineno, line, f"reserved identifier {identifier!r}")

    description = None
    if len(fields) > 3:
        if not fields[3].isprintable():
            raise MalformedRowError(lineno, line, "non-printable description")
        description = fields[3].replace("_", " ")
    return StatusEntry(
        code=code,
        severity=severity,
        identifier=identifier,
        description=description,
        line=lineno,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_table(
    text: str, config: Optional[StatusgenConfig] = None
) -> Dict[str, StatusEntry]:
    """Parse the full table text into a ``code -> StatusEntry`` mapping.

    The returned dict iterates in ascending code order regardless of the row
    order in *text*.  Duplicate codes and duplicate identifiers are rejected
    with :class:`MalformedRowError`.
    """
    if config is None:
        config = StatusgenConfig()
    by_code: Dict[str, StatusEntry] = {}
    by_identifier: Dict[str, StatusEntry] = {}

    for lineno, line in enumerate(text.splitlines(), 1):
        if classify_line(line, config) is not LineKind.ROW:
            continue
        entry = tokenize_row(line, lineno, config)

        if entry.code in by_code:
            first = by_code[entry.code].line
            raise MalformedRowError(
                lineno, line, f"duplicate code {entry.code!r} (first on line {first})"
            )
        if entry.identifier in by_identifier:
            first = by_identifier[entry.identifier].line
            raise MalformedRowError(
                lineno,
                line,
                f"duplicate identifier {entry.identifier!r} (first on line {first})",
            )
        by_code[entry.code] = entry
        by_identifier[entry.identifier] = entry

    return {code: by_code[code] for code in sorted(by_code)}


def load_table(path: Optional[Union[str, Path]] = None) -> str:
    """Return the text of the table at *path*, or of the bundled table."""
    if path is None:
        return resources.files(__package__).joinpath(BUNDLED_TABLE).read_text(
            encoding="utf-8"
        )
    return Path(path).read_text(encoding="utf-8")
