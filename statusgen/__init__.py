"""Build-time generator for typed status code registries."""

from .errors import (
    ConfigError,
    MalformedRowError,
    StatusgenError,
    UnknownCodeError,
)
from .generator import build, check, generate
from .state import Severity, State
from .table_parser import StatusEntry, parse_table

__all__ = [
    "ConfigError",
    "MalformedRowError",
    "Severity",
    "State",
    "StatusEntry",
    "StatusgenError",
    "UnknownCodeError",
    "build",
    "check",
    "generate",
    "parse_table",
]
