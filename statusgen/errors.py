"""Statusgen-specific exceptions."""


class StatusgenError(Exception):
    """Base class for every fault raised by statusgen."""


class ConfigError(StatusgenError, TypeError):
    """Raised when a configuration value has the wrong type."""


class MalformedRowError(StatusgenError, ValueError):
    """Raised when a table row cannot be turned into a status entry.

    Generation aborts before anything is written.  A malformed table is a
    build configuration defect and has to be fixed in the table itself.
    """

    def __init__(self, lineno: int, line: str, reason: str) -> None:
        self.lineno = lineno
        self.line = line
        self.reason = reason
        super().__init__(f"line {lineno}: {reason}: {line.strip()!r}")


class UnknownCodeError(StatusgenError, KeyError):
    """Raised by a generated ``from_code`` for a code missing from the registry."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(code)

    def __str__(self) -> str:
        return f"unknown status code: {self.code!r}"
