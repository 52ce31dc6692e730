"""Runtime types referenced by generated status registries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Severity(Enum):
    """Classification of a status code."""

    ERROR = "Error"
    WARNING = "Warning"
    SUCCESS = "Success"

    @classmethod
    def from_token(cls, token: str) -> "Severity":
        """Map a single-letter table token (``E``, ``W``, ``S``) to a member."""
        try:
            return _TOKENS[token]
        except KeyError:
            raise ValueError(f"unknown severity token {token!r}") from None


_TOKENS = {
    "E": Severity.ERROR,
    "W": Severity.WARNING,
    "S": Severity.SUCCESS,
}


@dataclass(frozen=True)
class State:
    """One entry of a generated status registry."""

    code: str
    name: str
    severity: Severity
    description: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    @property
    def is_success(self) -> bool:
        return self.severity is Severity.SUCCESS

    def __str__(self) -> str:
        return f"{self.code} {self.name}"
