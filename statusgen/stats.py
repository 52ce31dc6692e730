"""Cumulative statistics for a single statusgen run."""

import difflib
from dataclasses import dataclass, field
from typing import Dict, List

from .state import Severity
from .table_parser import StatusEntry


@dataclass
class GenStats:
    """Holds cumulative counts for a single statusgen run."""

    # Entry counts by severity
    errors: int = 0
    warnings: int = 0
    successes: int = 0

    # Entries carrying a description
    described: int = 0

    # Output tracking
    files_written: List[str] = field(default_factory=list)
    lines_changed: int = 0

    def record_entries(self, entries: Dict[str, StatusEntry]) -> None:
        """Add the severity and description counts of *entries*."""
        for entry in entries.values():
            if entry.severity is Severity.ERROR:
                self.errors += 1
            elif entry.severity is Severity.WARNING:
                self.warnings += 1
            else:
                self.successes += 1
            if entry.description is not None:
                self.described += 1

    @property
    def total_entries(self) -> int:
        return self.errors + self.warnings + self.successes

    def count_lines_changed(self, original: str, new: str) -> None:
        """Add the number of added/removed lines between *original* and *new*."""
        orig_lines = original.splitlines()
        new_lines = new.splitlines()
        diff = difflib.unified_diff(orig_lines, new_lines)
        for line in diff:
            if line.startswith(("+", "-")) and not line.startswith(("+++", "---")):
                self.lines_changed += 1

    def format_summary(self) -> List[str]:
        """Return a list of lines forming the human-readable run summary."""
        lines = ["--- statusgen summary ---"]
        lines.append("entries:")
        lines.append(f"  error:       {self.errors}")
        lines.append(f"  warning:     {self.warnings}")
        lines.append(f"  success:     {self.successes}")
        lines.append(f"  total:       {self.total_entries}")
        lines.append(f"  described:   {self.described}")
        if self.files_written:
            flist = ", ".join(self.files_written)
            lines.append(f"files written ({len(self.files_written)}): {flist}")
        else:
            lines.append("files written: none")
        lines.append(f"lines changed: {self.lines_changed}")
        return lines
