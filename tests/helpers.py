from __future__ import annotations

import types

SUCCESS_ROW = "00000 S ERRCODE_SUCCESSFUL_COMPLETION\n"
SYNTAX_ROW = "42601 E ERRCODE_SYNTAX_ERROR syntax_error\n"
WARNING_ROW = "01000    W    ERRCODE_WARNING                       warning\n"

SMALL_TABLE = """\
#
# sample table
#

Section: Class 00 - Successful Completion

00000    S    ERRCODE_SUCCESSFUL_COMPLETION          successful_completion

Section: Class 01 - Warning

01000    W    ERRCODE_WARNING                        warning
01P01    W    ERRCODE_WARNING_DEPRECATED_FEATURE     deprecated_feature

Section: Class 42 - Syntax Error or Access Rule Violation

42601    E    ERRCODE_SYNTAX_ERROR                   syntax_error
42P01    E    ERRCODE_UNDEFINED_TABLE                undefined_table
XX000    E    ERRCODE_INTERNAL_ERROR
"""


def _data_rows(table: str) -> list[str]:
    """Return the lines of *table* that start with a code."""
    return [
        line
        for line in table.splitlines(keepends=True)
        if line[:1].isalnum() and not line.startswith("Section")
    ]


def _load_generated(source: str, name: str = "states") -> types.ModuleType:
    """Execute generated registry *source* as a fresh module."""
    module = types.ModuleType(name)
    exec(compile(source, f"{name}.py", "exec"), module.__dict__)
    return module
