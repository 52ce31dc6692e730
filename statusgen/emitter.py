"""Emit a status registry module from parsed status entries."""

from __future__ import annotations

from typing import Dict, List, Optional

import libcst as cst

from .config import StatusgenConfig
from .table_parser import StatusEntry

HEADER = "# Autogenerated file - DO NOT EDIT"

_INDENT = "    "


# ---------------------------------------------------------------------------
# Node helpers
# ---------------------------------------------------------------------------


def _string(value: str) -> cst.SimpleString:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return cst.SimpleString(f'"{escaped}"')


def _newline(indent: str = "") -> cst.ParenthesizedWhitespace:
    """Whitespace that breaks the line and indents the next token by *indent*."""
    return cst.ParenthesizedWhitespace(last_line=cst.SimpleWhitespace(indent))


def _keyword_arg(name: str, value: cst.BaseExpression, last: bool) -> cst.Arg:
    return cst.Arg(
        keyword=cst.Name(name),
        value=value,
        equal=cst.AssignEqual(
            whitespace_before=cst.SimpleWhitespace(""),
            whitespace_after=cst.SimpleWhitespace(""),
        ),
        comma=cst.Comma(whitespace_after=_newline("" if last else _INDENT)),
    )


def _assign(
    name: str, value: cst.BaseExpression, leading_lines: List[cst.EmptyLine]
) -> cst.SimpleStatementLine:
    return cst.SimpleStatementLine(
        body=[cst.Assign(targets=[cst.AssignTarget(cst.Name(name))], value=value)],
        leading_lines=leading_lines,
    )


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


def _header(config: StatusgenConfig) -> List[cst.SimpleStatementLine]:
    """Runtime imports placed under the generated-file marker."""
    package = config.runtime_package
    return [
        cst.parse_statement(f"from {package}.errors import UnknownCodeError\n"),
        cst.parse_statement(f"from {package}.state import Severity, State\n"),
    ]


def _constant(entry: StatusEntry) -> cst.SimpleStatementLine:
    """``NAME = State(...)`` preceded by a ``#:`` doc comment when described."""
    description: cst.BaseExpression
    if entry.description is None:
        description = cst.Name("None")
    else:
        description = _string(entry.description)

    severity = cst.Attribute(cst.Name("Severity"), cst.Name(entry.severity.name))
    fields = [
        ("code", _string(entry.code)),
        ("name", _string(entry.identifier)),
        ("severity", severity),
        ("description", description),
    ]
    args = [
        _keyword_arg(name, value, last=i == len(fields) - 1)
        for i, (name, value) in enumerate(fields)
    ]
    call = cst.Call(
        func=cst.Name("State"), args=args, whitespace_before_args=_newline(_INDENT)
    )

    leading = [cst.EmptyLine()]
    if entry.description is not None:
        leading.append(cst.EmptyLine(comment=cst.Comment(f"#: {entry.description}")))
    return _assign(entry.identifier, call, leading)


def _lookup_table(entries: Dict[str, StatusEntry]) -> cst.SimpleStatementLine:
    """``_BY_CODE = {"00000": SUCCESSFUL_COMPLETION, ...}`` in code order."""
    codes = list(entries)
    elements = [
        cst.DictElement(
            key=_string(code),
            value=cst.Name(entries[code].identifier),
            comma=cst.Comma(
                whitespace_after=_newline("" if i == len(codes) - 1 else _INDENT)
            ),
        )
        for i, code in enumerate(codes)
    ]
    if elements:
        value = cst.Dict(
            elements=elements,
            lbrace=cst.LeftCurlyBrace(whitespace_after=_newline(_INDENT)),
        )
    else:
        value = cst.Dict(elements=[])
    return _assign("_BY_CODE", value, [cst.EmptyLine(), cst.EmptyLine()])


def _lookup_function(config: StatusgenConfig) -> cst.FunctionDef:
    func = cst.parse_statement(
        f"def {config.lookup_name}(code: str) -> State:\n"
        '    """Return the State registered under *code*.\n'
        "\n"
        "    Raises UnknownCodeError when *code* is not in the registry.\n"
        '    """\n'
        "    try:\n"
        "        return _BY_CODE[code]\n"
        "    except KeyError:\n"
        "        raise UnknownCodeError(code) from None\n"
    )
    return func.with_changes(leading_lines=[cst.EmptyLine(), cst.EmptyLine()])


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def build_module(
    entries: Dict[str, StatusEntry], config: Optional[StatusgenConfig] = None
) -> cst.Module:
    """Return the registry module for *entries* as a libcst tree.

    Constants and lookup keys follow ascending code order whatever the
    iteration order of *entries*.
    """
    if config is None:
        config = StatusgenConfig()
    ordered = {code: entries[code] for code in sorted(entries)}
    body: List[cst.BaseStatement] = []
    body.extend(_header(config))
    body.extend(_constant(entry) for entry in ordered.values())
    body.append(_lookup_table(ordered))
    body.append(_lookup_function(config))
    return cst.Module(body=body, header=[cst.EmptyLine(comment=cst.Comment(HEADER))])


def generate_source(
    entries: Dict[str, StatusEntry],
    config: Optional[StatusgenConfig] = None,
    filename: str = "<statusgen>",
) -> str:
    """Render the registry module for *entries* and check that it compiles."""
    source = build_module(entries, config).code
    compile(source, filename, "exec")
    return source
