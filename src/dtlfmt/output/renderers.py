"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from dtlfmt.domain.operators import describe
from dtlfmt.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from dtlfmt.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Text-producing ops print the bare DTL line so the output can be
    piped straight back into another command.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if "dtl" in result.data:
        return str(result.data["dtl"])
    if "description" in result.data:
        return str(result.data["description"])
    return f"OK: {result.op}"


def render_expression_tree(expression: dict[str, Any]) -> Tree:
    """Build a read-only tree of rules, clauses, and operators.

    *expression* is the ``model_dump()`` of an Expression.
    """
    tree = Tree(Text("Expression", style="dtl.op"))
    rules = expression.get("rules", [])
    rule_operators = expression.get("rule_operators", [])

    for index, rule in enumerate(rules):
        rule_node = tree.add(Text(f"Rule {index}", style="dtl.rule"))
        clauses = rule.get("clauses", [])
        clause_operators = rule.get("clause_operators", [])
        for j, clause in enumerate(clauses):
            rule_node.add(
                Text.assemble(
                    (f"{j}  ", "dtl.key"),
                    (clause.get("property", ""), "dtl.property"),
                    "  ",
                    (describe(clause.get("operator", "")), "dtl.comparison"),
                    "  ",
                    (clause.get("value", ""), "dtl.value"),
                )
            )
            if j < len(clause_operators):
                rule_node.add(Text(clause_operators[j], style="dtl.logical"))
        if index < len(rule_operators):
            tree.add(Text(rule_operators[index], style="dtl.logical"))

    return tree


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="dtl.ok")
    op = Text(f"  {result.op}", style="dtl.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="dtl.key")
    if key == "dtl":
        v = Text(str(value), style="dtl.dtl")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="dtl.error")
    op = Text(f"  {result.op}", style="dtl.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Expression renderers ──────────────────────────────────────────────


def _render_expression(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render parse/scratch/edit results: summary fields plus the rule tree."""
    d = result.data
    _status_line(console, result)
    for key in ("action", "rule_count", "clause_count", "dtl"):
        if key in d:
            _field(console, key, d[key])
    if d.get("expression"):
        console.print()
        console.print(render_expression_tree(d["expression"]))


def _render_format(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "dtl", result.data.get("dtl", ""))
    if verbose:
        _field(console, "changed", result.data.get("changed", False))


def _render_operators(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the operator catalog as a table."""
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Operator", style="dtl.comparison", no_wrap=True)
    table.add_column("Description")
    for item in result.data.get("comparison", []):
        table.add_row(str(item.get("operator", "")), str(item.get("description", "")))
    console.print(table)
    _field(console, "logical", ", ".join(result.data.get("logical", [])))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "parse": _render_expression,
    "scratch": _render_expression,
    "edit": _render_expression,
    "format": _render_format,
    "operators": _render_operators,
    "describe": _render_generic,
}
