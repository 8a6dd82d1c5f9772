"""Tests for operation-specific Rich renderers."""

from dtlfmt.domain.parser import parse
from dtlfmt.output.console import create_console, get_output
from dtlfmt.output.renderers import render_expression_tree, render_quiet, render_result
from dtlfmt.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


def _tree_text(text: str) -> str:
    console = create_console(no_color=True)
    console.print(render_expression_tree(parse(text).model_dump()))
    return get_output(console)


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        result = _err("parse", "MALFORMED_RULE", "Unsupported operator 'between'")
        output = render_result(result)
        assert "ERROR" in output
        assert "parse" in output
        assert "Unsupported operator 'between'" in output

    def test_verbose_shows_detail(self) -> None:
        result = _err("parse", "MALFORMED_RULE", "Bad", operator="between", position=2)
        output = render_result(result, verbose=True)
        assert "detail" in output
        assert "operator: between" in output
        assert "position: 2" in output

    def test_no_error_object(self) -> None:
        output = render_result(ServiceResult(ok=False, op="test"))
        assert "Unknown error" in output

    def test_markup_in_message_not_interpreted(self) -> None:
        result = _err("parse", "MALFORMED_RULE", "Unsupported operator '[bold]x'")
        assert "[bold]x" in render_result(result)


# ── Expression tree ──────────────────────────────────────────────────


class TestExpressionTree:
    def test_rules_clauses_and_operators(self) -> None:
        output = _tree_text("Rule|a|equals|1|AND|b|gt|2|OR|Rule|c|in|3")
        assert "Expression" in output
        assert "Rule 0" in output
        assert "Rule 1" in output
        assert "equals (exact match)" in output
        assert "gt (greater than)" in output
        assert "in (contains)" in output
        assert "AND" in output
        assert "OR" in output

    def test_operator_order(self) -> None:
        output = _tree_text("Rule|a|equals|1|AND|b|gt|2|OR|Rule|c|in|3")
        assert output.index("Rule 0") < output.index("AND") < output.index("OR")
        assert output.index("OR") < output.index("Rule 1")

    def test_unknown_operator_shown_verbatim(self) -> None:
        console = create_console(no_color=True)
        tree = render_expression_tree(
            {
                "rules": [
                    {
                        "clauses": [{"property": "a", "operator": "near", "value": "x"}],
                        "clause_operators": [],
                    }
                ],
                "rule_operators": [],
            }
        )
        console.print(tree)
        assert "near" in get_output(console)


# ── Op renderers ─────────────────────────────────────────────────────


class TestExpressionRenderer:
    def test_parse_result(self) -> None:
        expression = parse("Rule|country|in|US").model_dump()
        result = _ok(
            "parse", rule_count=1, clause_count=1, dtl="Rule|country|in|US", expression=expression
        )
        output = render_result(result)
        assert "OK" in output
        assert "rule_count: 1" in output
        assert "dtl: Rule|country|in|US" in output
        assert "country" in output
        assert "in (contains)" in output

    def test_edit_shows_action(self) -> None:
        result = _ok("edit", action="add_rule", rule_count=0, clause_count=0, dtl="")
        assert "action: add_rule" in render_result(result)


class TestFormatRenderer:
    def test_format(self) -> None:
        output = render_result(_ok("format", dtl="Rule|a|in|1", changed=True))
        assert "dtl: Rule|a|in|1" in output
        assert "changed" not in output

    def test_verbose_shows_changed(self) -> None:
        output = render_result(_ok("format", dtl="Rule|a|in|1", changed=True), verbose=True)
        assert "changed: True" in output


class TestOperatorsRenderer:
    def test_table(self) -> None:
        result = _ok(
            "operators",
            comparison=[{"operator": "gt", "description": "gt (greater than)"}],
            logical=["AND", "OR"],
        )
        output = render_result(result)
        assert "Operator" in output
        assert "gt (greater than)" in output
        assert "logical: AND, OR" in output


class TestGenericRenderer:
    def test_unknown_op(self) -> None:
        output = render_result(_ok("custom", key="val", items=[1, 2]))
        assert "key: val" in output
        assert "items: [1,2]" in output


class TestRenderQuiet:
    def test_dtl(self) -> None:
        assert render_quiet(_ok("parse", dtl="Rule|a|in|1")) == "Rule|a|in|1"

    def test_description(self) -> None:
        assert render_quiet(_ok("describe", description="in (contains)")) == "in (contains)"

    def test_error(self) -> None:
        output = render_quiet(_err("parse", "EMPTY_INPUT", "Input cannot be null or empty"))
        assert output == "ERROR: parse — Input cannot be null or empty"
