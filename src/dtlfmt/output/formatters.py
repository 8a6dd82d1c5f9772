"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output, trees, tables)
or machines (--json). The formatter layer adapts ServiceResult to the
requested output mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from dtlfmt.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from dtlfmt.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode selected by the global CLI flags."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode. When omitted, *json_output* selects
            between JSON and Rich output.
        json_output: Shorthand used when *settings* is not given.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
