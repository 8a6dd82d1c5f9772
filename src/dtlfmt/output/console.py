"""Rich console used by the renderers.

Renderers draw into an in-memory console and return the captured text,
so :func:`~dtlfmt.output.formatters.format_result` stays a pure
``ServiceResult -> str`` function. Rich drops colour codes by itself
when the buffer is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

DTL_THEME = Theme(
    {
        # status
        "dtl.ok": "bold green",
        "dtl.error": "bold red",
        "dtl.warning": "bold yellow",
        "dtl.op": "bold cyan",
        "dtl.key": "dim",
        # expression parts
        "dtl.rule": "bold blue",
        "dtl.property": "bold",
        "dtl.comparison": "magenta",
        "dtl.value": "green",
        "dtl.logical": "bold yellow",
        "dtl.dtl": "cyan",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Return a themed console writing into a fresh ``StringIO``."""
    return Console(
        file=StringIO(),
        theme=DTL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    buffer = console.file
    if not isinstance(buffer, StringIO):
        msg = "console was not created by create_console()"
        raise TypeError(msg)
    return buffer.getvalue()
