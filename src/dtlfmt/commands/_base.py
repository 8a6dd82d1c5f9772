"""Click building blocks shared by the dtlfmt commands.

``DtlCommand`` and ``DtlGroup`` take an ``examples=`` string and expose
it through an eager ``--examples`` flag, so ``--help`` stays short.
``DTL_TEXT`` is the argument type for DTL input; ``-`` reads stdin.
"""

from __future__ import annotations

from typing import Any

import click

STDIN_MARKER = "-"


class DtlTextParam(click.ParamType):
    """A DTL expression given inline, or ``-`` to read it from stdin."""

    name = "dtl"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> str:
        if value == STDIN_MARKER:
            return click.get_text_stream("stdin").read()
        return value


DTL_TEXT = DtlTextParam()


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(ctx.command.examples)  # type: ignore[attr-defined]
    ctx.exit(0)


class _ExamplesMixin:
    """Adds ``--examples`` to any command created with ``examples=``."""

    params: list[click.Parameter]

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_print_examples,
                    help="Show usage examples.",
                )
            )


class DtlCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class DtlGroup(_ExamplesMixin, click.Group):
    """Group whose subcommands default to :class:`DtlCommand`."""

    command_class = DtlCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
