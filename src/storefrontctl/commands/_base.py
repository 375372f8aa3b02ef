"""Shared Click pieces for storefrontctl commands.

* :class:`StorefrontCommand` / :class:`StorefrontGroup` take an ``examples``
  string and expose it as ``--examples``.
* :func:`document_argument` and :func:`breakpoint_options` declare the store
  document and target breakpoint the same way on every command.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import click

from storefrontctl.domain.breakpoints import BREAKPOINT_KEYS

F = TypeVar("F", bound=Callable[..., Any])


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class StorefrontCommand(click.Command):
    """Command with an optional ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class StorefrontGroup(click.Group):
    """Group whose subcommands are :class:`StorefrontCommand` by default."""

    command_class = StorefrontCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def document_argument(f: F) -> F:
    """``DOCUMENT``: store JSON path, resolved against the project root by services."""
    return click.argument("document", type=click.Path(path_type=Path))(f)


def breakpoint_options(f: F) -> F:
    """``-b/--breakpoint`` and ``--width``; the breakpoint wins when both are given."""
    f = click.option(
        "--width",
        type=float,
        default=None,
        help="Container width in pixels, mapped to a breakpoint.",
    )(f)
    return click.option(
        "-b",
        "--breakpoint",
        type=click.Choice(BREAKPOINT_KEYS, case_sensitive=False),
        default=None,
        help="Target breakpoint (default: [render] default_breakpoint).",
    )(f)
