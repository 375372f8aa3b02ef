"""Command: resolve one document path for a breakpoint."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from storefrontctl.commands._base import StorefrontCommand, breakpoint_options, document_argument

if TYPE_CHECKING:
    from storefrontctl.commands._context import AppContext


@click.command(
    cls=StorefrontCommand,
    examples="""\
  storefrontctl resolve store.json layout.hero.imageHeight -b mobile
  storefrontctl resolve store.json layout.featured.columns --width 700
  storefrontctl resolve store.json layout.hero -b tablet
  storefrontctl resolve store.json __settings.primary_color""",
)
@document_argument
@click.argument("doc_path")
@breakpoint_options
@click.pass_obj
def resolve(
    app: AppContext,
    document: Path,
    doc_path: str,
    breakpoint: str | None,
    width: float | None,
) -> None:
    """Print the concrete value of DOC_PATH in DOCUMENT."""
    from storefrontctl.services.resolve import ResolveService

    app.emit(ResolveService(app.settings).resolve(document, doc_path, breakpoint=breakpoint, width=width))
