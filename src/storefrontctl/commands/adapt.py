"""Command: show the universal template data built from a store document."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from storefrontctl.commands._base import StorefrontCommand, document_argument

if TYPE_CHECKING:
    from storefrontctl.commands._context import AppContext


@click.command(
    cls=StorefrontCommand,
    examples="""\
  storefrontctl adapt store.json
  storefrontctl adapt store.json --no-presets
  storefrontctl --json adapt store.json --camel""",
)
@document_argument
@click.option(
    "--presets/--no-presets",
    default=None,
    help="Fill blank settings from the template's theme preset.",
)
@click.option("--camel", is_flag=True, help="Use camelCase field names.")
@click.pass_obj
def adapt(app: AppContext, document: Path, presets: bool | None, camel: bool) -> None:
    """Map DOCUMENT's raw settings onto the universal field set."""
    from storefrontctl.services.adapt import AdaptService

    app.emit(AdaptService(app.settings).adapt(document, apply_presets=presets, camel_case=camel))
