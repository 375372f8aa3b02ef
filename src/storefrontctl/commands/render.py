"""Command: render a store document to HTML."""

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
  storefrontctl render store.json > index.html
  storefrontctl render store.json -o build/index.html
  storefrontctl render store.json -t jewelry -b mobile
  storefrontctl render store.json --width 700 --edit""",
)
@document_argument
@click.option("-t", "--template", default=None, help="Template id (default: the document's).")
@breakpoint_options
@click.option("--edit/--no-edit", default=None, help="Emit data-edit-path attributes.")
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None, help="Write HTML here.")
@click.pass_obj
def render(
    app: AppContext,
    document: Path,
    template: str | None,
    breakpoint: str | None,
    width: float | None,
    edit: bool | None,
    output: Path | None,
) -> None:
    """Render DOCUMENT with its storefront template.

    Without --output the HTML goes to stdout.
    """
    from storefrontctl.services.render import RenderService

    result = RenderService(app.settings).render(
        document,
        template=template,
        breakpoint=breakpoint,
        width=width,
        edit=edit,
        output=output,
    )
    settings = app.output_settings
    if result.ok and output is None and not (settings.json_output or settings.quiet):
        click.echo(result.data["html"], nl=False)
        app.emit_warnings(result)
        return
    app.emit(result)
