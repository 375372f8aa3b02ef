"""Command group: browse registered storefront templates."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from storefrontctl.commands._base import StorefrontGroup
from storefrontctl.services.templates import TemplateService

if TYPE_CHECKING:
    from storefrontctl.commands._context import AppContext

_TEMPLATES_EXAMPLES = """\
  storefrontctl templates list
  storefrontctl templates list --category luxury
  storefrontctl templates show jewelry
  storefrontctl -v templates show gold-fashion"""


@click.group(cls=StorefrontGroup, examples=_TEMPLATES_EXAMPLES)
@click.pass_obj
def templates(app: AppContext) -> None:
    """List and inspect storefront templates."""


@templates.command(
    "list",
    examples="""\
  storefrontctl templates list
  storefrontctl -q templates list --category apparel""",
)
@click.option("--category", default=None, help="Only templates in this category.")
@click.pass_obj
def list_templates(app: AppContext, category: str | None) -> None:
    """List registered templates."""
    app.emit(TemplateService(app.settings).list_templates(category))


@templates.command(
    "show",
    examples="""\
  storefrontctl templates show fashion
  storefrontctl --json templates show cafe""",
)
@click.argument("template_id")
@click.pass_obj
def show(app: AppContext, template_id: str) -> None:
    """Show a template's metadata, theme preset and settings panel."""
    app.emit(TemplateService(app.settings).show(template_id))
