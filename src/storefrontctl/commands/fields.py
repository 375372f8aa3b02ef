"""Command group: universal field lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from storefrontctl.commands._base import StorefrontGroup
from storefrontctl.services.adapt import AdaptService

if TYPE_CHECKING:
    from storefrontctl.commands._context import AppContext

_FIELDS_EXAMPLES = """\
  storefrontctl fields list
  storefrontctl fields list --category Hero
  storefrontctl fields list --all
  storefrontctl fields path hero_title
  storefrontctl fields path heroImageZoom"""


@click.group(cls=StorefrontGroup, examples=_FIELDS_EXAMPLES)
@click.pass_obj
def fields(app: AppContext) -> None:
    """Inspect the universal template fields."""


@fields.command(
    "list",
    examples="""\
  storefrontctl fields list
  storefrontctl fields list --category Colors
  storefrontctl -q fields list""",
)
@click.option("--category", default=None, help="Only fields in this category.")
@click.option("--all", "include_all", is_flag=True, help="Include fields the editor hides.")
@click.pass_obj
def list_fields(app: AppContext, category: str | None, include_all: bool) -> None:
    """List universal fields with their edit paths."""
    app.emit(AdaptService(app.settings).list_fields(category, include_all=include_all))


@fields.command(
    "path",
    examples="""\
  storefrontctl fields path hero_title
  storefrontctl -q fields path storeLogo""",
)
@click.argument("name")
@click.pass_obj
def field_path(app: AppContext, name: str) -> None:
    """Print the edit path of field NAME (snake_case or camelCase)."""
    app.emit(AdaptService(app.settings).edit_path(name))
