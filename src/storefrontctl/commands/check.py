"""Command: advisory content checks."""

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
  storefrontctl check store.json
  storefrontctl -q check store.json
  storefrontctl --json check store.json""",
)
@document_argument
@click.option("--strict", is_flag=True, help="Exit with status 2 when any issue is found.")
@click.pass_obj
def check(app: AppContext, document: Path, strict: bool) -> None:
    """Report empty labels, invalid links and missing alt text in DOCUMENT."""
    from storefrontctl.services.check import CheckService

    result = CheckService(app.settings).check(document)
    app.emit(result)
    if strict and result.data.get("count"):
        raise SystemExit(2)
