"""Command: migrate a store document's page to the current schema."""

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
  storefrontctl migrate store.json
  storefrontctl migrate store.json --check
  storefrontctl migrate store.json --dry-run
  storefrontctl migrate store.json --no-backup
  storefrontctl --json migrate store.json""",
)
@document_argument
@click.option("--check", "check_only", is_flag=True, help="Only report pending steps.")
@click.option("--dry-run", is_flag=True, help="Migrate in memory and print the result.")
@click.option("--no-backup", is_flag=True, help="Do not copy the file to <name>.bak first.")
@click.pass_obj
def migrate(app: AppContext, document: Path, check_only: bool, dry_run: bool, no_backup: bool) -> None:
    """Upgrade the page document inside DOCUMENT to the current schema."""
    from storefrontctl.services.migrate import MigrateService

    settings = app.settings
    if no_backup:
        settings = settings.model_copy(
            update={"migrate": settings.migrate.model_copy(update={"backup": False})}
        )
    svc = MigrateService(settings)

    if check_only:
        app.emit(svc.check(document))
    else:
        app.emit(svc.apply(document, write=not dry_run))
