"""Subcommand modules for storefrontctl.

:func:`register_commands` imports each module on registration so the root
module stays small.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root group."""
    # --- Groups ---
    from storefrontctl.commands.fields import fields
    from storefrontctl.commands.templates import templates

    cli.add_command(fields)
    cli.add_command(templates)

    # --- Standalone commands ---
    from storefrontctl.commands.adapt import adapt
    from storefrontctl.commands.check import check
    from storefrontctl.commands.migrate import migrate
    from storefrontctl.commands.render import render
    from storefrontctl.commands.resolve import resolve

    cli.add_command(migrate)
    cli.add_command(check)
    cli.add_command(adapt)
    cli.add_command(resolve)
    cli.add_command(render)
