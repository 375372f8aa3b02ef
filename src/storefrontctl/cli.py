"""``storefrontctl`` entry point.

Global flags are folded into :class:`StorefrontSettings` once, at the root,
and every subcommand reads them back from the :class:`AppContext` on
``ctx.obj``.
"""

from __future__ import annotations

import click

from storefrontctl import __version__
from storefrontctl.commands import register_commands
from storefrontctl.commands._base import StorefrontGroup
from storefrontctl.commands._context import AppContext
from storefrontctl.config.settings import StorefrontSettings

_ROOT_EXAMPLES = """\
  storefrontctl check store.json
  storefrontctl migrate store.json --dry-run
  storefrontctl --json adapt store.json
  storefrontctl render store.json -b mobile --edit -o preview.html
  storefrontctl -c staging.toml templates list"""


@click.group(cls=StorefrontGroup, examples=_ROOT_EXAMPLES, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="storefrontctl")
@click.option("--json", "json_output", is_flag=True, help="Print the service result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print identifiers only.")
@click.option("-v", "--verbose", is_flag=True, help="More detail, plus debug logging on stderr.")
@click.option("--log-json", is_flag=True, help="Log to stderr as JSON lines.")
@click.option("-c", "--config", "config_path", default=None, help="Use this storefrontctl.toml instead of discovery.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Migrate, check and render storefront store documents.

    A store document is a JSON file holding the template id, the raw store
    settings and the page layout.
    """
    settings = StorefrontSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
