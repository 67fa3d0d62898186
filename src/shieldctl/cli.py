"""shieldctl entry point: global flags, settings, and command registration."""

from __future__ import annotations

import click

from shieldctl import __version__
from shieldctl.commands import register_commands
from shieldctl.commands._base import ShieldGroup
from shieldctl.commands._context import AppContext
from shieldctl.config.settings import ShieldSettings

_EXAMPLES = """\
  shieldctl build pause-pool --from 0a1b --pool-id 7 > pause.json
  shieldctl validate pause.json
  shieldctl --json inspect pause.json
  shieldctl -q hash pause.json
  shieldctl -c ./strict.toml validate withdraw.json"""


@click.group(cls=ShieldGroup, invoke_without_command=True, examples=_EXAMPLES)
@click.version_option(version=__version__, prog_name="shieldctl")
@click.option("--json", "json_output", is_flag=True, help="Emit results as JSON on stdout.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the essential value.")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logs and extra fields.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Read this TOML file instead of discovering shieldctl.toml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """Build, validate, and encode shield module commands."""
    ctx.obj = AppContext(ShieldSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
