"""Command: required signers of a command."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from shieldctl.commands._base import ShieldCommand
from shieldctl.commands._input import command_file, read_source

if TYPE_CHECKING:
    from shieldctl.commands._context import AppContext


@click.command(
    cls=ShieldCommand,
    examples="""\
  shieldctl signers create_pool.json
  shieldctl -q signers create_pool.json""",
)
@command_file
@click.pass_obj
def signers(app: AppContext, source: IO[bytes]) -> None:
    """List the accounts that must sign the command, in order."""
    raw = read_source(source, "signers")
    if not isinstance(raw, bytes):
        app.emit(raw)
        return
    app.emit(app.service.signers(raw))
