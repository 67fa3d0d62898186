"""Commands: canonical sign bytes and content hash."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from shieldctl.commands._base import ShieldCommand
from shieldctl.commands._input import command_file, read_source

if TYPE_CHECKING:
    from shieldctl.commands._context import AppContext


@click.command(
    "sign-bytes",
    cls=ShieldCommand,
    examples="""\
  shieldctl sign-bytes create_pool.json
  shieldctl sign-bytes create_pool.json > to_sign.bin
  shieldctl --json sign-bytes create_pool.json""",
)
@command_file
@click.pass_obj
def sign_bytes(app: AppContext, source: IO[bytes]) -> None:
    """Print the exact bytes a signer signs for the command."""
    raw = read_source(source, "sign_bytes")
    if not isinstance(raw, bytes):
        app.emit(raw)
        return
    app.emit(app.service.sign_bytes(raw))


@click.command(
    "hash",
    cls=ShieldCommand,
    examples="""\
  shieldctl hash create_pool.json
  shieldctl -q hash create_pool.json""",
)
@command_file
@click.pass_obj
def hash_cmd(app: AppContext, source: IO[bytes]) -> None:
    """Print the command's content identity (SHA-256 of its sign bytes)."""
    raw = read_source(source, "hash")
    if not isinstance(raw, bytes):
        app.emit(raw)
        return
    app.emit(app.service.hash(raw))
