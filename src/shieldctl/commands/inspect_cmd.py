"""Command: full pipeline report for a wire-JSON command."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from shieldctl.commands._base import ShieldCommand
from shieldctl.commands._input import command_file, read_source

if TYPE_CHECKING:
    from shieldctl.commands._context import AppContext


@click.command(
    "inspect",
    cls=ShieldCommand,
    examples="""\
  shieldctl inspect create_pool.json
  shieldctl build pause-pool --from 0a1b --pool-id 7 | shieldctl inspect -
  shieldctl --json inspect purchase.json
  shieldctl inspect --strict withdraw.json""",
)
@command_file
@click.option("--strict", is_flag=True, help="Apply the strict validation policy.")
@click.pass_obj
def inspect_cmd(app: AppContext, source: IO[bytes], strict: bool) -> None:
    """Show type, signers, verdict, hash, and fields of a command."""
    from shieldctl.domain.validation import STRICT_POLICY

    raw = read_source(source, "inspect")
    if not isinstance(raw, bytes):
        app.emit(raw)
        return
    svc = app.make_service(policy=STRICT_POLICY) if strict else app.service
    app.emit(svc.inspect(raw))
