"""Command: stateless well-formedness check."""

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
  shieldctl validate create_pool.json
  cat purchase.json | shieldctl validate
  shieldctl --json validate purchase.json
  shieldctl validate --strict withdraw_collateral.json""",
)
@command_file
@click.option("--strict", is_flag=True, help="Apply the strict validation policy.")
@click.pass_obj
def validate(app: AppContext, source: IO[bytes], strict: bool) -> None:
    """Exit 0 if the command is well-formed, 1 with the violated rule otherwise."""
    from shieldctl.domain.validation import STRICT_POLICY

    raw = read_source(source, "validate")
    if not isinstance(raw, bytes):
        app.emit(raw)
        return
    svc = app.make_service(policy=STRICT_POLICY) if strict else app.service
    app.emit(svc.validate(raw))
