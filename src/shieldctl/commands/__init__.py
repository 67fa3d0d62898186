"""shieldctl subcommands.

Command modules are imported inside :func:`register_commands` so importing
:mod:`shieldctl.cli` stays light.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach the ``build`` group and the wire-JSON commands to *cli*."""
    from shieldctl.commands.build import build
    from shieldctl.commands.encode import hash_cmd, sign_bytes
    from shieldctl.commands.inspect_cmd import inspect_cmd
    from shieldctl.commands.signers import signers
    from shieldctl.commands.validate import validate

    for command in (build, inspect_cmd, validate, sign_bytes, signers, hash_cmd):
        cli.add_command(command)
