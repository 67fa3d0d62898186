"""Shared FILE argument handling for commands that read wire JSON."""

from __future__ import annotations

from typing import IO

import click

from shieldctl.services.result import ServiceResult

command_file = click.argument("source", type=click.File("rb"), default="-", metavar="FILE")


def read_source(source: IO[bytes], op: str) -> bytes | ServiceResult:
    """Read raw bytes from *source*, or a READ_ERROR result on failure."""
    try:
        return source.read()
    except OSError as exc:
        return ServiceResult.failure(op, "READ_ERROR", str(exc))
