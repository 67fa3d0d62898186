"""Output mode dispatch.

The CLI renders ServiceResult for humans (Rich), for scripts (--quiet), or
for machines (--json).  ``sign_bytes`` is always emitted verbatim outside
JSON mode so it can be piped straight into a signer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from shieldctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from shieldctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Rendering switches derived from global CLI flags."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    show_hash: bool = True


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if result.ok and result.op == "sign_bytes":
        return str(result.data["sign_bytes"])
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, show_hash=settings.show_hash)
