"""Pluggy hook specifications for shieldctl.

Hooks observe verdicts; they cannot change them.  ``msg_type`` is the
per-variant classification tag and is unique across the command set.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("shieldctl")
hookimpl = pluggy.HookimplMarker("shieldctl")


class ShieldctlHookSpec:
    """Hook specifications for the shieldctl plugin system."""

    @hookspec
    def post_check(
        self,
        msg_type: str,
        route: str,
        signers: list[str],
        ok: bool,
        error_code: str | None,
        msg_hash: str,
    ) -> None:
        """Called after a command has been validated."""
