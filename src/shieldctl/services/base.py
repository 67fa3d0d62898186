"""BaseService — foundation for shieldctl services.

Services receive the validation policy and an optional plugin manager at
construction time.  Domain calls stay pure; services add logging, hook
dispatch, and the ServiceResult envelope.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from shieldctl.domain.validation import DEFAULT_POLICY, ValidationPolicy

if TYPE_CHECKING:
    from shieldctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes."""

    def __init__(
        self,
        *,
        policy: ValidationPolicy | None = None,
        plugins: PluginManager | None = None,
    ) -> None:
        self._policy = policy or DEFAULT_POLICY
        self._plugins = plugins

    @property
    def policy(self) -> ValidationPolicy:
        return self._policy

    def _dispatch_hook(self, hook_name: str, payload: dict[str, Any], warnings: list[str]) -> None:
        """Call a plugin hook. No-op without a plugin manager.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        if self._plugins is None:
            return
        try:
            getattr(self._plugins.hook, hook_name)(**payload)
        except Exception:
            logger.debug("Hook dispatch failed for %s", hook_name, exc_info=True)
            warnings.append(f"Hook dispatch failed for {hook_name}")
