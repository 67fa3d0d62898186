"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, shieldctl.toml only contains
overrides.  An empty file (or no file) reproduces network behavior exactly.
"""

from __future__ import annotations

from pydantic import BaseModel

from shieldctl.domain.validation import ValidationPolicy

# --- shieldctl.toml sections ---


class ValidationConfig(BaseModel):
    """[validation] section.

    Both flags tighten a permissive variant.  Turning either on diverges
    from the deployed network and is a product decision, not a fix.
    """

    model_config = {"frozen": True}

    strict_withdraw_collateral: bool = False
    strict_withdraw_reimbursement: bool = False

    def to_policy(self) -> ValidationPolicy:
        return ValidationPolicy(
            strict_withdraw_collateral=self.strict_withdraw_collateral,
            strict_withdraw_reimbursement=self.strict_withdraw_reimbursement,
        )


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    hash_in_human: bool = True


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str | None = None
