"""Hand-off bundle for execution logic.

:func:`prepare` runs signer resolution, validation, and encoding in that
order and returns everything execution needs in one immutable value.
Execution reads the command and signers and never re-validates.
"""

from __future__ import annotations

from dataclasses import dataclass

from shieldctl.domain.address import Address
from shieldctl.domain.codec import content_hash, sign_bytes
from shieldctl.domain.msgs import Msg
from shieldctl.domain.signers import get_signers
from shieldctl.domain.validation import ValidationPolicy, ValidationResult, check


@dataclass(frozen=True)
class PreparedCommand:
    """A command with its signers, verdict, and canonical bytes."""

    msg: Msg
    signers: tuple[Address, ...]
    result: ValidationResult
    sign_bytes: bytes

    @property
    def ok(self) -> bool:
        return self.result.ok

    @property
    def hash(self) -> str:
        return content_hash(self.sign_bytes)


def prepare(msg: Msg, policy: ValidationPolicy | None = None) -> PreparedCommand:
    """Resolve signers, validate, and encode *msg*."""
    signers = tuple(get_signers(msg))
    result = check(msg, policy)
    return PreparedCommand(
        msg=msg,
        signers=signers,
        result=result,
        sign_bytes=sign_bytes(msg),
    )
