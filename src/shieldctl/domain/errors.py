"""Error codes, failure kinds, and domain exceptions.

Every validation failure carries a specific :class:`ErrorCode` (what rule
was violated) and the broader :class:`FailureKind` it belongs to (what a
client has to fix).
"""

from __future__ import annotations

from enum import StrEnum


class FailureKind(StrEnum):
    """Coarse failure taxonomy surfaced to submitting clients."""

    EMPTY_SIGNER = "empty_signer"
    INVALID_IDENTIFIER = "invalid_identifier"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_DURATION = "invalid_duration"
    EMPTY_REQUIRED_TEXT = "empty_required_text"
    INVALID_DENOMINATION = "invalid_denomination"


class ErrorCode(StrEnum):
    """Specific rule violations reported by the validation engine."""

    EMPTY_SENDER = "EMPTY_SENDER"
    EMPTY_SPONSOR = "EMPTY_SPONSOR"
    INVALID_COINS = "INVALID_COINS"
    NO_SHIELD = "NO_SHIELD"
    INVALID_POOL_ID = "INVALID_POOL_ID"
    INVALID_PROPOSAL_ID = "INVALID_PROPOSAL_ID"
    INVALID_DURATION = "INVALID_DURATION"
    MISSING_DESCRIPTION = "MISSING_DESCRIPTION"
    INVALID_TO_ADDR = "INVALID_TO_ADDR"
    INVALID_DENOM = "INVALID_DENOM"


ERROR_KINDS: dict[ErrorCode, FailureKind] = {
    ErrorCode.EMPTY_SENDER: FailureKind.EMPTY_SIGNER,
    ErrorCode.EMPTY_SPONSOR: FailureKind.EMPTY_REQUIRED_TEXT,
    ErrorCode.INVALID_COINS: FailureKind.INVALID_AMOUNT,
    ErrorCode.NO_SHIELD: FailureKind.INVALID_AMOUNT,
    ErrorCode.INVALID_POOL_ID: FailureKind.INVALID_IDENTIFIER,
    ErrorCode.INVALID_PROPOSAL_ID: FailureKind.INVALID_IDENTIFIER,
    ErrorCode.INVALID_DURATION: FailureKind.INVALID_DURATION,
    ErrorCode.MISSING_DESCRIPTION: FailureKind.EMPTY_REQUIRED_TEXT,
    ErrorCode.INVALID_TO_ADDR: FailureKind.EMPTY_REQUIRED_TEXT,
    ErrorCode.INVALID_DENOM: FailureKind.INVALID_DENOMINATION,
}

ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.EMPTY_SENDER: "empty sender",
    ErrorCode.EMPTY_SPONSOR: "empty sponsor",
    ErrorCode.INVALID_COINS: "invalid coins",
    ErrorCode.NO_SHIELD: "no shield",
    ErrorCode.INVALID_POOL_ID: "invalid pool ID",
    ErrorCode.INVALID_PROPOSAL_ID: "invalid proposal ID",
    ErrorCode.INVALID_DURATION: "invalid duration",
    ErrorCode.MISSING_DESCRIPTION: "missing description",
    ErrorCode.INVALID_TO_ADDR: "invalid recipient address",
    ErrorCode.INVALID_DENOM: "invalid denomination",
}


class ShieldError(Exception):
    """Base class for all shieldctl domain errors."""


class MsgValidationError(ShieldError):
    """A command failed stateless validation.

    Attributes:
        code: The violated rule.
        kind: The failure kind *code* belongs to.
        detail: Optional context appended to the base message.
    """

    def __init__(self, code: ErrorCode, detail: str = "") -> None:
        self.code = code
        self.kind = ERROR_KINDS[code]
        self.detail = detail
        message = ERROR_MESSAGES[code]
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MsgValidationError):
            return NotImplemented
        return (self.code, self.detail) == (other.code, other.detail)

    def __hash__(self) -> int:
        return hash((self.code, self.detail))


class CodecError(ShieldError):
    """Wire data could not be decoded into a command."""
