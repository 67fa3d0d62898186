"""Stateless validation of shield commands.

Rules never consult ledger state (pool existence, balances), so every node
reaches the same verdict for the same command at any height.  Within a
variant the rules run in a fixed order and the first violation wins.

Two variants are looser than their siblings under the default policy:

* ``MsgWithdrawCollateral`` does not require a non-empty sender.
* ``MsgWithdrawReimbursement`` has no rules at all.

Both match the deployed network.  :class:`ValidationPolicy` exposes the
tightened checks as an explicit opt-in.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import assert_never

from shieldctl.domain.coins import is_valid_denom
from shieldctl.domain.errors import ErrorCode, FailureKind, MsgValidationError
from shieldctl.domain.msgs import (
    Msg,
    MsgClearPayouts,
    MsgCreatePool,
    MsgDepositCollateral,
    MsgPausePool,
    MsgPurchaseShield,
    MsgResumePool,
    MsgUpdatePool,
    MsgWithdrawCollateral,
    MsgWithdrawForeignRewards,
    MsgWithdrawReimbursement,
    MsgWithdrawRewards,
)


@dataclass(frozen=True)
class ValidationPolicy:
    """Opt-in tightening of the two permissive variants."""

    strict_withdraw_collateral: bool = False
    strict_withdraw_reimbursement: bool = False


DEFAULT_POLICY = ValidationPolicy()
STRICT_POLICY = ValidationPolicy(
    strict_withdraw_collateral=True,
    strict_withdraw_reimbursement=True,
)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of :func:`check`: either ``ok`` or exactly one error."""

    error: MsgValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def code(self) -> ErrorCode | None:
        return self.error.code if self.error else None

    @property
    def kind(self) -> FailureKind | None:
        return self.error.kind if self.error else None

    @property
    def message(self) -> str:
        return str(self.error) if self.error else ""


def _require_sender(msg: Msg) -> None:
    if msg.from_.empty():
        raise MsgValidationError(ErrorCode.EMPTY_SENDER)


def _require_pool_id(pool_id: int) -> None:
    if pool_id == 0:
        raise MsgValidationError(ErrorCode.INVALID_POOL_ID)


def _require_duration(duration: int) -> None:
    if duration <= 0:
        raise MsgValidationError(ErrorCode.INVALID_DURATION, str(duration))


def _validate_create_pool(msg: MsgCreatePool) -> None:
    _require_sender(msg)
    if not msg.sponsor.strip():
        raise MsgValidationError(ErrorCode.EMPTY_SPONSOR)
    native = msg.deposit.native
    if native.is_zero() or not native.is_valid():
        raise MsgValidationError(ErrorCode.INVALID_COINS, f"native amount: {native}")
    foreign = msg.deposit.foreign
    if foreign.is_zero() or not foreign.is_valid():
        raise MsgValidationError(ErrorCode.INVALID_COINS, f"foreign amount: {foreign}")
    if not msg.shield.is_valid() or msg.shield.is_zero():
        raise MsgValidationError(ErrorCode.NO_SHIELD)
    _require_duration(msg.time_of_coverage)


def _validate_update_pool(msg: MsgUpdatePool) -> None:
    _require_sender(msg)
    _require_pool_id(msg.pool_id)
    # A top-up may leave either side of the deposit at zero.
    if not msg.deposit.is_valid():
        raise MsgValidationError(ErrorCode.INVALID_COINS, "invalid deposit")
    if not msg.shield.is_valid():
        raise MsgValidationError(ErrorCode.INVALID_COINS, "invalid shield")
    _require_duration(msg.additional_time)


def _validate_pool_toggle(msg: MsgPausePool | MsgResumePool) -> None:
    _require_sender(msg)
    _require_pool_id(msg.pool_id)


def _validate_deposit_collateral(msg: MsgDepositCollateral) -> None:
    _require_sender(msg)
    _require_pool_id(msg.pool_id)
    if not msg.collateral.is_valid() or msg.collateral.is_zero():
        raise MsgValidationError(
            ErrorCode.INVALID_COINS, f"collateral amount: {msg.collateral}"
        )


def _validate_withdraw_collateral(msg: MsgWithdrawCollateral, policy: ValidationPolicy) -> None:
    if policy.strict_withdraw_collateral:
        _require_sender(msg)
    _require_pool_id(msg.pool_id)


def _validate_withdraw_foreign_rewards(msg: MsgWithdrawForeignRewards) -> None:
    _require_sender(msg)
    if not msg.to_addr.strip():
        raise MsgValidationError(ErrorCode.INVALID_TO_ADDR)


def _validate_clear_payouts(msg: MsgClearPayouts) -> None:
    _require_sender(msg)
    if not is_valid_denom(msg.denom):
        raise MsgValidationError(ErrorCode.INVALID_DENOM, repr(msg.denom))


def _validate_purchase_shield(msg: MsgPurchaseShield) -> None:
    _require_pool_id(msg.pool_id)
    if not msg.shield.is_valid() or msg.shield.is_zero():
        raise MsgValidationError(ErrorCode.INVALID_COINS, f"shield amount: {msg.shield}")
    if not msg.description.strip():
        raise MsgValidationError(ErrorCode.MISSING_DESCRIPTION)
    _require_sender(msg)


def _validate_withdraw_reimbursement(
    msg: MsgWithdrawReimbursement, policy: ValidationPolicy
) -> None:
    if not policy.strict_withdraw_reimbursement:
        return
    _require_sender(msg)
    if msg.proposal_id == 0:
        raise MsgValidationError(ErrorCode.INVALID_PROPOSAL_ID)


def validate_basic(msg: Msg, policy: ValidationPolicy | None = None) -> None:
    """Check *msg* is well-formed.

    Raises:
        MsgValidationError: The first rule *msg* violates.
    """
    policy = policy or DEFAULT_POLICY
    match msg:
        case MsgCreatePool():
            _validate_create_pool(msg)
        case MsgUpdatePool():
            _validate_update_pool(msg)
        case MsgPausePool() | MsgResumePool():
            _validate_pool_toggle(msg)
        case MsgDepositCollateral():
            _validate_deposit_collateral(msg)
        case MsgWithdrawCollateral():
            _validate_withdraw_collateral(msg, policy)
        case MsgWithdrawRewards():
            _require_sender(msg)
        case MsgWithdrawForeignRewards():
            _validate_withdraw_foreign_rewards(msg)
        case MsgClearPayouts():
            _validate_clear_payouts(msg)
        case MsgPurchaseShield():
            _validate_purchase_shield(msg)
        case MsgWithdrawReimbursement():
            _validate_withdraw_reimbursement(msg, policy)
        case _:
            assert_never(msg)


def check(msg: Msg, policy: ValidationPolicy | None = None) -> ValidationResult:
    """Non-raising form of :func:`validate_basic`."""
    try:
        validate_basic(msg, policy)
    except MsgValidationError as exc:
        return ValidationResult(error=exc)
    return ValidationResult()
