"""Required-signer resolution.

Every shield command is authorized by one account today.  The resolver still
returns a de-duplicated ordered list so multi-signer variants fit the same
contract.  An empty signer is returned as-is; rejecting it is validation's
job.
"""

from __future__ import annotations

from typing import assert_never

from shieldctl.domain.address import Address
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


def _dedupe(addresses: list[Address]) -> list[Address]:
    seen: set[Address] = set()
    ordered: list[Address] = []
    for addr in addresses:
        if addr in seen:
            continue
        seen.add(addr)
        ordered.append(addr)
    return ordered


def get_signers(msg: Msg) -> list[Address]:
    """Return the accounts that must sign *msg*, in order."""
    match msg:
        case (
            MsgCreatePool()
            | MsgUpdatePool()
            | MsgPausePool()
            | MsgResumePool()
            | MsgDepositCollateral()
            | MsgWithdrawCollateral()
            | MsgWithdrawRewards()
            | MsgWithdrawForeignRewards()
            | MsgClearPayouts()
            | MsgPurchaseShield()
            | MsgWithdrawReimbursement()
        ):
            return _dedupe([msg.from_])
        case _:
            assert_never(msg)
