"""Shared pytest fixtures and test helpers for shieldctl tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from shieldctl.domain.address import Address
from shieldctl.domain.codec import to_wire
from shieldctl.domain.coins import Coin, Coins, MixedCoins
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

SIGNER = Address(bytes.fromhex("0a1b2c3d4e5f60718293a4b5c6d7e8f901234567"))
EMPTY = Address()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp dir so no stray shieldctl.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SHIELDCTL_CONFIG", raising=False)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def coins(**amounts: int) -> Coins:
    """``coins(uctk=100, ufoo=5)`` → Coins of those denoms."""
    return Coins(root=tuple(Coin(denom=d, amount=a) for d, a in amounts.items()))


def create_pool(**overrides: Any) -> MsgCreatePool:
    fields: dict[str, Any] = {
        "from_": SIGNER,
        "shield": coins(uctk=1000),
        "deposit": MixedCoins(native=coins(uctk=100), foreign=coins(ufoo=50)),
        "sponsor": "alice",
        "time_of_coverage": 100,
    }
    fields.update(overrides)
    return MsgCreatePool(**fields)


def update_pool(**overrides: Any) -> MsgUpdatePool:
    fields: dict[str, Any] = {
        "from_": SIGNER,
        "shield": coins(uctk=500),
        "deposit": MixedCoins(native=coins(uctk=10), foreign=coins(ufoo=5)),
        "pool_id": 7,
        "additional_time": 50,
    }
    fields.update(overrides)
    return MsgUpdatePool(**fields)


def purchase_shield(**overrides: Any) -> MsgPurchaseShield:
    fields: dict[str, Any] = {
        "pool_id": 7,
        "shield": coins(uctk=50),
        "description": "cover my vault",
        "from_": SIGNER,
    }
    fields.update(overrides)
    return MsgPurchaseShield(**fields)


def valid_msgs() -> list[Msg]:
    """One well-formed instance of every variant."""
    return [
        create_pool(),
        update_pool(),
        MsgPausePool(from_=SIGNER, pool_id=7),
        MsgResumePool(from_=SIGNER, pool_id=7),
        MsgDepositCollateral(from_=SIGNER, pool_id=7, collateral=Coin(denom="uctk", amount=10)),
        MsgWithdrawCollateral(from_=SIGNER, pool_id=7, collateral=Coin(denom="uctk", amount=10)),
        MsgWithdrawRewards(from_=SIGNER),
        MsgWithdrawForeignRewards(from_=SIGNER, denom="ufoo", to_addr="foo1destination"),
        MsgClearPayouts(from_=SIGNER, denom="ufoo"),
        purchase_shield(),
        MsgWithdrawReimbursement(proposal_id=3, from_=SIGNER),
    ]


def write_wire(path: Path, msg: Msg) -> Path:
    """Write *msg* as wire JSON to *path* and return it."""
    path.write_text(json.dumps(to_wire(msg)), encoding="utf-8")
    return path
