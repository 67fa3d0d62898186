"""Command group: build wire JSON for each shield command from flags.

The output of every ``build`` subcommand is valid input for ``inspect``,
``validate``, ``sign-bytes``, ``signers`` and ``hash``.  Building does not
refuse malformed values; it warns instead so edge cases can be produced
on purpose.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from shieldctl.commands._base import ShieldGroup
from shieldctl.domain.address import Address
from shieldctl.domain.coins import Coin, Coins, MixedCoins, parse_coin, parse_coins
from shieldctl.domain.msgs import (
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
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

if TYPE_CHECKING:
    from shieldctl.commands._context import AppContext


class AddressType(click.ParamType):
    """Hex account address; ``""`` is the empty address."""

    name = "address"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if isinstance(value, Address):
            return value
        try:
            return Address.from_hex(value)
        except ValueError:
            self.fail(f"{value!r} is not a hex address", param, ctx)


class CoinsType(click.ParamType):
    """Comma-separated coins, e.g. ``100uctk,5ufoo``."""

    name = "coins"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if isinstance(value, Coins):
            return value
        try:
            return parse_coins(value)
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


class CoinType(click.ParamType):
    """A single coin, e.g. ``100uctk``."""

    name = "coin"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if isinstance(value, Coin):
            return value
        try:
            return parse_coin(value)
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


ADDRESS = AddressType()
COINS = CoinsType()
COIN = CoinType()
UINT64 = click.IntRange(0, UINT64_MAX)
INT64 = click.IntRange(INT64_MIN, INT64_MAX)

from_option = click.option(
    "--from", "from_", type=ADDRESS, required=True, help="Signer address (hex)."
)
pool_id_option = click.option("--pool-id", type=UINT64, default=0, show_default=True)
shield_option = click.option("--shield", type=COINS, default="", help="Shield coins.")
native_option = click.option("--native", type=COINS, default="", help="Native deposit coins.")
foreign_option = click.option("--foreign", type=COINS, default="", help="Foreign deposit coins.")
collateral_option = click.option("--collateral", type=COIN, required=True)


@click.group(
    cls=ShieldGroup,
    examples="""\
  shieldctl build create-pool --from 0a1b --shield 100uctk --native 10uctk \\
      --foreign 10ufoo --sponsor alice --time 100
  shieldctl build pause-pool --from 0a1b --pool-id 7
  shieldctl build purchase-shield --from 0a1b --pool-id 7 --shield 50uctk \\
      --description "cover my vault" > purchase.json
  shieldctl -q build withdraw-rewards --from 0a1b""",
)
def build() -> None:
    """Build wire JSON for a shield command."""


@build.command("create-pool")
@from_option
@shield_option
@native_option
@foreign_option
@click.option("--sponsor", default="", help="Pool sponsor name.")
@click.option("--time", "time_of_coverage", type=INT64, default=0, help="Coverage duration.")
@click.pass_obj
def create_pool(
    app: AppContext,
    from_: Address,
    shield: Coins,
    native: Coins,
    foreign: Coins,
    sponsor: str,
    time_of_coverage: int,
) -> None:
    """Create a coverage pool."""
    msg = MsgCreatePool(
        from_=from_,
        shield=shield,
        deposit=MixedCoins(native=native, foreign=foreign),
        sponsor=sponsor,
        time_of_coverage=time_of_coverage,
    )
    app.emit(app.service.build(msg))


@build.command("update-pool")
@from_option
@pool_id_option
@shield_option
@native_option
@foreign_option
@click.option("--additional-time", type=INT64, default=0, help="Extra coverage duration.")
@click.pass_obj
def update_pool(
    app: AppContext,
    from_: Address,
    pool_id: int,
    shield: Coins,
    native: Coins,
    foreign: Coins,
    additional_time: int,
) -> None:
    """Top up a pool's shield, deposit, and coverage period."""
    msg = MsgUpdatePool(
        from_=from_,
        shield=shield,
        deposit=MixedCoins(native=native, foreign=foreign),
        pool_id=pool_id,
        additional_time=additional_time,
    )
    app.emit(app.service.build(msg))


@build.command("pause-pool")
@from_option
@pool_id_option
@click.pass_obj
def pause_pool(app: AppContext, from_: Address, pool_id: int) -> None:
    """Pause a pool."""
    app.emit(app.service.build(MsgPausePool(from_=from_, pool_id=pool_id)))


@build.command("resume-pool")
@from_option
@pool_id_option
@click.pass_obj
def resume_pool(app: AppContext, from_: Address, pool_id: int) -> None:
    """Resume a paused pool."""
    app.emit(app.service.build(MsgResumePool(from_=from_, pool_id=pool_id)))


@build.command("deposit-collateral")
@from_option
@pool_id_option
@collateral_option
@click.pass_obj
def deposit_collateral(app: AppContext, from_: Address, pool_id: int, collateral: Coin) -> None:
    """Deposit collateral into a pool."""
    msg = MsgDepositCollateral(from_=from_, pool_id=pool_id, collateral=collateral)
    app.emit(app.service.build(msg))


@build.command("withdraw-collateral")
@from_option
@pool_id_option
@collateral_option
@click.pass_obj
def withdraw_collateral(app: AppContext, from_: Address, pool_id: int, collateral: Coin) -> None:
    """Withdraw collateral from a pool."""
    msg = MsgWithdrawCollateral(from_=from_, pool_id=pool_id, collateral=collateral)
    app.emit(app.service.build(msg))


@build.command("withdraw-rewards")
@from_option
@click.pass_obj
def withdraw_rewards(app: AppContext, from_: Address) -> None:
    """Withdraw native rewards."""
    app.emit(app.service.build(MsgWithdrawRewards(from_=from_)))


@build.command("withdraw-foreign-rewards")
@from_option
@click.option("--denom", default="", help="Foreign reward denom.")
@click.option("--to-addr", default="", help="Destination address on the foreign chain.")
@click.pass_obj
def withdraw_foreign_rewards(app: AppContext, from_: Address, denom: str, to_addr: str) -> None:
    """Withdraw foreign-denominated rewards to an external address."""
    msg = MsgWithdrawForeignRewards(from_=from_, denom=denom, to_addr=to_addr)
    app.emit(app.service.build(msg))


@build.command("clear-payouts")
@from_option
@click.option("--denom", default="", help="Denom whose payouts are cleared.")
@click.pass_obj
def clear_payouts(app: AppContext, from_: Address, denom: str) -> None:
    """Clear pending payouts of a denom."""
    app.emit(app.service.build(MsgClearPayouts(from_=from_, denom=denom)))


@build.command("purchase-shield")
@from_option
@pool_id_option
@shield_option
@click.option("--description", default="", help="What the purchase covers.")
@click.option("--simulate", is_flag=True, help="Mark the purchase as simulated.")
@click.option("--sim-txhash", default="", help="Simulated transaction hash (hex).")
@click.pass_obj
def purchase_shield(
    app: AppContext,
    from_: Address,
    pool_id: int,
    shield: Coins,
    description: str,
    simulate: bool,
    sim_txhash: str,
) -> None:
    """Purchase shield from a pool."""
    try:
        txhash = bytes.fromhex(sim_txhash)
    except ValueError as exc:
        raise click.BadParameter(f"{sim_txhash!r} is not hex", param_hint="--sim-txhash") from exc
    msg = MsgPurchaseShield(
        pool_id=pool_id,
        shield=shield,
        description=description,
        from_=from_,
        simulate=simulate,
        sim_txhash=txhash,
    )
    app.emit(app.service.build(msg))


@build.command("withdraw-reimbursement")
@from_option
@click.option("--proposal-id", type=UINT64, default=0, show_default=True)
@click.pass_obj
def withdraw_reimbursement(app: AppContext, from_: Address, proposal_id: int) -> None:
    """Withdraw a reimbursement granted by a governance proposal."""
    msg = MsgWithdrawReimbursement(proposal_id=proposal_id, from_=from_)
    app.emit(app.service.build(msg))
