"""Shield command variants.

The variant set is closed: :data:`Msg` is the union of every command and
:data:`MSG_TYPES` lists them in registration order.  Consumers that branch
on the variant (validation, signer resolution) match exhaustively so a new
variant cannot slip through unhandled.

Python field names are snake_case; wire keys are preserved through aliases
(``from_`` is ``"from"`` or ``"sender"``, and ``MsgUpdatePool.shield`` is
``"Shield"``).
"""

from __future__ import annotations

import base64
import binascii
from typing import TYPE_CHECKING, Annotated, Any, ClassVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer

from shieldctl.domain.address import Address
from shieldctl.domain.coins import Coin, Coins, MixedCoins, Utf8Str, coerce_int

if TYPE_CHECKING:
    from shieldctl.domain.validation import ValidationPolicy

ROUTER_KEY = "shield"

EVENT_TYPE_CREATE_POOL = "create_pool"
EVENT_TYPE_UPDATE_POOL = "update_pool"
EVENT_TYPE_PAUSE_POOL = "pause_pool"
EVENT_TYPE_RESUME_POOL = "resume_pool"
EVENT_TYPE_DEPOSIT_COLLATERAL = "deposit_collateral"
EVENT_TYPE_WITHDRAW_COLLATERAL = "withdraw_collateral"
EVENT_TYPE_WITHDRAW_REWARDS = "withdraw_rewards"
EVENT_TYPE_WITHDRAW_FOREIGN_REWARDS = "withdraw_foreign_rewards"
EVENT_TYPE_CLEAR_PAYOUTS = "clear_payouts"
EVENT_TYPE_PURCHASE_SHIELD = "purchase_shield"
EVENT_TYPE_WITHDRAW_REIMBURSEMENT = "withdraw_reimbursement"

UINT64_MAX = 2**64 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Uint64 = Annotated[
    int,
    BeforeValidator(coerce_int),
    Field(ge=0, le=UINT64_MAX),
    PlainSerializer(str, return_type=str, when_used="json"),
]
Int64 = Annotated[
    int,
    BeforeValidator(coerce_int),
    Field(ge=INT64_MIN, le=INT64_MAX),
    PlainSerializer(str, return_type=str, when_used="json"),
]


def _decode_b64(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return base64.b64decode(value, validate=True)
        except binascii.Error as exc:
            msg = f"invalid base64: {exc}"
            raise ValueError(msg) from exc
    return value


B64Bytes = Annotated[
    bytes,
    BeforeValidator(_decode_b64),
    PlainSerializer(
        lambda v: base64.b64encode(v).decode("ascii"), return_type=str, when_used="json"
    ),
]


class ShieldMsg(BaseModel):
    """Common surface of every shield command.

    Subclasses set :attr:`TYPE` (event/log classification tag) and
    :attr:`AMINO_NAME` (wire discriminator).  Both are unique per variant.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    TYPE: ClassVar[str]
    AMINO_NAME: ClassVar[str]

    def route(self) -> str:
        return ROUTER_KEY

    def msg_type(self) -> str:
        return self.TYPE

    def get_signers(self) -> list[Address]:
        from shieldctl.domain.signers import get_signers

        return get_signers(self)  # type: ignore[arg-type]

    def validate_basic(self, policy: ValidationPolicy | None = None) -> None:
        """Raise :class:`~shieldctl.domain.errors.MsgValidationError` if malformed."""
        from shieldctl.domain.validation import validate_basic

        validate_basic(self, policy)  # type: ignore[arg-type]

    def get_sign_bytes(self) -> bytes:
        from shieldctl.domain.codec import sign_bytes

        return sign_bytes(self)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Pool management
# ---------------------------------------------------------------------------


class MsgCreatePool(ShieldMsg):
    """Create a coverage pool with an initial deposit and shield capacity."""

    TYPE: ClassVar[str] = EVENT_TYPE_CREATE_POOL
    AMINO_NAME: ClassVar[str] = "shield/MsgCreatePool"

    from_: Address = Field(alias="from")
    shield: Coins = Field(default_factory=Coins)
    deposit: MixedCoins = Field(default_factory=MixedCoins)
    sponsor: Utf8Str = ""
    time_of_coverage: Int64 = 0


class MsgUpdatePool(ShieldMsg):
    """Top up an existing pool's shield, deposit, and coverage period."""

    TYPE: ClassVar[str] = EVENT_TYPE_UPDATE_POOL
    AMINO_NAME: ClassVar[str] = "shield/MsgUpdatePool"

    from_: Address = Field(alias="from")
    shield: Coins = Field(default_factory=Coins, alias="Shield")
    deposit: MixedCoins = Field(default_factory=MixedCoins)
    pool_id: Uint64 = 0
    additional_time: Int64 = Field(default=0, alias="additional_period")


class MsgPausePool(ShieldMsg):
    TYPE: ClassVar[str] = EVENT_TYPE_PAUSE_POOL
    AMINO_NAME: ClassVar[str] = "shield/MsgPausePool"

    from_: Address = Field(alias="from")
    pool_id: Uint64 = 0


class MsgResumePool(ShieldMsg):
    TYPE: ClassVar[str] = EVENT_TYPE_RESUME_POOL
    AMINO_NAME: ClassVar[str] = "shield/MsgResumePool"

    from_: Address = Field(alias="from")
    pool_id: Uint64 = 0


# ---------------------------------------------------------------------------
# Collateral and rewards
# ---------------------------------------------------------------------------


class MsgDepositCollateral(ShieldMsg):
    TYPE: ClassVar[str] = EVENT_TYPE_DEPOSIT_COLLATERAL
    AMINO_NAME: ClassVar[str] = "shield/MsgDepositCollateral"

    from_: Address = Field(alias="sender")
    pool_id: Uint64 = 0
    collateral: Coin


class MsgWithdrawCollateral(ShieldMsg):
    TYPE: ClassVar[str] = EVENT_TYPE_WITHDRAW_COLLATERAL
    AMINO_NAME: ClassVar[str] = "shield/MsgWithdrawCollateral"

    from_: Address = Field(alias="sender")
    pool_id: Uint64 = 0
    collateral: Coin


class MsgWithdrawRewards(ShieldMsg):
    TYPE: ClassVar[str] = EVENT_TYPE_WITHDRAW_REWARDS
    AMINO_NAME: ClassVar[str] = "shield/MsgWithdrawRewards"

    from_: Address = Field(alias="sender")


class MsgWithdrawForeignRewards(ShieldMsg):
    """Withdraw rewards paid in a foreign denom to an address on another chain."""

    TYPE: ClassVar[str] = EVENT_TYPE_WITHDRAW_FOREIGN_REWARDS
    AMINO_NAME: ClassVar[str] = "shield/MsgWithdrawForeignRewards"

    from_: Address = Field(alias="sender")
    denom: Utf8Str = ""
    to_addr: Utf8Str = ""


class MsgClearPayouts(ShieldMsg):
    TYPE: ClassVar[str] = EVENT_TYPE_CLEAR_PAYOUTS
    AMINO_NAME: ClassVar[str] = "shield/MsgClearPayouts"

    from_: Address = Field(alias="sender")
    denom: Utf8Str = ""


# ---------------------------------------------------------------------------
# Purchases and reimbursements
# ---------------------------------------------------------------------------


class MsgPurchaseShield(ShieldMsg):
    """Buy shield from a pool.

    ``simulate`` and ``sim_txhash`` are carried for simulated purchases and
    take no part in validation.
    """

    TYPE: ClassVar[str] = EVENT_TYPE_PURCHASE_SHIELD
    AMINO_NAME: ClassVar[str] = "shield/MsgPurchaseShield"

    pool_id: Uint64 = 0
    shield: Coins = Field(default_factory=Coins)
    description: Utf8Str = ""
    from_: Address = Field(alias="from")
    simulate: bool = False
    sim_txhash: B64Bytes = b""


class MsgWithdrawReimbursement(ShieldMsg):
    TYPE: ClassVar[str] = EVENT_TYPE_WITHDRAW_REIMBURSEMENT
    AMINO_NAME: ClassVar[str] = "shield/MsgWithdrawReimbursement"

    proposal_id: Uint64 = 0
    from_: Address = Field(alias="from")


Msg = (
    MsgCreatePool
    | MsgUpdatePool
    | MsgPausePool
    | MsgResumePool
    | MsgDepositCollateral
    | MsgWithdrawCollateral
    | MsgWithdrawRewards
    | MsgWithdrawForeignRewards
    | MsgClearPayouts
    | MsgPurchaseShield
    | MsgWithdrawReimbursement
)

MSG_TYPES: tuple[type[ShieldMsg], ...] = (
    MsgCreatePool,
    MsgUpdatePool,
    MsgPausePool,
    MsgResumePool,
    MsgDepositCollateral,
    MsgWithdrawCollateral,
    MsgWithdrawRewards,
    MsgWithdrawForeignRewards,
    MsgClearPayouts,
    MsgPurchaseShield,
    MsgWithdrawReimbursement,
)

MSG_REGISTRY: dict[str, type[ShieldMsg]] = {cls.AMINO_NAME: cls for cls in MSG_TYPES}
