"""Tests for the command variants and their registry."""

import pytest
from pydantic import ValidationError

from shieldctl.domain.address import Address
from shieldctl.domain.coins import Coin
from shieldctl.domain.errors import ErrorCode, MsgValidationError
from shieldctl.domain.msgs import (
    INT64_MIN,
    MSG_REGISTRY,
    MSG_TYPES,
    ROUTER_KEY,
    UINT64_MAX,
    MsgDepositCollateral,
    MsgPausePool,
    MsgPurchaseShield,
    MsgUpdatePool,
    MsgWithdrawRewards,
)
from tests.conftest import SIGNER, create_pool, valid_msgs


class TestRegistry:
    def test_eleven_variants(self) -> None:
        assert len(MSG_TYPES) == 11

    def test_wire_names_unique(self) -> None:
        names = [cls.AMINO_NAME for cls in MSG_TYPES]
        assert len(set(names)) == len(names)

    def test_type_tags_unique(self) -> None:
        tags = [cls.TYPE for cls in MSG_TYPES]
        assert len(set(tags)) == len(tags)

    def test_registry_keys(self) -> None:
        assert MSG_REGISTRY["shield/MsgPausePool"] is MsgPausePool
        assert all(name.startswith("shield/Msg") for name in MSG_REGISTRY)

    def test_every_variant_has_a_sample(self) -> None:
        assert {type(m) for m in valid_msgs()} == set(MSG_TYPES)


class TestCommonSurface:
    @pytest.mark.parametrize("msg", valid_msgs(), ids=lambda m: m.msg_type())
    def test_route(self, msg) -> None:
        assert msg.route() == ROUTER_KEY

    def test_msg_type(self) -> None:
        assert create_pool().msg_type() == "create_pool"
        assert MsgWithdrawRewards(from_=SIGNER).msg_type() == "withdraw_rewards"

    def test_validate_basic_method_raises(self) -> None:
        with pytest.raises(MsgValidationError) as exc_info:
            MsgPausePool(from_=SIGNER).validate_basic()
        assert exc_info.value.code is ErrorCode.INVALID_POOL_ID

    def test_get_signers_method(self) -> None:
        assert MsgPausePool(from_=SIGNER, pool_id=1).get_signers() == [SIGNER]

    def test_get_sign_bytes_method(self) -> None:
        raw = MsgPausePool(from_=SIGNER, pool_id=1).get_sign_bytes()
        assert raw.startswith(b'{"type":"shield/MsgPausePool"')


class TestFields:
    def test_frozen(self) -> None:
        msg = MsgPausePool(from_=SIGNER, pool_id=1)
        with pytest.raises(ValidationError):
            msg.pool_id = 2  # type: ignore[misc]

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            MsgPausePool(from_=SIGNER, pool_id=1, memo="x")  # type: ignore[call-arg]

    def test_alias_population(self) -> None:
        by_alias = MsgDepositCollateral.model_validate(
            {"sender": "0a1b", "pool_id": "3", "collateral": {"denom": "uctk", "amount": "1"}}
        )
        assert by_alias.from_ == Address(b"\x0a\x1b")
        assert by_alias.pool_id == 3

    def test_update_pool_aliases(self) -> None:
        msg = MsgUpdatePool.model_validate(
            {"from": "0a", "Shield": [], "pool_id": "1", "additional_period": "5"}
        )
        assert msg.additional_time == 5

    def test_defaults(self) -> None:
        msg = MsgPurchaseShield(from_=SIGNER)
        assert msg.pool_id == 0
        assert msg.description == ""
        assert len(msg.shield) == 0
        assert msg.simulate is False
        assert msg.sim_txhash == b""

    def test_collateral_required(self) -> None:
        with pytest.raises(ValidationError):
            MsgDepositCollateral(from_=SIGNER, pool_id=1)  # type: ignore[call-arg]

    def test_uint64_range(self) -> None:
        MsgPausePool(from_=SIGNER, pool_id=UINT64_MAX)
        with pytest.raises(ValidationError):
            MsgPausePool(from_=SIGNER, pool_id=UINT64_MAX + 1)
        with pytest.raises(ValidationError):
            MsgPausePool(from_=SIGNER, pool_id=-1)

    def test_int64_range(self) -> None:
        create_pool(time_of_coverage=INT64_MIN)
        with pytest.raises(ValidationError):
            create_pool(time_of_coverage=INT64_MIN - 1)

    def test_float_identifier_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MsgPausePool(from_=SIGNER, pool_id=1.0)

    def test_sim_txhash_from_base64(self) -> None:
        msg = MsgPurchaseShield.model_validate({"from": "0a", "sim_txhash": "AQI="})
        assert msg.sim_txhash == b"\x01\x02"

    def test_sim_txhash_bad_base64(self) -> None:
        with pytest.raises(ValidationError):
            MsgPurchaseShield.model_validate({"from": "0a", "sim_txhash": "not base64!"})

    def test_equal_values_equal_msgs(self) -> None:
        coin = Coin(denom="uctk", amount=1)
        assert MsgDepositCollateral(from_=SIGNER, pool_id=1, collateral=coin) == (
            MsgDepositCollateral(collateral=coin, pool_id=1, from_=SIGNER)
        )
