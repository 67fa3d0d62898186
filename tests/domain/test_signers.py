"""Tests for required-signer resolution."""

import pytest

from shieldctl.domain.address import Address
from shieldctl.domain.coins import Coin
from shieldctl.domain.msgs import MsgWithdrawCollateral, MsgWithdrawReimbursement
from shieldctl.domain.signers import get_signers
from tests.conftest import EMPTY, SIGNER, valid_msgs


class TestGetSigners:
    @pytest.mark.parametrize("msg", valid_msgs(), ids=lambda m: m.msg_type())
    def test_single_signer(self, msg) -> None:
        assert get_signers(msg) == [SIGNER]

    @pytest.mark.parametrize("msg", valid_msgs(), ids=lambda m: m.msg_type())
    def test_matches_method(self, msg) -> None:
        assert msg.get_signers() == get_signers(msg)

    def test_empty_signer_returned_as_is(self) -> None:
        msg = MsgWithdrawCollateral(
            from_=EMPTY, pool_id=1, collateral=Coin(denom="uctk", amount=1)
        )
        signers = get_signers(msg)
        assert signers == [Address()]
        assert signers[0].empty()

    def test_does_not_depend_on_validity(self) -> None:
        msg = MsgWithdrawReimbursement(proposal_id=0, from_=SIGNER)
        assert get_signers(msg) == [SIGNER]
