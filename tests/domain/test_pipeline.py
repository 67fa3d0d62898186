"""Tests for prepare(): signers, verdict, and sign bytes in one bundle."""

import pytest

from shieldctl.domain.codec import msg_hash, sign_bytes
from shieldctl.domain.errors import ErrorCode
from shieldctl.domain.msgs import MsgWithdrawReimbursement
from shieldctl.domain.pipeline import prepare
from shieldctl.domain.validation import STRICT_POLICY
from tests.conftest import EMPTY, SIGNER, create_pool, valid_msgs


class TestPrepare:
    @pytest.mark.parametrize("msg", valid_msgs(), ids=lambda m: m.msg_type())
    def test_valid_bundle(self, msg) -> None:
        prepared = prepare(msg)
        assert prepared.ok
        assert prepared.msg is msg
        assert prepared.signers == (SIGNER,)
        assert prepared.sign_bytes == sign_bytes(msg)
        assert prepared.hash == msg_hash(msg)

    def test_invalid_bundle_still_encoded(self) -> None:
        msg = create_pool(sponsor="")
        prepared = prepare(msg)
        assert not prepared.ok
        assert prepared.result.code is ErrorCode.EMPTY_SPONSOR
        assert prepared.sign_bytes == sign_bytes(msg)

    def test_policy_is_applied(self) -> None:
        msg = MsgWithdrawReimbursement(proposal_id=0, from_=EMPTY)
        assert prepare(msg).ok
        assert prepare(msg, STRICT_POLICY).result.code is ErrorCode.EMPTY_SENDER

    def test_frozen(self) -> None:
        prepared = prepare(create_pool())
        with pytest.raises(AttributeError):
            prepared.sign_bytes = b""  # type: ignore[misc]
