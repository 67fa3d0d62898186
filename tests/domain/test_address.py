"""Tests for signer addresses."""

import pytest
from pydantic import BaseModel, ValidationError

from shieldctl.domain.address import Address


class _Holder(BaseModel):
    addr: Address


class TestAddress:
    def test_from_hex(self) -> None:
        assert Address.from_hex("0a1b").raw == b"\x0a\x1b"

    def test_from_hex_strips_prefix(self) -> None:
        assert Address.from_hex("0x0A1B") == Address(b"\x0a\x1b")

    def test_from_hex_rejects_non_hex(self) -> None:
        with pytest.raises(ValueError):
            Address.from_hex("xyz")

    def test_str_is_lowercase_hex(self) -> None:
        assert str(Address(b"\xab\xcd")) == "abcd"

    def test_empty(self) -> None:
        assert Address().empty()
        assert Address.from_hex("").empty()
        assert str(Address()) == ""
        assert not Address(b"\x01").empty()

    def test_equality_and_hash(self) -> None:
        a = Address(b"\x01\x02")
        b = Address.from_hex("0102")
        assert a == b
        assert len({a, b}) == 1
        assert a != Address(b"\x01")

    def test_bytes(self) -> None:
        assert bytes(Address(b"\x09")) == b"\x09"


class TestAddressField:
    def test_accepts_hex_text(self) -> None:
        assert _Holder(addr="0a1b").addr == Address(b"\x0a\x1b")

    def test_accepts_bytes(self) -> None:
        assert _Holder(addr=b"\x0a").addr == Address(b"\x0a")

    def test_rejects_other_types(self) -> None:
        with pytest.raises(ValidationError):
            _Holder(addr=12)

    def test_rejects_bad_hex(self) -> None:
        with pytest.raises(ValidationError):
            _Holder(addr="zz")

    def test_json_mode_serializes_hex(self) -> None:
        holder = _Holder(addr=Address(b"\x0a\x1b"))
        assert holder.model_dump(mode="json") == {"addr": "0a1b"}
        assert holder.model_dump()["addr"] == Address(b"\x0a\x1b")
