"""Signer identity.

An :class:`Address` is an opaque byte string.  Its text and wire form is
lowercase hex, with the empty address rendering as ``""``.
"""

from __future__ import annotations

from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


class Address:
    """Opaque account identifier of a command signer."""

    __slots__ = ("_raw",)

    def __init__(self, raw: bytes = b"") -> None:
        self._raw = bytes(raw)

    @classmethod
    def from_hex(cls, text: str) -> Address:
        """Parse a hex address; raises ``ValueError`` on non-hex input."""
        text = text.strip()
        if text.startswith(("0x", "0X")):
            text = text[2:]
        return cls(bytes.fromhex(text))

    @property
    def raw(self) -> bytes:
        return self._raw

    def empty(self) -> bool:
        return len(self._raw) == 0

    def __bytes__(self) -> bytes:
        return self._raw

    def __str__(self) -> str:
        return self._raw.hex()

    def __repr__(self) -> str:
        return f"Address({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from Address, bytes, or hex text; serialize to hex in JSON mode."""
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="json"
            ),
        )

    @classmethod
    def _coerce(cls, value: Any) -> Address:
        if isinstance(value, Address):
            return value
        if isinstance(value, (bytes, bytearray)):
            return cls(bytes(value))
        if isinstance(value, str):
            return cls.from_hex(value)
        msg = f"cannot build an Address from {type(value).__name__}"
        raise ValueError(msg)
