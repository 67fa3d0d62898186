"""Amount model: single-denomination coins, coin sets, and mixed deposits.

Coin amounts are arbitrary-precision ints capped at the ledger balance width
(256 bits).  Floats never reach this layer.

INVARIANT: A ``Coins`` value is sorted by denom at construction, so two sets
holding the same coins compare and encode identically.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    Field,
    PlainSerializer,
    RootModel,
    field_validator,
)

DENOM_PATTERN = re.compile(r"[a-z][a-z0-9/:]{2,127}")
MAX_AMOUNT = 2**256 - 1

_COIN_TEXT = re.compile(r"([0-9]+)\s*([a-z][a-z0-9/:]{2,127})")


def is_valid_denom(denom: str) -> bool:
    """Check *denom* against the denomination grammar."""
    return DENOM_PATTERN.fullmatch(denom) is not None


def validate_denom(denom: str) -> None:
    """Raise ``ValueError`` if *denom* does not match the denomination grammar."""
    if not is_valid_denom(denom):
        msg = f"invalid denom: {denom!r}"
        raise ValueError(msg)


def require_utf8(value: str) -> str:
    """Reject strings holding lone surrogates; they have no UTF-8 encoding."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        msg = f"text is not encodable as UTF-8 at position {exc.start}"
        raise ValueError(msg) from exc
    return value


# Free text that ends up in sign bytes.
Utf8Str = Annotated[str, AfterValidator(require_utf8)]


def coerce_int(value: Any) -> Any:
    """Accept ints and decimal-digit strings (the wire form); reject floats and bools."""
    if isinstance(value, (bool, float)):
        msg = f"expected an integer, got {type(value).__name__}"
        raise ValueError(msg)
    if isinstance(value, str):
        text = value.strip()
        if not re.fullmatch(r"-?[0-9]+", text):
            msg = f"expected a decimal integer string, got {value!r}"
            raise ValueError(msg)
        return int(text)
    return value


Amount = Annotated[
    int,
    BeforeValidator(coerce_int),
    PlainSerializer(str, return_type=str, when_used="json"),
]


class Coin(BaseModel):
    """A quantity of a single denomination."""

    model_config = {"frozen": True}

    denom: Utf8Str
    amount: Amount

    def is_valid(self) -> bool:
        return is_valid_denom(self.denom) and 0 <= self.amount <= MAX_AMOUNT

    def is_zero(self) -> bool:
        return self.amount == 0

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"


class Coins(RootModel[tuple[Coin, ...]]):
    """An ordered set of coins (AmountSet).

    Duplicated denoms survive construction so :meth:`is_valid` can
    report them instead of silently merging amounts.
    """

    model_config = {"frozen": True}

    root: tuple[Coin, ...] = ()

    @field_validator("root")
    @classmethod
    def _sort_by_denom(cls, v: tuple[Coin, ...]) -> tuple[Coin, ...]:
        return tuple(sorted(v, key=lambda c: c.denom))

    @classmethod
    def of(cls, *coins: Coin) -> Coins:
        """Build a set from positional coins."""
        return cls(root=tuple(coins))

    def __iter__(self) -> Iterator[Coin]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Coin:
        return self.root[index]

    def denoms(self) -> list[str]:
        return [c.denom for c in self.root]

    def is_valid(self) -> bool:
        """Every coin valid and no denom repeated."""
        denoms = self.denoms()
        if len(set(denoms)) != len(denoms):
            return False
        return all(c.is_valid() for c in self.root)

    def is_zero(self) -> bool:
        """True for the empty set or when every coin is zero."""
        return all(c.is_zero() for c in self.root)

    def amount_of(self, denom: str) -> int:
        return sum(c.amount for c in self.root if c.denom == denom)

    def __str__(self) -> str:
        return ",".join(str(c) for c in self.root)


class MixedCoins(BaseModel):
    """Native and foreign coin sets carried together, e.g. a pool deposit."""

    model_config = {"frozen": True}

    native: Coins = Field(default_factory=Coins)
    foreign: Coins = Field(default_factory=Coins)

    def is_valid(self) -> bool:
        return self.native.is_valid() and self.foreign.is_valid()

    def is_zero(self) -> bool:
        return self.native.is_zero() and self.foreign.is_zero()

    def __str__(self) -> str:
        return f"native: {self.native}, foreign: {self.foreign}"


def parse_coin(text: str) -> Coin:
    """Parse ``"100uctk"`` into a :class:`Coin`.

    Raises:
        ValueError: *text* is not ``<digits><denom>``.
    """
    match = _COIN_TEXT.fullmatch(text.strip())
    if match is None:
        msg = f"invalid coin expression: {text!r}"
        raise ValueError(msg)
    return Coin(denom=match.group(2), amount=int(match.group(1)))


def parse_coins(text: str) -> Coins:
    """Parse a comma-separated list such as ``"100uctk, 5ufoo"``.

    The empty string parses to the empty set.
    """
    text = text.strip()
    if not text:
        return Coins()
    return Coins(root=tuple(parse_coin(part) for part in text.split(",")))
