"""Canonical wire encoding of shield commands.

Wire form is the registered-name envelope::

    {"type": "shield/MsgPausePool", "value": {"from": "0a1b", "pool_id": "7"}}

Sign bytes are that envelope serialized with:

- keys sorted lexicographically at every level
- no insignificant whitespace
- UTF-8, with ``<``, ``>``, ``&``, U+2028 and U+2029 escaped as ``\\uXXXX``
- integers wider than a JSON number can safely carry (uint64, int64, coin
  amounts) as decimal strings
- floats rejected

INVARIANT: sign bytes are a pure function of field values.  Construction
order, coin order, and process state never change them.
"""

from __future__ import annotations

import hashlib
import json
from collections.abc import Mapping
from typing import Any, cast

from pydantic import ValidationError

from shieldctl.domain.errors import CodecError
from shieldctl.domain.msgs import MSG_REGISTRY, Msg

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _reject_floats(obj: Any, path: str = "$") -> None:
    if isinstance(obj, float):
        msg = f"float not allowed in canonical JSON at {path}"
        raise ValueError(msg)
    if isinstance(obj, dict):
        for k, v in obj.items():
            _reject_floats(v, f"{path}.{k}")
    elif isinstance(obj, list):
        for i, v in enumerate(obj):
            _reject_floats(v, f"{path}[{i}]")


def canonical_json_bytes(obj: Any) -> bytes:
    """Serialize *obj* to canonical JSON bytes (sorted keys, compact, UTF-8)."""
    _reject_floats(obj)
    text = json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    # These characters can only occur inside string literals, so a plain
    # replace cannot touch JSON structure.
    for char, escaped in _HTML_ESCAPES.items():
        text = text.replace(char, escaped)
    return text.encode("utf-8")


def to_wire(msg: Msg) -> dict[str, Any]:
    """Return the ``{"type", "value"}`` envelope for *msg*."""
    return {
        "type": msg.AMINO_NAME,
        "value": msg.model_dump(mode="json", by_alias=True),
    }


def sign_bytes(msg: Msg) -> bytes:
    """The exact bytes a signer signs for *msg*."""
    return canonical_json_bytes(to_wire(msg))


def content_hash(data: bytes) -> str:
    """Lowercase SHA-256 hex of already-encoded sign bytes."""
    return hashlib.sha256(data).hexdigest()


def msg_hash(msg: Msg) -> str:
    """Content identity of *msg*: SHA-256 of its sign bytes, lowercase hex."""
    return content_hash(sign_bytes(msg))


def from_wire(data: Any) -> Msg:
    """Build a command from a decoded wire envelope.

    Raises:
        CodecError: Envelope malformed, type unregistered, or fields invalid.
    """
    if not isinstance(data, Mapping):
        msg = f"expected a JSON object, got {type(data).__name__}"
        raise CodecError(msg)
    name = data.get("type")
    value = data.get("value")
    if not isinstance(name, str):
        raise CodecError("missing 'type' discriminator")
    cls = MSG_REGISTRY.get(name)
    if cls is None:
        msg = f"unknown command type: {name!r}"
        raise CodecError(msg)
    if not isinstance(value, Mapping):
        msg = f"'value' of {name} must be a JSON object"
        raise CodecError(msg)
    try:
        return cast(Msg, cls.model_validate(dict(value)))
    except ValidationError as exc:
        msg = f"invalid {name}: {exc.error_count()} field error(s): {_summarize(exc)}"
        raise CodecError(msg) from exc


def decode_msg(raw: bytes | str) -> Msg:
    """Parse wire JSON text into a command.

    Raises:
        CodecError: Text is not JSON (including over-long integer literals
            and nesting too deep to parse) or is not a valid command.
    """
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        msg = f"invalid JSON: {exc}"
        raise CodecError(msg) from exc
    return from_wire(data)


def _summarize(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors(include_url=False):
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)
