"""Human-readable rendering of ServiceResult, one layout per operation.

Layouts are picked by ``result.op`` from ``_OP_RENDERERS``; other ops get a
flat ``key: value`` listing.  ``build`` is special: its output is the wire
JSON itself, so a built command can be redirected to a file and fed back
into ``validate`` or ``sign-bytes``.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.text import Text

from shieldctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from shieldctl.services.result import ServiceResult


# -- entry points


def render_result(result: ServiceResult, *, verbose: bool = False, show_hash: bool = True) -> str:
    """Styled text for *result*; plain when stdout is not a terminal.

    Hashes are left out when *show_hash* is False, except for ``hash``
    itself.
    """
    if result.ok and result.op == "build":
        # Wire JSON must stay byte-exact and unwrapped so it can be saved as input.
        return json.dumps(result.data["wire"], indent=2, sort_keys=True, ensure_ascii=False)

    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, show_hash=show_hash)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """The one value a script wants from *result* (``-q``)."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if result.op == "signers":
        return "\n".join(data.get("signers", []))
    if result.op in ("hash", "inspect"):
        return str(data.get("hash", ""))
    if result.op == "build":
        return json.dumps(
            data["wire"], sort_keys=True, separators=(",", ":"), ensure_ascii=False
        )
    return f"OK: {result.op}"


# -- line helpers


def _status_line(console: Console, result: ServiceResult) -> None:
    """``OK  <op>`` header."""
    console.print(Text.assemble(("OK", "shield.ok"), (f"  {result.op}", "shield.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Indented ``key: value`` line; a few keys get their own style."""
    k = Text(f"  {key}: ", style="shield.key")
    if key == "type":
        v = Text(str(value), style="shield.type")
    elif key == "hash":
        v = Text(str(value), style="shield.hash")
    elif key == "valid":
        v = Text(str(value).lower(), style="shield.valid" if value else "shield.invalid")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v), soft_wrap=True)


def _signer_lines(console: Console, signers: list[str]) -> None:
    console.print(Text("  signers:", style="shield.key"))
    for signer in signers:
        shown = signer or "<empty>"
        console.print(Text(f"    {shown}", style="shield.signer"), soft_wrap=True)


# -- failures


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "shield.error"), (f"  {result.op}", "shield.op"), f" — {msg}"),
        soft_wrap=True,
    )

    if err is None:
        return
    _field(console, "code", err.code)
    if "kind" in err.detail:
        _field(console, "kind", err.detail["kind"])
    if verbose:
        for k, v in err.detail.items():
            if k != "kind":
                _field(console, k, v)


# -- per-op layouts


def _render_inspect(
    result: ServiceResult, console: Console, *, verbose: bool = False, show_hash: bool = True
) -> None:
    d = result.data
    _status_line(console, result)
    for key in ("type", "route", "name", "valid"):
        _field(console, key, d.get(key))
    error = d.get("error")
    if error:
        _field(console, "error", f"{error['code']} ({error['kind']}): {error['message']}")
    _signer_lines(console, d.get("signers", []))
    if show_hash:
        _field(console, "hash", d.get("hash"))
    body = json.dumps(d.get("value", {}), indent=2, sort_keys=True, ensure_ascii=False)
    title = str(d.get("name", ""))
    console.print(Panel(Text(body), title=title, border_style="dim", expand=False))
    if verbose:
        _field(console, "sign_bytes", d.get("sign_bytes"))


def _render_validate(
    result: ServiceResult, console: Console, *, verbose: bool = False, show_hash: bool = True
) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "type", d.get("type"))
    _field(console, "valid", d.get("valid"))
    if show_hash:
        _field(console, "hash", d.get("hash"))


def _render_signers(
    result: ServiceResult, console: Console, *, verbose: bool = False, show_hash: bool = True
) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "type", d.get("type"))
    _signer_lines(console, d.get("signers", []))


def _render_hash(
    result: ServiceResult, console: Console, *, verbose: bool = False, show_hash: bool = True
) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "type", d.get("type"))
    _field(console, "hash", d.get("hash"))


def _render_generic(
    result: ServiceResult, console: Console, *, verbose: bool = False, show_hash: bool = True
) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"), sort_keys=True)
        _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "inspect": _render_inspect,
    "validate": _render_validate,
    "signers": _render_signers,
    "hash": _render_hash,
}
