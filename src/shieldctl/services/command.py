"""CommandService — decode, inspect, validate, and encode shield commands.

Each operation accepts either a command value or raw wire JSON and returns
a :class:`ServiceResult`.  Decode failures are reported as ``DECODE_ERROR``
results rather than raised.
"""

from __future__ import annotations

from typing import Any

import structlog

from shieldctl.domain.codec import decode_msg, to_wire
from shieldctl.domain.errors import CodecError
from shieldctl.domain.msgs import Msg, ShieldMsg
from shieldctl.domain.pipeline import PreparedCommand, prepare
from shieldctl.services.base import BaseService
from shieldctl.services.result import ServiceResult

log = structlog.get_logger(__name__)

Source = Msg | bytes | str


class CommandService(BaseService):
    """Stateless command handling for the CLI and embedding callers."""

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def inspect(self, source: Source) -> ServiceResult:
        """Full pipeline report.  ``ok`` means decodable; see ``data["valid"]``."""
        op = "inspect"
        prepared, failure = self._prepare(op, source)
        if failure is not None:
            return failure
        assert prepared is not None

        warnings: list[str] = []
        if not prepared.ok:
            warnings.append(f"Command fails validation: {prepared.result.message}")
        self._after_check(prepared, warnings)
        return ServiceResult.success(op, self._describe(prepared), warnings)

    def validate(self, source: Source) -> ServiceResult:
        """Succeed only when the command is well-formed."""
        op = "validate"
        prepared, failure = self._prepare(op, source)
        if failure is not None:
            return failure
        assert prepared is not None

        warnings: list[str] = []
        self._after_check(prepared, warnings)
        data = {
            "type": prepared.msg.msg_type(),
            "hash": prepared.hash,
            "valid": prepared.ok,
        }
        error = prepared.result.error
        if error is not None:
            return ServiceResult.failure(
                op,
                error.code.value,
                str(error),
                data=data,
                warnings=warnings,
                kind=error.kind.value,
                type=prepared.msg.msg_type(),
            )
        return ServiceResult.success(op, data, warnings)

    def sign_bytes(self, source: Source) -> ServiceResult:
        """Canonical sign bytes.  Encoding does not depend on validity."""
        op = "sign_bytes"
        prepared, failure = self._prepare(op, source)
        if failure is not None:
            return failure
        assert prepared is not None
        return ServiceResult.success(
            op,
            {"sign_bytes": prepared.sign_bytes.decode("utf-8"), "hash": prepared.hash},
        )

    def signers(self, source: Source) -> ServiceResult:
        op = "signers"
        prepared, failure = self._prepare(op, source)
        if failure is not None:
            return failure
        assert prepared is not None
        signers = [str(a) for a in prepared.signers]
        return ServiceResult.success(
            op, {"type": prepared.msg.msg_type(), "signers": signers, "count": len(signers)}
        )

    def hash(self, source: Source) -> ServiceResult:
        op = "hash"
        prepared, failure = self._prepare(op, source)
        if failure is not None:
            return failure
        assert prepared is not None
        return ServiceResult.success(op, {"type": prepared.msg.msg_type(), "hash": prepared.hash})

    def build(self, msg: Msg) -> ServiceResult:
        """Wire JSON for a freshly constructed command.

        Building never fails on validity; an invalid command is returned
        with a warning so it can be inspected.
        """
        op = "build"
        prepared = prepare(msg, self.policy)
        warnings: list[str] = []
        if not prepared.ok:
            warnings.append(f"Command fails validation: {prepared.result.message}")
        log.debug("command_built", msg_type=msg.msg_type(), hash=prepared.hash)
        return ServiceResult.success(
            op, {"wire": to_wire(msg), "hash": prepared.hash, "valid": prepared.ok}, warnings
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _prepare(
        self, op: str, source: Source
    ) -> tuple[PreparedCommand | None, ServiceResult | None]:
        """Decode *source* if needed and run the pipeline."""
        if isinstance(source, ShieldMsg):
            msg: Msg = source  # type: ignore[assignment]
        else:
            try:
                msg = decode_msg(source)
            except CodecError as exc:
                log.warning("command_decode_failed", op=op, error=str(exc))
                return None, ServiceResult.failure(op, "DECODE_ERROR", str(exc))
        return prepare(msg, self.policy), None

    def _after_check(self, prepared: PreparedCommand, warnings: list[str]) -> None:
        """Log the verdict and notify plugins."""
        msg = prepared.msg
        code = prepared.result.code.value if prepared.result.code else None
        log.info(
            "command_checked",
            msg_type=msg.msg_type(),
            route=msg.route(),
            ok=prepared.ok,
            code=code,
            hash=prepared.hash,
        )
        self._dispatch_hook(
            "post_check",
            {
                "msg_type": msg.msg_type(),
                "route": msg.route(),
                "signers": [str(a) for a in prepared.signers],
                "ok": prepared.ok,
                "error_code": code,
                "msg_hash": prepared.hash,
            },
            warnings,
        )

    def _describe(self, prepared: PreparedCommand) -> dict[str, Any]:
        msg = prepared.msg
        data: dict[str, Any] = {
            "type": msg.msg_type(),
            "route": msg.route(),
            "name": msg.AMINO_NAME,
            "signers": [str(a) for a in prepared.signers],
            "valid": prepared.ok,
            "hash": prepared.hash,
            "sign_bytes": prepared.sign_bytes.decode("utf-8"),
            "value": to_wire(msg)["value"],
        }
        if prepared.result.error is not None:
            data["error"] = {
                "code": prepared.result.error.code.value,
                "kind": prepared.result.error.kind.value,
                "message": prepared.result.message,
            }
        return data
