"""Root error class shared by signing, verification and configuration failures."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of every error gateway_auth raises.

    ``detail`` is rendered into logs and HTTP bodies, so it must only carry
    identifiers (provider, reference, setting name). A wrapped ``cause`` is
    chained for tracebacks but serialised by type name alone, since the
    underlying message may quote key material.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """``{"code", "message", "detail"}`` plus the cause's type name, if any."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            payload["cause"] = type(self.cause).__name__
        return payload


__all__ = ["BaseError"]
