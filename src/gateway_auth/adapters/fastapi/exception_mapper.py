"""FastAPI adapter – CallbackExceptionMapper."""
from __future__ import annotations

from typing import Any


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'gateway-auth[fastapi]' to use the FastAPI adapter"
        ) from exc


class CallbackExceptionMapper:
    """Register verification error → HTTP status mappings on a FastAPI app.

    Error body schema::

        {"code": "invalid_signature", "message": "...", "detail": {...}}

    Mappings
    --------
    ``MalformedRequestError``       → 400
    ``MissingParameterError``       → 400
    ``StaleOrFutureTimestampError`` → 400
    ``InvalidSignatureError``       → 401
    ``ReplayedNotificationError``   → 403
    ``UnknownReferenceError``       → 404

    Each status comes from the error's ``http_status`` attribute.
    """

    def __init__(self) -> None:
        _require_fastapi()

    def register(self, app: Any) -> None:
        """Register the handler on a ``FastAPI`` or ``Starlette`` app."""
        from fastapi.responses import JSONResponse  # type: ignore[import-untyped]

        from gateway_auth.kernel.errors import VerificationError

        def handler(request: Any, exc: Any) -> Any:  # noqa: ARG001
            return JSONResponse(status_code=exc.http_status, content=exc.to_dict())

        app.add_exception_handler(VerificationError, handler)


__all__ = ["CallbackExceptionMapper"]
