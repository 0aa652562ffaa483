"""FastAPI adapter – callback receiver router."""
from typing import Any

from gateway_auth.adapters.fastapi.exception_mapper import _require_fastapi
from gateway_auth.adapters.fastapi.notification import DEFAULT_SIGNATURE_HEADER, notification_from_request
from gateway_auth.callbacks import CallbackVerifier


def CallbackRouter(
    verifier: CallbackVerifier,
    path: str = "/callbacks",
    signature_header: str = DEFAULT_SIGNATURE_HEADER,
    tags: list[str] | None = None,
) -> Any:
    """Return a router that verifies notifications POSTed to *path*.

    Rejections propagate as :class:`VerificationError`; register
    :class:`CallbackExceptionMapper` on the app to turn them into responses.
    """
    _require_fastapi()
    from fastapi import APIRouter, Request  # type: ignore[import-untyped]

    router = APIRouter(tags=tags or ["callbacks"])

    @router.post(path)
    async def receive(request: Request) -> dict[str, str]:
        notification = await notification_from_request(request, signature_header)
        callback = await verifier.verify(notification)
        return {
            "reference": callback.reference,
            "status": callback.status,
            "verified_at": callback.verified_at.isoformat(),
        }

    return router


__all__ = ["CallbackRouter"]
