"""Verification errors — rejections raised while signing or verifying.

Every error carries an ``http_status`` the HTTP layer maps the rejection to.
``detail`` only ever holds safe identifiers (provider, reference, timestamp,
parameter name); secrets, signatures and derived keys never reach it.
"""

from __future__ import annotations

from typing import Any

from gateway_auth.kernel.errors.base import BaseError


class VerificationError(BaseError):
    """A terminal, non-retryable signing or verification failure."""

    default_code = "verification_error"
    http_status: int = 400

    def __init__(
        self,
        message: str,
        *,
        provider_id: str | None = None,
        reference: str | None = None,
        timestamp: str | None = None,
        **kwargs: Any,
    ) -> None:
        detail: dict[str, Any] = kwargs.pop("detail", None) or {}
        if provider_id is not None:
            detail.setdefault("provider_id", provider_id)
        if reference is not None:
            detail.setdefault("reference", reference)
        if timestamp is not None:
            detail.setdefault("timestamp", timestamp)
        super().__init__(message, detail=detail, **kwargs)
        self.provider_id = provider_id
        self.reference = reference
        self.timestamp = timestamp


class MalformedRequestError(VerificationError):
    """A request cannot be canonicalised (bad or missing signed field)."""

    default_code = "malformed_request"
    http_status = 400


class MissingParameterError(VerificationError):
    """A mandatory notification field is absent or empty."""

    default_code = "missing_parameter"
    http_status = 400

    def __init__(self, parameter: str, **kwargs: Any) -> None:
        detail = kwargs.pop("detail", None) or {}
        detail.setdefault("parameter", parameter)
        super().__init__(f"Required parameter '{parameter}' is missing", detail=detail, **kwargs)
        self.parameter = parameter


class StaleOrFutureTimestampError(VerificationError):
    """The notification timestamp falls outside the replay window."""

    default_code = "stale_or_future_timestamp"
    http_status = 400


class ReplayedNotificationError(VerificationError):
    """The nonce has already been accepted for this provider."""

    default_code = "replayed_notification"
    http_status = 403


class InvalidSignatureError(VerificationError):
    """The supplied signature does not match the recomputed one."""

    default_code = "invalid_signature"
    http_status = 401


class UnknownReferenceError(VerificationError):
    """The order/payment reference was never issued."""

    default_code = "unknown_reference"
    http_status = 404


__all__ = [
    "InvalidSignatureError",
    "MalformedRequestError",
    "MissingParameterError",
    "ReplayedNotificationError",
    "StaleOrFutureTimestampError",
    "UnknownReferenceError",
    "VerificationError",
]
