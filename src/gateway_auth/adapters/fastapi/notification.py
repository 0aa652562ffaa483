"""FastAPI adapter – build an InboundNotification from a request."""
from __future__ import annotations

from typing import Any

from gateway_auth.callbacks import InboundNotification
from gateway_auth.signing import json_parameters

DEFAULT_SIGNATURE_HEADER = "X-Signature"

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def notification_from_request(
    request: Any,
    signature_header: str = DEFAULT_SIGNATURE_HEADER,
) -> InboundNotification:
    """Flatten query string and body into one parameter map.

    Form and JSON bodies are supported; body fields win over query fields
    of the same name. The signature header is optional here, the verifier
    falls back to the signature field.
    """
    params: dict[str, str] = dict(request.query_params)
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if content_type in _FORM_TYPES:
        form = await request.form()
        params.update({key: value for key, value in form.items() if isinstance(value, str)})
    elif content_type == "application/json":
        body = await request.body()
        if body:
            params.update(json_parameters(body))

    return InboundNotification(
        raw_parameters=params,
        header_signature=request.headers.get(signature_header) or None,
    )


__all__ = ["DEFAULT_SIGNATURE_HEADER", "notification_from_request"]
