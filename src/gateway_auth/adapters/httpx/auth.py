"""httpx adapter – GatewayAuth, signs every outgoing request."""
from __future__ import annotations

from typing import Any, Generator

import httpx

from gateway_auth.headers import OutboundAuthenticator
from gateway_auth.signing import form_parameters, json_parameters


def request_parameters(request: httpx.Request) -> dict[str, str]:
    """Body fields of a form or JSON request; empty for anything else."""
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    body = request.content
    if not body:
        return {}
    if content_type == "application/x-www-form-urlencoded":
        return form_parameters(body)
    if content_type == "application/json":
        return json_parameters(body)
    return {}


class GatewayAuth(httpx.Auth):
    """``httpx.Auth`` that stamps freshly signed gateway headers on each request.

    Usage::

        auth = GatewayAuth(OutboundAuthenticator(load_provider("einvoice")))
        async with httpx.AsyncClient(base_url=..., auth=auth) as client:
            await client.post("/invoices", json=payload)

    A retried request goes through ``auth_flow`` again and gets a new
    timestamp and nonce.
    """

    requires_request_body = True

    def __init__(self, authenticator: OutboundAuthenticator) -> None:
        self._authenticator = authenticator

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, Any, None]:
        headers = self._authenticator.headers_for(
            request.method,
            request.url.path,
            request_parameters(request),
        )
        request.headers.update(headers)
        yield request


__all__ = ["GatewayAuth", "request_parameters"]
