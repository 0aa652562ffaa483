"""Signing – MultiPartHmacSigner (HMAC-SHA512 over a newline-joined request line).

String to sign, one part per line::

    1
    <key_id>
    <unix timestamp>
    <nonce>
    post /invoices http/1.1

The HMAC key is not the shared secret itself but ``base64(sha512(secret))``.
The result is always rendered base64.
"""
from __future__ import annotations

import base64
import hashlib
import hmac

from gateway_auth.credentials import CredentialContext, SignatureEncoding, SigningPolicy
from gateway_auth.kernel.errors import MalformedRequestError
from gateway_auth.signing.request import SigningRequest
from gateway_auth.signing.signer import CanonicalSigner

PROTOCOL_VERSION = "1"


def derive_key(secret: str) -> bytes:
    """Return the base64 text of ``sha512(secret)`` used as the HMAC key."""
    return base64.b64encode(hashlib.sha512(secret.encode("utf-8")).digest())


class MultiPartHmacSigner(CanonicalSigner):
    """Outbound signer for the bank e-invoicing API."""

    policy = SigningPolicy.MULTI_PART_HMAC
    algorithm = "hmac-sha512"

    def canonical_string(self, request: SigningRequest, credentials: CredentialContext) -> str:
        method = request.http_method.strip()
        path = request.canonical_path.strip()
        if not method.isalpha():
            raise MalformedRequestError("HTTP method must be a non-empty token", provider_id=credentials.provider_id)
        if not path.startswith("/"):
            raise MalformedRequestError("Canonical path must start with '/'", provider_id=credentials.provider_id)
        if not (request.timestamp.isascii() and request.timestamp.isdigit()):
            raise MalformedRequestError(
                "Timestamp must be integer Unix seconds",
                provider_id=credentials.provider_id,
                timestamp=request.timestamp,
            )
        if not request.nonce:
            raise MalformedRequestError("Nonce is required", provider_id=credentials.provider_id)

        request_line = f"{method} {path} http/1.1".lower()
        parts = [PROTOCOL_VERSION, credentials.key_id, request.timestamp, request.nonce, request_line]
        if any("\n" in part for part in parts):
            raise MalformedRequestError("Signed parts must not contain newlines", provider_id=credentials.provider_id)
        return "\n".join(parts)

    def _digest(self, message: str, credentials: CredentialContext) -> bytes:
        key = derive_key(credentials.secret)
        return hmac.new(key, message.encode("utf-8"), hashlib.sha512).digest()

    def _encoding(self, credentials: CredentialContext) -> SignatureEncoding:  # noqa: ARG002
        return SignatureEncoding.BASE64


__all__ = ["PROTOCOL_VERSION", "MultiPartHmacSigner", "derive_key"]
