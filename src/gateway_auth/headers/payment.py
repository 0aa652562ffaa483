"""Headers – PaymentGatewayHeaderBuilder."""
from __future__ import annotations

from gateway_auth.credentials import CredentialContext
from gateway_auth.headers.builder import HeaderBuilder
from gateway_auth.signing import Signature, SigningRequest


class PaymentGatewayHeaderBuilder(HeaderBuilder):
    """``Authorization: HMAC-SHA256 <key_id>:<signature>`` plus merchant key,
    timestamp and nonce headers."""

    public_key_header = "X-Merchant-Key"
    timestamp_header = "X-Timestamp"
    nonce_header = "X-Nonce"

    def build(
        self,
        signature: Signature,
        request: SigningRequest,
        credentials: CredentialContext,
    ) -> dict[str, str]:
        return {
            self.authorization_header: f"{signature.algorithm.upper()} {credentials.key_id}:{signature.rendered}",
            self.public_key_header: credentials.public_value,
            self.timestamp_header: request.timestamp,
            self.nonce_header: request.nonce,
        }


__all__ = ["PaymentGatewayHeaderBuilder"]
