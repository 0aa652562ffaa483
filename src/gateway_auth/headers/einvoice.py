"""Headers – EInvoiceHeaderBuilder for the bank e-invoicing API."""
from __future__ import annotations

from gateway_auth.credentials import CredentialContext
from gateway_auth.headers.builder import HeaderBuilder
from gateway_auth.signing import Signature, SigningRequest

AUTH_SCHEME = "hmac-auth-v1"


class EInvoiceHeaderBuilder(HeaderBuilder):
    """Structured credential header plus a separate public-key header.

    Example::

        Authorization: hmac-auth-v1 keyId="KEY-1",ts="1700000000",nonce="abc123",signature="2rfv..."
        X-Public-Key: PUB-1
    """

    public_key_header = "X-Public-Key"

    def build(
        self,
        signature: Signature,
        request: SigningRequest,
        credentials: CredentialContext,
    ) -> dict[str, str]:
        fields = (
            ("keyId", credentials.key_id),
            ("ts", request.timestamp),
            ("nonce", request.nonce),
            ("signature", signature.rendered),
        )
        credential = ",".join(f'{name}="{value}"' for name, value in fields)
        return {
            self.authorization_header: f"{AUTH_SCHEME} {credential}",
            self.public_key_header: credentials.public_value,
        }


__all__ = ["AUTH_SCHEME", "EInvoiceHeaderBuilder"]
