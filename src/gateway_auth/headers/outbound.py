"""Headers – OutboundAuthenticator, fresh signed headers for every call."""
from __future__ import annotations

import secrets
from typing import Callable, Mapping

from gateway_auth.credentials import CredentialContext, SigningPolicy
from gateway_auth.headers.builder import HeaderBuilder
from gateway_auth.headers.einvoice import EInvoiceHeaderBuilder
from gateway_auth.headers.payment import PaymentGatewayHeaderBuilder
from gateway_auth.kernel.time import Clock, SystemClock, epoch_seconds
from gateway_auth.observability.logging import get_logger
from gateway_auth.signing import CallbackFields, CanonicalSigner, SigningRequest, signer_for

_log = get_logger(__name__)


def random_nonce() -> str:
    """32 lowercase hex characters from the OS CSPRNG."""
    return secrets.token_hex(16)


def builder_for(credentials: CredentialContext) -> HeaderBuilder:
    """Default header builder for a provider's signing policy."""
    if credentials.policy is SigningPolicy.MULTI_PART_HMAC:
        return EInvoiceHeaderBuilder()
    return PaymentGatewayHeaderBuilder()


class OutboundAuthenticator:
    """Sign one outbound request at a time.

    A new timestamp and nonce are drawn on every call and nothing is cached,
    since the remote gateway rejects any pair it has already seen.

    Usage::

        auth = OutboundAuthenticator(load_provider("einvoice"))
        headers = auth.headers_for("POST", "/invoices")
    """

    def __init__(
        self,
        credentials: CredentialContext,
        *,
        signer: CanonicalSigner | None = None,
        builder: HeaderBuilder | None = None,
        fields: CallbackFields | None = None,
        clock: Clock | None = None,
        nonce_factory: Callable[[], str] = random_nonce,
    ) -> None:
        self._credentials = credentials
        self._signer = signer or signer_for(credentials, fields)
        self._builder = builder or builder_for(credentials)
        self._clock = clock or SystemClock()
        self._nonce_factory = nonce_factory

    @property
    def credentials(self) -> CredentialContext:
        return self._credentials

    def signing_request(
        self,
        method: str,
        path: str,
        params: Mapping[str, str] | None = None,
    ) -> SigningRequest:
        return SigningRequest(
            http_method=method,
            canonical_path=path,
            timestamp=str(epoch_seconds(self._clock)),
            nonce=self._nonce_factory(),
            params=params or {},
        )

    def headers_for(
        self,
        method: str,
        path: str,
        params: Mapping[str, str] | None = None,
    ) -> dict[str, str]:
        """Return freshly signed headers for ``method path``."""
        request = self.signing_request(method, path, params)
        signature = self._signer.sign(request, self._credentials)
        _log.debug(
            "outbound_request_signed",
            provider_id=self._credentials.provider_id,
            method=method.upper(),
            path=path,
            algorithm=signature.algorithm,
        )
        return self._builder.build(signature, request, self._credentials)


__all__ = ["OutboundAuthenticator", "builder_for", "random_nonce"]
