"""Signing – CanonicalSigner strategy port."""
from __future__ import annotations

import abc
from typing import ClassVar

from gateway_auth.credentials import CredentialContext, SignatureEncoding, SigningPolicy
from gateway_auth.signing.request import Signature, SigningRequest


class CanonicalSigner(abc.ABC):
    """Port: map a request + credentials to a deterministic keyed digest.

    Subclasses only decide the string-to-sign and the digest; rendering and
    constant-time verification are shared.
    """

    policy: ClassVar[SigningPolicy]
    algorithm: ClassVar[str]

    @abc.abstractmethod
    def canonical_string(self, request: SigningRequest, credentials: CredentialContext) -> str: ...

    @abc.abstractmethod
    def _digest(self, message: str, credentials: CredentialContext) -> bytes: ...

    def _encoding(self, credentials: CredentialContext) -> SignatureEncoding:
        return credentials.encoding

    def sign(self, request: SigningRequest, credentials: CredentialContext) -> Signature:
        message = self.canonical_string(request, credentials)
        return Signature(
            value=self._digest(message, credentials),
            encoding=self._encoding(credentials),
            algorithm=self.algorithm,
        )

    def verify(self, request: SigningRequest, credentials: CredentialContext, candidate: str) -> bool:
        """Re-derive the signature for *request* and compare in constant time."""
        return self.sign(request, credentials).matches(candidate)


__all__ = ["CanonicalSigner"]
