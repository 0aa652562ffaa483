"""Signing – SigningRequest and Signature value objects."""
from __future__ import annotations

import base64
import dataclasses
import hmac
from types import MappingProxyType
from typing import Mapping

from gateway_auth.credentials import SignatureEncoding


@dataclasses.dataclass(frozen=True)
class SigningRequest:
    """Everything a signer needs about one outbound call or inbound notification.

    ``timestamp`` is the exact text that gets signed. It is never re-formatted,
    so both sides must agree on its representation.
    """

    http_method: str
    canonical_path: str
    timestamp: str
    nonce: str
    params: Mapping[str, str] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    @classmethod
    def for_callback(cls, timestamp: str, nonce: str, params: Mapping[str, str]) -> SigningRequest:
        """Build a request for an inbound notification (no method or path)."""
        return cls(http_method="", canonical_path="", timestamp=timestamp, nonce=nonce, params=params)


@dataclasses.dataclass(frozen=True)
class Signature:
    """A computed digest plus how it is rendered on the wire."""

    value: bytes = dataclasses.field(repr=False)
    encoding: SignatureEncoding
    algorithm: str

    @property
    def rendered(self) -> str:
        if self.encoding is SignatureEncoding.HEX:
            return self.value.hex()
        return base64.b64encode(self.value).decode("ascii")

    def matches(self, candidate: str) -> bool:
        """Constant-time comparison against a signature received as text."""
        if self.encoding is SignatureEncoding.HEX:
            candidate = candidate.lower()
        return hmac.compare_digest(self.rendered.encode("ascii"), candidate.encode("utf-8"))

    def __str__(self) -> str:
        return self.rendered


__all__ = ["Signature", "SigningRequest"]
