"""Headers – HeaderBuilder port."""
from __future__ import annotations

import abc

from gateway_auth.credentials import CredentialContext
from gateway_auth.signing import Signature, SigningRequest


class HeaderBuilder(abc.ABC):
    """Port: render a signature into the literal headers a gateway expects.

    Implementations are pure: no I/O, no caching, no clock access.
    """

    authorization_header: str = "Authorization"

    @abc.abstractmethod
    def build(
        self,
        signature: Signature,
        request: SigningRequest,
        credentials: CredentialContext,
    ) -> dict[str, str]: ...


__all__ = ["HeaderBuilder"]
