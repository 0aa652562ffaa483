"""Signing – SortedParamHmacSigner (HMAC-SHA256 over sorted key=value pairs)."""
from __future__ import annotations

import hashlib
import hmac
from typing import Mapping

from gateway_auth.credentials import CredentialContext, SigningPolicy
from gateway_auth.kernel.errors import MalformedRequestError
from gateway_auth.signing.fields import CallbackFields
from gateway_auth.signing.request import SigningRequest
from gateway_auth.signing.signer import CanonicalSigner


class SortedParamHmacSigner(CanonicalSigner):
    """Payment gateway signer, used both for outbound calls and callbacks.

    Canonical string: the signed fields present in the request, sorted by
    name, each rendered ``key=value`` with no separator, followed by the
    shared secret. The HMAC-SHA256 key is the shared secret as well.

    An optional field whose value is empty counts as absent: it is left out
    of the canonical string rather than rendered as ``name=``.

    The request's ``nonce`` and ``timestamp`` are written into the field map
    under the configured names before selection, so outbound callers only
    pass the business fields in ``params``.
    """

    policy = SigningPolicy.SORTED_PARAM_HMAC
    algorithm = "hmac-sha256"

    def __init__(self, fields: CallbackFields | None = None) -> None:
        self._fields = fields or CallbackFields()

    @property
    def fields(self) -> CallbackFields:
        return self._fields

    def signed_pairs(self, request: SigningRequest, credentials: CredentialContext) -> list[tuple[str, str]]:
        """Return the ``(name, value)`` pairs that get signed, in signing order."""
        values: dict[str, str] = dict(request.params)
        values[self._fields.nonce] = request.nonce
        values[self._fields.timestamp] = request.timestamp

        for name in self._fields.required:
            if not values.get(name):
                raise MalformedRequestError(
                    f"Signed field '{name}' is missing",
                    provider_id=credentials.provider_id,
                )
        return sorted(_present(values, self._fields.signed))

    def canonical_string(self, request: SigningRequest, credentials: CredentialContext) -> str:
        pairs = self.signed_pairs(request, credentials)
        return "".join(f"{name}={value}" for name, value in pairs) + credentials.secret

    def _digest(self, message: str, credentials: CredentialContext) -> bytes:
        return hmac.new(credentials.secret_bytes, message.encode("utf-8"), hashlib.sha256).digest()


def _present(values: Mapping[str, str], names: tuple[str, ...]) -> list[tuple[str, str]]:
    # absent and empty optional fields are left out, never rendered as "name="
    return [(name, values[name]) for name in names if values.get(name)]


__all__ = ["SortedParamHmacSigner"]
