"""Signing – pick the CanonicalSigner for a provider's configured policy."""
from __future__ import annotations

from gateway_auth.credentials import CredentialContext, SigningPolicy
from gateway_auth.signing.fields import CallbackFields
from gateway_auth.signing.multipart import MultiPartHmacSigner
from gateway_auth.signing.signer import CanonicalSigner
from gateway_auth.signing.sorted_params import SortedParamHmacSigner


def signer_for(policy: SigningPolicy | CredentialContext, fields: CallbackFields | None = None) -> CanonicalSigner:
    """Return the signer strategy for *policy* (or a context's policy)."""
    if isinstance(policy, CredentialContext):
        policy = policy.policy
    if policy is SigningPolicy.MULTI_PART_HMAC:
        return MultiPartHmacSigner()
    if policy is SigningPolicy.SORTED_PARAM_HMAC:
        return SortedParamHmacSigner(fields)
    raise ValueError(f"Unsupported signing policy: {policy!r}")


__all__ = ["signer_for"]
