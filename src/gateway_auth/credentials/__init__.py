"""Credentials – immutable per-provider secrets and their configuration."""
from gateway_auth.credentials.context import (
    DEFAULT_REPLAY_WINDOW_SECONDS,
    CredentialContext,
    SignatureEncoding,
    SigningPolicy,
)
from gateway_auth.credentials.settings import ProviderSettings, load_provider

__all__ = [
    "DEFAULT_REPLAY_WINDOW_SECONDS",
    "CredentialContext",
    "ProviderSettings",
    "SignatureEncoding",
    "SigningPolicy",
    "load_provider",
]
