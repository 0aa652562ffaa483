"""Nonces – single-use token tracking for replay protection."""
from gateway_auth.nonces.in_memory import InMemoryNonceStore
from gateway_auth.nonces.store import DEFAULT_RETENTION_SECONDS, NonceDecision, NonceRecord, NonceStore

__all__ = [
    "DEFAULT_RETENTION_SECONDS",
    "InMemoryNonceStore",
    "NonceDecision",
    "NonceRecord",
    "NonceStore",
]
