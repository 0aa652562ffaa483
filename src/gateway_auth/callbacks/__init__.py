"""Callbacks – inbound notification verification."""
from gateway_auth.callbacks.notification import InboundNotification, VerifiedCallback
from gateway_auth.callbacks.references import InMemoryReferenceResolver, ReferenceResolver
from gateway_auth.callbacks.verifier import CallbackVerifier, OnVerified
from gateway_auth.signing import CallbackFields

__all__ = [
    "CallbackFields",
    "CallbackVerifier",
    "InMemoryReferenceResolver",
    "InboundNotification",
    "OnVerified",
    "ReferenceResolver",
    "VerifiedCallback",
]
