"""Nonces – NonceStore port, NonceDecision, NonceRecord."""
from __future__ import annotations

import abc
import dataclasses
from datetime import datetime, timedelta
from enum import Enum

DEFAULT_RETENTION_SECONDS = 600


class NonceDecision(str, Enum):
    """Outcome of a check-and-record call."""

    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"

    @property
    def accepted(self) -> bool:
        return self is NonceDecision.ACCEPTED


@dataclasses.dataclass(frozen=True)
class NonceRecord:
    """First sighting of a nonce for one provider. Never updated."""

    provider_id: str
    nonce: str
    first_seen_at: datetime
    expires_at: datetime

    @classmethod
    def first_seen(cls, provider_id: str, nonce: str, observed_at: datetime, ttl_seconds: int) -> NonceRecord:
        return cls(
            provider_id=provider_id,
            nonce=nonce,
            first_seen_at=observed_at,
            expires_at=observed_at + timedelta(seconds=ttl_seconds),
        )

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


class NonceStore(abc.ABC):
    """Port: remember which nonces a provider has already used.

    ``check_and_record`` must be a single atomic step: two concurrent callers
    presenting the same nonce get exactly one ACCEPTED between them.
    """

    @abc.abstractmethod
    async def check_and_record(
        self,
        provider_id: str,
        nonce: str,
        observed_at: datetime,
        *,
        ttl_seconds: int | None = None,
    ) -> NonceDecision: ...


__all__ = ["DEFAULT_RETENTION_SECONDS", "NonceDecision", "NonceRecord", "NonceStore"]
