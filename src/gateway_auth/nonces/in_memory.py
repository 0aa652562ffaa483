"""Nonces – InMemoryNonceStore (single process)."""
from __future__ import annotations

import threading
from datetime import datetime

from gateway_auth.nonces.store import DEFAULT_RETENTION_SECONDS, NonceDecision, NonceRecord, NonceStore


class InMemoryNonceStore(NonceStore):
    """Lock-guarded dict keyed by ``(provider_id, nonce)``.

    The check and the insert happen under one ``threading.Lock`` with no
    ``await`` in between, so the store is linearizable across both asyncio
    tasks and threads. Expired records are replaced lazily on lookup and
    swept in bulk every *sweep_every* inserts.
    """

    def __init__(self, default_ttl: int = DEFAULT_RETENTION_SECONDS, *, sweep_every: int = 1024) -> None:
        self._ttl = default_ttl
        self._sweep_every = sweep_every
        self._records: dict[tuple[str, str], NonceRecord] = {}
        self._inserts = 0
        self._lock = threading.Lock()

    async def check_and_record(
        self,
        provider_id: str,
        nonce: str,
        observed_at: datetime,
        *,
        ttl_seconds: int | None = None,
    ) -> NonceDecision:
        key = (provider_id, nonce)
        with self._lock:
            existing = self._records.get(key)
            if existing is not None and not existing.is_expired(observed_at):
                return NonceDecision.REJECTED
            self._records[key] = NonceRecord.first_seen(
                provider_id, nonce, observed_at, ttl_seconds if ttl_seconds is not None else self._ttl
            )
            self._inserts += 1
            if self._inserts % self._sweep_every == 0:
                self._purge_locked(observed_at)
            return NonceDecision.ACCEPTED

    def purge_expired(self, now: datetime) -> int:
        """Drop every record expired at *now*; return how many were dropped."""
        with self._lock:
            return self._purge_locked(now)

    def get(self, provider_id: str, nonce: str) -> NonceRecord | None:
        with self._lock:
            return self._records.get((provider_id, nonce))

    def _purge_locked(self, now: datetime) -> int:
        expired = [key for key, record in self._records.items() if record.is_expired(now)]
        for key in expired:
            del self._records[key]
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


__all__ = ["InMemoryNonceStore"]
