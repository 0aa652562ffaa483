"""Redis adapter – RedisNonceStore."""
from __future__ import annotations

from datetime import datetime

from gateway_auth.adapters.redis.client import RedisClient
from gateway_auth.nonces import DEFAULT_RETENTION_SECONDS, NonceDecision, NonceStore


class RedisNonceStore(NonceStore):
    """Redis-backed nonce store shared by every worker process.

    Check and record is one ``SET NX EX`` round trip; Redis expires the key
    once the retention horizon has passed.
    """

    def __init__(self, client: RedisClient, default_ttl: int = DEFAULT_RETENTION_SECONDS, namespace: str = "nonce") -> None:
        self._client = client
        self._ttl = default_ttl
        self._namespace = namespace

    def _key(self, provider_id: str, nonce: str) -> str:
        return f"{self._namespace}:{provider_id}:{nonce}"

    async def check_and_record(
        self,
        provider_id: str,
        nonce: str,
        observed_at: datetime,
        *,
        ttl_seconds: int | None = None,
    ) -> NonceDecision:
        created = await self._client.set_if_absent(
            self._key(provider_id, nonce),
            observed_at.isoformat().encode(),
            ttl=ttl_seconds if ttl_seconds is not None else self._ttl,
        )
        return NonceDecision.ACCEPTED if created else NonceDecision.REJECTED


__all__ = ["RedisNonceStore"]
