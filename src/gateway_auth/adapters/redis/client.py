"""Redis adapter – RedisClient."""
from __future__ import annotations

from typing import Any


def _require_redis() -> Any:
    try:
        import redis.asyncio as aioredis
        return aioredis
    except ImportError as exc:
        raise ImportError("Install 'gateway-auth[redis]' to use the Redis adapter") from exc


class RedisClient:
    """Thin async Redis wrapper exposing the atomic primitives the stores need."""

    def __init__(self, url: str, **kwargs: Any) -> None:
        aioredis = _require_redis()
        self._client = aioredis.from_url(url, **kwargs)

    async def set_if_absent(self, key: str, value: bytes, ttl: int) -> bool:
        """``SET key value NX EX ttl``; True when this call created the key."""
        return bool(await self._client.set(key, value, nx=True, ex=ttl))

    async def get(self, key: str) -> bytes | None:
        return await self._client.get(key)

    async def delete(self, key: str) -> None:
        await self._client.delete(key)

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["RedisClient"]
