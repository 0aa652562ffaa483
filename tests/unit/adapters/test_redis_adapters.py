"""Unit tests for Redis adapters — no running Redis required."""
from __future__ import annotations

import asyncio
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

from gateway_auth.nonces import NonceDecision
from gateway_auth.testing import FakeClock


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_client() -> tuple[Any, MagicMock]:
    """Return (RedisClient, mock_client) without needing a real Redis."""
    mock_client = MagicMock()
    mock_client.set = AsyncMock(return_value=True)
    mock_client.get = AsyncMock(return_value=None)
    mock_client.delete = AsyncMock()
    mock_client.aclose = AsyncMock()

    import gateway_auth.adapters.redis.client as client_mod

    mock_aioredis = MagicMock()
    mock_aioredis.from_url = MagicMock(return_value=mock_client)

    with patch.object(client_mod, "_require_redis", return_value=mock_aioredis):
        from gateway_auth.adapters.redis import RedisClient
        client = RedisClient("redis://localhost:6379")

    mock_aioredis.from_url.assert_called_once_with("redis://localhost:6379")
    return client, mock_client


class _SetNxBackend:
    """Emulates ``SET NX`` so concurrent callers race on a shared dict."""

    def __init__(self) -> None:
        self.keys: dict[str, tuple[bytes, int]] = {}

    async def set(self, key: str, value: bytes, nx: bool = False, ex: int | None = None) -> bool | None:
        await asyncio.sleep(0)
        if nx and key in self.keys:
            return None
        self.keys[key] = (value, ex or 0)
        return True


# ---------------------------------------------------------------------------
# RedisClient
# ---------------------------------------------------------------------------


class TestRedisClient:
    def test_set_if_absent_uses_nx_and_ex(self) -> None:
        async def run() -> None:
            client, mock = _make_client()
            assert await client.set_if_absent("k", b"v", ttl=600) is True
            mock.set.assert_awaited_once_with("k", b"v", nx=True, ex=600)
        asyncio.run(run())

    def test_set_if_absent_false_when_key_exists(self) -> None:
        async def run() -> None:
            client, mock = _make_client()
            mock.set = AsyncMock(return_value=None)
            assert await client.set_if_absent("k", b"v", ttl=600) is False
        asyncio.run(run())

    def test_get_delete_close(self) -> None:
        async def run() -> None:
            client, mock = _make_client()
            mock.get = AsyncMock(return_value=b"x")
            assert await client.get("k") == b"x"
            await client.delete("k")
            mock.delete.assert_awaited_once_with("k")
            await client.close()
            mock.aclose.assert_awaited_once()
        asyncio.run(run())


# ---------------------------------------------------------------------------
# RedisNonceStore
# ---------------------------------------------------------------------------


class TestRedisNonceStore:
    def test_first_sight_accepted_with_namespaced_key(self) -> None:
        async def run() -> None:
            from gateway_auth.adapters.redis import RedisNonceStore

            client, mock = _make_client()
            store = RedisNonceStore(client)
            observed = FakeClock().now()
            decision = await store.check_and_record("payment", "abc123", observed)
            assert decision is NonceDecision.ACCEPTED
            mock.set.assert_awaited_once_with(
                "nonce:payment:abc123", observed.isoformat().encode(), nx=True, ex=600
            )
        asyncio.run(run())

    def test_existing_key_rejected(self) -> None:
        async def run() -> None:
            from gateway_auth.adapters.redis import RedisNonceStore

            client, mock = _make_client()
            mock.set = AsyncMock(return_value=None)
            store = RedisNonceStore(client)
            assert await store.check_and_record("payment", "abc123", FakeClock().now()) is NonceDecision.REJECTED
        asyncio.run(run())

    def test_per_call_ttl_and_namespace(self) -> None:
        async def run() -> None:
            from gateway_auth.adapters.redis import RedisNonceStore

            client, mock = _make_client()
            store = RedisNonceStore(client, default_ttl=60, namespace="gw")
            await store.check_and_record("einvoice", "n-1", FakeClock().now(), ttl_seconds=30)
            args, kwargs = mock.set.call_args
            assert args[0] == "gw:einvoice:n-1"
            assert kwargs["ex"] == 30
        asyncio.run(run())

    def test_concurrent_duplicates_accept_exactly_one(self) -> None:
        async def run() -> None:
            from gateway_auth.adapters.redis import RedisNonceStore

            client, mock = _make_client()
            backend = _SetNxBackend()
            mock.set = AsyncMock(side_effect=backend.set)
            store = RedisNonceStore(client)
            observed = FakeClock().now()
            decisions = await asyncio.gather(
                *(store.check_and_record("payment", "dup", observed) for _ in range(20))
            )
            assert decisions.count(NonceDecision.ACCEPTED) == 1
            assert list(backend.keys) == ["nonce:payment:dup"]
        asyncio.run(run())
