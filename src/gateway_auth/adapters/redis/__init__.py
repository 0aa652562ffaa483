"""Redis adapter – client wrapper and nonce store."""
from gateway_auth.adapters.redis.client import RedisClient
from gateway_auth.adapters.redis.nonce_store import RedisNonceStore

__all__ = ["RedisClient", "RedisNonceStore"]
