"""SQLAlchemy adapter – SqlAlchemyNonceStore."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any, Callable

from gateway_auth.nonces import DEFAULT_RETENTION_SECONDS, NonceDecision, NonceStore


class SqlAlchemyNonceStore(NonceStore):
    """SQL-backed nonce store.

    Each call runs in its own transaction: an expired row for the same pair
    is deleted, then the new row is inserted. A primary-key conflict means
    another caller recorded the nonce first.

    *session_factory* is any zero-argument callable returning an
    ``AsyncSession`` (e.g. :class:`SqlAlchemySessionFactory`); *model* is a
    mapped class built on :class:`NonceRecordMixin`.
    """

    def __init__(
        self,
        session_factory: Callable[[], Any],
        model: Any,
        default_ttl: int = DEFAULT_RETENTION_SECONDS,
    ) -> None:
        self._session_factory = session_factory
        self._model = model
        self._ttl = default_ttl

    async def check_and_record(
        self,
        provider_id: str,
        nonce: str,
        observed_at: datetime,
        *,
        ttl_seconds: int | None = None,
    ) -> NonceDecision:
        from sqlalchemy import delete  # type: ignore[import-untyped]
        from sqlalchemy.exc import IntegrityError  # type: ignore[import-untyped]

        observed_at = observed_at.astimezone(UTC)
        ttl = ttl_seconds if ttl_seconds is not None else self._ttl
        model = self._model
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    await session.execute(
                        delete(model).where(
                            model.provider_id == provider_id,
                            model.nonce == nonce,
                            model.expires_at <= observed_at,
                        )
                    )
                    session.add(
                        model(
                            provider_id=provider_id,
                            nonce=nonce,
                            first_seen_at=observed_at,
                            expires_at=observed_at + timedelta(seconds=ttl),
                        )
                    )
        except IntegrityError:
            return NonceDecision.REJECTED
        return NonceDecision.ACCEPTED

    async def purge_expired(self, now: datetime) -> int:
        """Delete every row expired at *now*; return the number removed."""
        from sqlalchemy import delete  # type: ignore[import-untyped]

        async with self._session_factory() as session:
            async with session.begin():
                result = await session.execute(delete(self._model).where(self._model.expires_at <= now.astimezone(UTC)))
        return result.rowcount or 0


__all__ = ["SqlAlchemyNonceStore"]
