"""SQLAlchemy ORM mixin – NonceRecordMixin."""
from __future__ import annotations

import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column


class NonceRecordMixin:
    """Columns for a nonce table; ``(provider_id, nonce)`` is the primary key.

    Mix into a concrete model of your own declarative base::

        class NonceRecordModel(NonceRecordMixin, Base):
            __tablename__ = "gateway_nonces"

    The composite primary key is what makes check-and-record atomic: two
    concurrent inserts of the same pair cannot both commit.
    """

    provider_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    nonce: Mapped[str] = mapped_column(String(128), primary_key=True)
    first_seen_at: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    expires_at: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)


__all__ = ["NonceRecordMixin"]
