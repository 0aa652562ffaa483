"""Callbacks – InboundNotification and VerifiedCallback."""
from __future__ import annotations

import dataclasses
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Mapping


@dataclasses.dataclass(frozen=True)
class InboundNotification:
    """A notification exactly as the HTTP layer received it.

    Never retried internally: a gateway redelivery arrives as a new
    notification carrying a new nonce.
    """

    raw_parameters: Mapping[str, str]
    header_signature: str | None = dataclasses.field(default=None, repr=False)
    received_at: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw_parameters", MappingProxyType(dict(self.raw_parameters)))

    def get(self, name: str) -> str | None:
        value = self.raw_parameters.get(name)
        return value if value else None


@dataclasses.dataclass(frozen=True)
class VerifiedCallback:
    """The only artifact allowed to drive an order/payment state change."""

    provider_id: str
    reference: str
    status: str
    verified_at: datetime


__all__ = ["InboundNotification", "VerifiedCallback"]
