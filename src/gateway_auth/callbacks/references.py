"""Callbacks – ReferenceResolver port + in-memory implementation."""
from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable


@runtime_checkable
class ReferenceResolver(Protocol):
    """Port: does an order/payment reference exist for this provider?"""

    async def exists(self, provider_id: str, reference: str) -> bool: ...


class InMemoryReferenceResolver:
    """Fake ReferenceResolver for unit tests and single-process setups."""

    def __init__(self, references: Iterable[tuple[str, str]] = ()) -> None:
        self._references: set[tuple[str, str]] = set(references)

    def issue(self, provider_id: str, reference: str) -> None:
        self._references.add((provider_id, reference))

    async def exists(self, provider_id: str, reference: str) -> bool:
        return (provider_id, reference) in self._references


__all__ = ["InMemoryReferenceResolver", "ReferenceResolver"]
