"""Signing – CallbackFields, the closed set of signed notification fields."""
from __future__ import annotations

import dataclasses

from gateway_auth.config.validation import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class CallbackFields:
    """Names of the fields a sorted-parameter provider signs.

    Only these names are ever read from a parameter map; anything else a
    caller sends is ignored. ``optional`` fields are signed when present and
    left out of the canonical string entirely when absent. ``signature``
    names the field carrying the signature and is never signed itself.
    """

    nonce: str = "nonce"
    timestamp: str = "timestamp"
    reference: str = "reference"
    status: str = "status"
    signature: str = "signature"
    optional: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        names = [*self.required, self.signature, *self.optional]
        if len(set(names)) != len(names):
            raise InvalidSettingValueError("callback_fields", "field names must be distinct")

    @property
    def required(self) -> tuple[str, ...]:
        return (self.nonce, self.timestamp, self.reference, self.status)

    @property
    def signed(self) -> tuple[str, ...]:
        return self.required + self.optional


__all__ = ["CallbackFields"]
