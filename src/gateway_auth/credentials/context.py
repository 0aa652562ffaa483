"""Credentials – CredentialContext value object."""
from __future__ import annotations

import dataclasses
from enum import Enum

from gateway_auth.config.validation import InvalidSettingValueError

DEFAULT_REPLAY_WINDOW_SECONDS = 300


class SigningPolicy(str, Enum):
    """Canonicalisation policy a provider signs with."""

    MULTI_PART_HMAC = "multi_part_hmac"
    SORTED_PARAM_HMAC = "sorted_param_hmac"


class SignatureEncoding(str, Enum):
    """Text rendering of a raw digest."""

    BASE64 = "base64"
    HEX = "hex"


def _require_text(name: str, value: object) -> None:
    if not isinstance(value, str) or not value:
        raise InvalidSettingValueError(name, "must be a non-empty string")
    if value != value.strip():
        raise InvalidSettingValueError(name, "must not carry leading or trailing whitespace")


@dataclasses.dataclass(frozen=True)
class CredentialContext:
    """Per-provider secrets and identifiers.

    Validated on construction so misconfiguration fails at startup rather
    than on the first signed request. Instances are immutable and safe to
    share between concurrent callers.
    """

    provider_id: str
    key_id: str
    public_value: str
    secret: str = dataclasses.field(repr=False)
    policy: SigningPolicy = SigningPolicy.SORTED_PARAM_HMAC
    encoding: SignatureEncoding = SignatureEncoding.HEX
    replay_window_seconds: int = DEFAULT_REPLAY_WINDOW_SECONDS

    def __post_init__(self) -> None:
        _require_text("provider_id", self.provider_id)
        _require_text("key_id", self.key_id)
        _require_text("public_value", self.public_value)
        _require_text("secret", self.secret)
        try:
            object.__setattr__(self, "policy", SigningPolicy(self.policy))
        except ValueError as exc:
            raise InvalidSettingValueError("policy", f"unknown signing policy {self.policy!r}") from exc
        try:
            object.__setattr__(self, "encoding", SignatureEncoding(self.encoding))
        except ValueError as exc:
            raise InvalidSettingValueError("encoding", f"unknown encoding {self.encoding!r}") from exc
        if (
            isinstance(self.replay_window_seconds, bool)
            or not isinstance(self.replay_window_seconds, int)
            or self.replay_window_seconds <= 0
        ):
            raise InvalidSettingValueError("replay_window_seconds", "must be a positive integer")

    @property
    def secret_bytes(self) -> bytes:
        return self.secret.encode("utf-8")


__all__ = [
    "DEFAULT_REPLAY_WINDOW_SECONDS",
    "CredentialContext",
    "SignatureEncoding",
    "SigningPolicy",
]
