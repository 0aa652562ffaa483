"""Credentials – ProviderSettings loaded from the environment."""
from __future__ import annotations

import dataclasses

from gateway_auth.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from gateway_auth.config.validation import InvalidSettingValueError
from gateway_auth.credentials.context import (
    DEFAULT_REPLAY_WINDOW_SECONDS,
    CredentialContext,
    SignatureEncoding,
    SigningPolicy,
)


@dataclasses.dataclass
class ProviderSettings(Settings):
    """Raw per-provider configuration.

    Environment variables (with prefix ``PAYMENT``)::

        PAYMENT_KEY_ID, PAYMENT_PUBLIC_VALUE, PAYMENT_SECRET,
        PAYMENT_REPLAY_WINDOW_SECONDS, PAYMENT_POLICY, PAYMENT_ENCODING
    """

    key_id: str
    public_value: str
    secret: str = dataclasses.field(repr=False)
    replay_window_seconds: int = DEFAULT_REPLAY_WINDOW_SECONDS
    policy: str = SigningPolicy.SORTED_PARAM_HMAC.value
    encoding: str = SignatureEncoding.HEX.value

    def _validate(self) -> None:
        if self.policy not in {p.value for p in SigningPolicy}:
            raise InvalidSettingValueError("policy", f"expected one of {sorted(p.value for p in SigningPolicy)}")
        if self.encoding not in {e.value for e in SignatureEncoding}:
            raise InvalidSettingValueError("encoding", f"expected one of {sorted(e.value for e in SignatureEncoding)}")

    def to_credentials(self, provider_id: str) -> CredentialContext:
        return CredentialContext(
            provider_id=provider_id,
            key_id=self.key_id,
            public_value=self.public_value,
            secret=self.secret,
            policy=SigningPolicy(self.policy),
            encoding=SignatureEncoding(self.encoding),
            replay_window_seconds=self.replay_window_seconds,
        )


def load_provider(
    provider_id: str,
    prefix: str | None = None,
    loader: SettingsLoader | None = None,
) -> CredentialContext:
    """Load and validate one provider's credentials at startup.

    *prefix* defaults to the upper-cased provider id, so ``"payment"`` reads
    ``PAYMENT_KEY_ID`` and friends. Raises a
    :class:`~gateway_auth.config.ConfigError` subclass on any problem.
    """
    loader = loader or EnvSettingsLoader(prefix=prefix or provider_id)
    return loader.load(ProviderSettings).to_credentials(provider_id)


__all__ = ["ProviderSettings", "load_provider"]
