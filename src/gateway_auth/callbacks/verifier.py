"""Callbacks – CallbackVerifier.

Checks run in a fixed order and stop at the first failure:

1. required fields present           → MissingParameterError
2. timestamp within the replay window → StaleOrFutureTimestampError
3. nonce not seen before             → ReplayedNotificationError
4. signature matches                 → InvalidSignatureError
5. reference was issued              → UnknownReferenceError

Nothing leaves the verifier until all five pass.
"""
from __future__ import annotations

from typing import Awaitable, Callable

from gateway_auth.callbacks.notification import InboundNotification, VerifiedCallback
from gateway_auth.callbacks.references import ReferenceResolver
from gateway_auth.config.validation import InvalidSettingValueError
from gateway_auth.credentials import CredentialContext, SigningPolicy
from gateway_auth.kernel.errors import (
    InvalidSignatureError,
    MalformedRequestError,
    MissingParameterError,
    ReplayedNotificationError,
    StaleOrFutureTimestampError,
    UnknownReferenceError,
    VerificationError,
)
from gateway_auth.kernel.time import Clock, SystemClock, epoch_seconds
from gateway_auth.nonces import NonceStore
from gateway_auth.observability.logging import get_logger
from gateway_auth.signing import CallbackFields, SigningRequest, SortedParamHmacSigner

_log = get_logger(__name__)

OnVerified = Callable[[VerifiedCallback], Awaitable[None]]

# Unix seconds stay below 12 digits until the year 33658
MAX_TIMESTAMP_DIGITS = 12


class CallbackVerifier:
    """Turn an :class:`InboundNotification` into a trusted :class:`VerifiedCallback`.

    Parameters
    ----------
    credentials:
        The provider's context; must use the sorted-parameter policy.
    nonce_store:
        Shared replay tracker; the only mutable state touched.
    references:
        Lookup into the external order/payment store.
    fields:
        Names of the notification fields; defaults to :class:`CallbackFields`.
    clock:
        Source of "now" for freshness and nonce bookkeeping.
    window_seconds:
        Allowed ``|now - timestamp|``; defaults to the context's
        ``replay_window_seconds``.
    on_verified:
        Optional coroutine handed each verified callback, e.g. the order
        status updater. Runs only after every check has passed.
    """

    def __init__(
        self,
        credentials: CredentialContext,
        nonce_store: NonceStore,
        references: ReferenceResolver,
        *,
        fields: CallbackFields | None = None,
        clock: Clock | None = None,
        window_seconds: int | None = None,
        on_verified: OnVerified | None = None,
    ) -> None:
        if credentials.policy is not SigningPolicy.SORTED_PARAM_HMAC:
            raise InvalidSettingValueError("policy", "callback verification needs the sorted-parameter policy")
        if window_seconds is not None and window_seconds <= 0:
            raise InvalidSettingValueError("window_seconds", "must be a positive integer")
        self._credentials = credentials
        self._nonces = nonce_store
        self._references = references
        self._fields = fields or CallbackFields()
        self._signer = SortedParamHmacSigner(self._fields)
        self._clock = clock or SystemClock()
        self._window = window_seconds or credentials.replay_window_seconds
        self._on_verified = on_verified

    @property
    def window_seconds(self) -> int:
        return self._window

    @property
    def retention_seconds(self) -> int:
        """How long a recorded nonce must be kept: ``2 * window + 1``."""
        return 2 * self._window + 1

    async def verify(self, notification: InboundNotification) -> VerifiedCallback:
        """Run every check; raise a :class:`VerificationError` on the first failure."""
        provider_id = self._credentials.provider_id
        reference = notification.get(self._fields.reference)
        timestamp = notification.get(self._fields.timestamp)
        try:
            signature = self._require_fields(notification)
            self._check_freshness(timestamp or "")
            await self._check_replay(notification)
            self._check_signature(notification, signature)
            await self._check_reference(reference or "")
        except VerificationError as exc:
            _log.warning(
                "callback_rejected",
                reason=exc.code,
                provider_id=provider_id,
                reference=reference,
                timestamp=timestamp,
                parameter=getattr(exc, "parameter", None),
            )
            raise

        callback = VerifiedCallback(
            provider_id=provider_id,
            reference=reference or "",
            status=notification.get(self._fields.status) or "",
            verified_at=self._clock.now(),
        )
        _log.info(
            "callback_verified",
            provider_id=provider_id,
            reference=callback.reference,
            status=callback.status,
        )
        if self._on_verified is not None:
            await self._on_verified(callback)
        return callback

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _require_fields(self, notification: InboundNotification) -> str:
        provider_id = self._credentials.provider_id
        for name in self._fields.required:
            if notification.get(name) is None:
                raise MissingParameterError(name, provider_id=provider_id)
        signature = notification.header_signature or notification.get(self._fields.signature)
        if not signature:
            raise MissingParameterError(self._fields.signature, provider_id=provider_id)
        return signature

    def _check_freshness(self, timestamp: str) -> None:
        provider_id = self._credentials.provider_id
        if not (timestamp.isascii() and timestamp.isdigit()) or len(timestamp) > MAX_TIMESTAMP_DIGITS:
            raise MalformedRequestError(
                "Timestamp must be integer Unix seconds",
                provider_id=provider_id,
                timestamp=timestamp,
            )
        skew = abs(epoch_seconds(self._clock) - int(timestamp))
        if skew > self._window:
            raise StaleOrFutureTimestampError(
                f"Timestamp is {skew}s away from now; window is {self._window}s",
                provider_id=provider_id,
                timestamp=timestamp,
            )

    async def _check_replay(self, notification: InboundNotification) -> None:
        provider_id = self._credentials.provider_id
        # a notification dated one window ahead stays fresh until a window
        # after that, inclusive of the boundary second
        decision = await self._nonces.check_and_record(
            provider_id,
            notification.get(self._fields.nonce) or "",
            self._clock.now(),
            ttl_seconds=self.retention_seconds,
        )
        if not decision.accepted:
            raise ReplayedNotificationError(
                "Nonce has already been used",
                provider_id=provider_id,
                reference=notification.get(self._fields.reference),
                timestamp=notification.get(self._fields.timestamp),
            )

    def _check_signature(self, notification: InboundNotification, signature: str) -> None:
        request = SigningRequest.for_callback(
            timestamp=notification.get(self._fields.timestamp) or "",
            nonce=notification.get(self._fields.nonce) or "",
            params=notification.raw_parameters,
        )
        if not self._signer.verify(request, self._credentials, signature):
            raise InvalidSignatureError(
                "Signature does not match",
                provider_id=self._credentials.provider_id,
                reference=notification.get(self._fields.reference),
                timestamp=notification.get(self._fields.timestamp),
            )

    async def _check_reference(self, reference: str) -> None:
        provider_id = self._credentials.provider_id
        if not await self._references.exists(provider_id, reference):
            raise UnknownReferenceError(
                f"Reference '{reference}' was never issued",
                provider_id=provider_id,
                reference=reference,
            )


__all__ = ["MAX_TIMESTAMP_DIGITS", "CallbackVerifier", "OnVerified"]
