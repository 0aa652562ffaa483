"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from gateway_auth.config.validation import ConfigError
from gateway_auth.kernel.errors import (
    BaseError,
    InvalidSignatureError,
    MalformedRequestError,
    MissingParameterError,
    ReplayedNotificationError,
    StaleOrFutureTimestampError,
    UnknownReferenceError,
    VerificationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_str_is_json(self) -> None:
        err = BaseError("boom", detail={"k": "v"})
        assert json.loads(str(err)) == {"code": "base_error", "message": "boom", "detail": {"k": "v"}}

    def test_cause_is_chained_but_only_named(self) -> None:
        cause = ValueError("raw secret material here")
        err = BaseError("wrapped", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == "ValueError"
        assert "raw secret" not in str(err)


# ---------------------------------------------------------------------------
# VerificationError family
# ---------------------------------------------------------------------------


class TestVerificationErrors:
    @pytest.mark.parametrize(
        ("error_cls", "code", "status"),
        [
            (MalformedRequestError, "malformed_request", 400),
            (StaleOrFutureTimestampError, "stale_or_future_timestamp", 400),
            (ReplayedNotificationError, "replayed_notification", 403),
            (InvalidSignatureError, "invalid_signature", 401),
            (UnknownReferenceError, "unknown_reference", 404),
        ],
    )
    def test_codes_and_statuses(self, error_cls: type[VerificationError], code: str, status: int) -> None:
        err = error_cls("rejected")
        assert isinstance(err, VerificationError)
        assert err.code == code
        assert err.http_status == status

    def test_missing_parameter_names_parameter(self) -> None:
        err = MissingParameterError("nonce", provider_id="payment")
        assert err.http_status == 400
        assert err.code == "missing_parameter"
        assert err.parameter == "nonce"
        assert err.detail == {"parameter": "nonce", "provider_id": "payment"}

    def test_safe_detail_fields(self) -> None:
        err = InvalidSignatureError("bad", provider_id="payment", reference="ORDER-1", timestamp="1700000000")
        assert err.to_dict()["detail"] == {
            "provider_id": "payment",
            "reference": "ORDER-1",
            "timestamp": "1700000000",
        }

    def test_none_fields_are_left_out(self) -> None:
        assert UnknownReferenceError("x", reference="ORDER-9").detail == {"reference": "ORDER-9"}

    def test_config_error_is_not_a_verification_error(self) -> None:
        assert not issubclass(ConfigError, VerificationError)
        assert issubclass(ConfigError, BaseError)
