"""Unit tests for SortedParamHmacSigner (payment gateway)."""

from __future__ import annotations

import pytest

from gateway_auth.config import InvalidSettingValueError
from gateway_auth.credentials import CredentialContext, SignatureEncoding
from gateway_auth.kernel.errors import MalformedRequestError
from gateway_auth.signing import CallbackFields, SigningRequest, SortedParamHmacSigner

# reference values computed independently with ``openssl dgst -sha256 -hmac s3cr3t``
GOLDEN_HEX = "e98b1c12ec76f6eb3ea11690413c257aee74b481ca110ee39cdb99e2eda86661"
GOLDEN_BASE64 = "6YscEux29us+oRaQQTwleu50tIHKEQ7jnNuZ4u2oZmE="
GOLDEN_HEX_WITH_AMOUNT = "44ad218dda674b2ce851f870d46e0b526daee931507efecf16c0e2b9193a1032"


def _credentials(encoding: SignatureEncoding = SignatureEncoding.HEX) -> CredentialContext:
    return CredentialContext(
        provider_id="payment",
        key_id="KEY-1",
        public_value="PUB-1",
        secret="s3cr3t",
        encoding=encoding,
    )


def _request(**params: str) -> SigningRequest:
    values = {"reference": "ORDER-1", "status": "COMPLETED"}
    values.update(params)
    return SigningRequest.for_callback(timestamp="1700000000", nonce="abc123", params=values)


class TestCanonicalString:
    def test_sorted_pairs_then_secret(self) -> None:
        text = SortedParamHmacSigner().canonical_string(_request(), _credentials())
        assert text == "nonce=abc123reference=ORDER-1status=COMPLETEDtimestamp=1700000000s3cr3t"

    def test_unknown_fields_are_never_signed(self) -> None:
        signer = SortedParamHmacSigner()
        assert signer.canonical_string(_request(evil="1", zzz="2"), _credentials()) == signer.canonical_string(
            _request(), _credentials()
        )

    def test_signature_field_is_never_signed(self) -> None:
        signer = SortedParamHmacSigner()
        text = signer.canonical_string(_request(signature="deadbeef"), _credentials())
        assert "deadbeef" not in text

    def test_optional_field_signed_when_present(self) -> None:
        signer = SortedParamHmacSigner(CallbackFields(optional=("amount",)))
        text = signer.canonical_string(_request(amount="100.00"), _credentials())
        assert text.startswith("amount=100.00nonce=abc123")

    @pytest.mark.parametrize("params", [{}, {"amount": ""}])
    def test_optional_field_absent_is_excluded(self, params: dict[str, str]) -> None:
        signer = SortedParamHmacSigner(CallbackFields(optional=("amount",)))
        assert "amount" not in signer.canonical_string(_request(**params), _credentials())

    def test_missing_required_field_raises(self) -> None:
        request = SigningRequest.for_callback(timestamp="1700000000", nonce="abc123", params={"reference": "ORDER-1"})
        with pytest.raises(MalformedRequestError):
            SortedParamHmacSigner().canonical_string(request, _credentials())

    def test_custom_field_names(self) -> None:
        fields = CallbackFields(nonce="rnd", timestamp="ts", reference="order_id", status="state")
        request = SigningRequest.for_callback(
            timestamp="1700000000", nonce="abc123", params={"order_id": "ORDER-1", "state": "PAID"}
        )
        text = SortedParamHmacSigner(fields).canonical_string(request, _credentials())
        assert text == "order_id=ORDER-1rnd=abc123state=PAIDts=1700000000s3cr3t"

    def test_duplicate_field_names_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            CallbackFields(nonce="id", reference="id")


class TestSign:
    def test_golden_hex(self) -> None:
        signature = SortedParamHmacSigner().sign(_request(), _credentials())
        assert signature.rendered == GOLDEN_HEX
        assert signature.algorithm == "hmac-sha256"

    def test_golden_base64(self) -> None:
        assert SortedParamHmacSigner().sign(_request(), _credentials(SignatureEncoding.BASE64)).rendered == GOLDEN_BASE64

    def test_golden_with_optional_amount(self) -> None:
        signer = SortedParamHmacSigner(CallbackFields(optional=("amount",)))
        assert signer.sign(_request(amount="100.00"), _credentials()).rendered == GOLDEN_HEX_WITH_AMOUNT

    def test_empty_optional_field_signs_like_absent(self) -> None:
        signer = SortedParamHmacSigner(CallbackFields(optional=("amount",)))
        assert signer.sign(_request(amount=""), _credentials()).rendered == GOLDEN_HEX
        assert signer.verify(_request(amount=""), _credentials(), GOLDEN_HEX) is True

    def test_timestamp_representation_matters(self) -> None:
        signer = SortedParamHmacSigner()
        request = SigningRequest.for_callback(
            timestamp="1700000000.0", nonce="abc123", params={"reference": "ORDER-1", "status": "COMPLETED"}
        )
        assert signer.verify(request, _credentials(), GOLDEN_HEX) is False

    def test_verify_accepts_upper_case_hex(self) -> None:
        assert SortedParamHmacSigner().verify(_request(), _credentials(), GOLDEN_HEX.upper()) is True

    def test_wrong_secret_rejected(self) -> None:
        other = CredentialContext(provider_id="payment", key_id="KEY-1", public_value="PUB-1", secret="other")
        assert SortedParamHmacSigner().verify(_request(), other, GOLDEN_HEX) is False
