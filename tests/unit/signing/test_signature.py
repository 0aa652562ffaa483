"""Unit tests for Signature, SigningRequest, signer_for and signer properties."""

from __future__ import annotations

import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from gateway_auth.credentials import CredentialContext, SignatureEncoding, SigningPolicy
from gateway_auth.signing import (
    MultiPartHmacSigner,
    Signature,
    SigningRequest,
    SortedParamHmacSigner,
    json_parameters,
    form_parameters,
    signer_for,
)
from gateway_auth.kernel.errors import MalformedRequestError

CREDENTIALS = CredentialContext(provider_id="payment", key_id="KEY-1", public_value="PUB-1", secret="s3cr3t")

text_values = st.text(alphabet=st.characters(blacklist_categories=("Cs",)), min_size=1, max_size=40)


# ---------------------------------------------------------------------------
# Signature
# ---------------------------------------------------------------------------


class TestSignature:
    def test_renders_hex_and_base64(self) -> None:
        assert Signature(b"\x01\xff", SignatureEncoding.HEX, "hmac-sha256").rendered == "01ff"
        assert Signature(b"\x01\xff", SignatureEncoding.BASE64, "hmac-sha256").rendered == "Af8="

    def test_value_hidden_from_repr(self) -> None:
        assert "01ff" not in repr(Signature(b"\x01\xff", SignatureEncoding.HEX, "hmac-sha256"))

    def test_matches(self) -> None:
        signature = Signature(b"\x01\xff", SignatureEncoding.HEX, "hmac-sha256")
        assert signature.matches("01ff") is True
        assert signature.matches("01fe") is False
        assert signature.matches("") is False
        assert signature.matches("ünïcode") is False

    def test_base64_match_is_case_sensitive(self) -> None:
        assert Signature(b"\x01\xff", SignatureEncoding.BASE64, "x").matches("AF8=") is False


class TestSigningRequest:
    def test_params_are_read_only_copies(self) -> None:
        source = {"reference": "ORDER-1"}
        request = SigningRequest.for_callback(timestamp="1", nonce="n", params=source)
        source["reference"] = "ORDER-2"
        assert request.params["reference"] == "ORDER-1"
        with pytest.raises(TypeError):
            request.params["reference"] = "x"  # type: ignore[index]

    def test_frozen(self) -> None:
        request = SigningRequest("POST", "/invoices", "1", "n")
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.nonce = "other"  # type: ignore[misc]


class TestSignerFor:
    def test_by_policy(self) -> None:
        assert isinstance(signer_for(SigningPolicy.MULTI_PART_HMAC), MultiPartHmacSigner)
        assert isinstance(signer_for(SigningPolicy.SORTED_PARAM_HMAC), SortedParamHmacSigner)

    def test_by_context(self) -> None:
        assert isinstance(signer_for(CREDENTIALS), SortedParamHmacSigner)


class TestBodyParameters:
    def test_json_numbers_keep_wire_text(self) -> None:
        params = json_parameters(b'{"amount": 100.00, "count": 3, "paid": true, "note": null, "items": [1]}')
        assert params == {"amount": "100.00", "count": "3", "paid": "true"}

    def test_json_must_be_an_object(self) -> None:
        with pytest.raises(MalformedRequestError):
            json_parameters(b"[1, 2]")

    def test_invalid_json(self) -> None:
        with pytest.raises(MalformedRequestError):
            json_parameters(b"{nope")

    def test_form(self) -> None:
        assert form_parameters(b"reference=ORDER-1&status=&amount=1.50") == {
            "reference": "ORDER-1",
            "status": "",
            "amount": "1.50",
        }


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


class TestSignerProperties:
    @given(nonce=text_values, timestamp=text_values, reference=text_values, status=text_values)
    def test_sorted_param_deterministic(self, nonce: str, timestamp: str, reference: str, status: str) -> None:
        request = SigningRequest.for_callback(timestamp, nonce, {"reference": reference, "status": status})
        signer = SortedParamHmacSigner()
        assert signer.sign(request, CREDENTIALS) == signer.sign(request, CREDENTIALS)

    @given(
        timestamp=st.integers(min_value=0, max_value=2**40).map(str),
        nonce=st.text(alphabet="0123456789abcdef", min_size=1, max_size=32),
        path=st.text(alphabet="abcdefghijklmnopqrstuvwxyz/-", max_size=30).map(lambda p: "/" + p),
    )
    def test_multi_part_deterministic(self, timestamp: str, nonce: str, path: str) -> None:
        request = SigningRequest("POST", path, timestamp, nonce)
        signer = MultiPartHmacSigner()
        assert signer.sign(request, CREDENTIALS).rendered == signer.sign(request, CREDENTIALS).rendered

    @given(
        values=st.fixed_dictionaries(
            {"nonce": text_values, "timestamp": text_values, "reference": text_values, "status": text_values}
        ),
        field=st.sampled_from(["nonce", "timestamp", "reference", "status"]),
        position=st.integers(min_value=0),
        replacement=st.characters(blacklist_categories=("Cs",)),
    )
    def test_single_character_tamper_detected(
        self, values: dict[str, str], field: str, position: int, replacement: str
    ) -> None:
        signer = SortedParamHmacSigner()
        original = SigningRequest.for_callback(values["timestamp"], values["nonce"], values)
        signature = signer.sign(original, CREDENTIALS).rendered

        text = values[field]
        index = position % len(text)
        if text[index] == replacement:
            replacement = "x" if replacement != "x" else "y"
        tampered_values = {**values, field: text[:index] + replacement + text[index + 1:]}
        tampered = SigningRequest.for_callback(tampered_values["timestamp"], tampered_values["nonce"], tampered_values)

        assert signer.verify(tampered, CREDENTIALS, signature) is False
