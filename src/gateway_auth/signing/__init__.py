"""Signing – canonical string-to-sign builders and keyed digests."""
from gateway_auth.signing.fields import CallbackFields
from gateway_auth.signing.multipart import PROTOCOL_VERSION, MultiPartHmacSigner, derive_key
from gateway_auth.signing.params import form_parameters, json_parameters
from gateway_auth.signing.registry import signer_for
from gateway_auth.signing.request import Signature, SigningRequest
from gateway_auth.signing.signer import CanonicalSigner
from gateway_auth.signing.sorted_params import SortedParamHmacSigner

__all__ = [
    "PROTOCOL_VERSION",
    "CallbackFields",
    "CanonicalSigner",
    "MultiPartHmacSigner",
    "Signature",
    "SigningRequest",
    "SortedParamHmacSigner",
    "derive_key",
    "form_parameters",
    "json_parameters",
    "signer_for",
]
