"""
gateway_auth – outbound request signing and inbound callback verification.

Import path convention::

    from gateway_auth.credentials import CredentialContext
    from gateway_auth.signing import MultiPartHmacSigner, SortedParamHmacSigner
    from gateway_auth.headers import OutboundAuthenticator
    from gateway_auth.callbacks import CallbackVerifier
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
