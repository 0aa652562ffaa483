"""Headers – render signatures into the headers each gateway expects."""
from gateway_auth.headers.builder import HeaderBuilder
from gateway_auth.headers.einvoice import AUTH_SCHEME, EInvoiceHeaderBuilder
from gateway_auth.headers.outbound import OutboundAuthenticator, builder_for, random_nonce
from gateway_auth.headers.payment import PaymentGatewayHeaderBuilder

__all__ = [
    "AUTH_SCHEME",
    "EInvoiceHeaderBuilder",
    "HeaderBuilder",
    "OutboundAuthenticator",
    "PaymentGatewayHeaderBuilder",
    "builder_for",
    "random_nonce",
]
