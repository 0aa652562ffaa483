"""FastAPI adapter – error mapping and callback receiving."""
from gateway_auth.adapters.fastapi.exception_mapper import CallbackExceptionMapper
from gateway_auth.adapters.fastapi.notification import DEFAULT_SIGNATURE_HEADER, notification_from_request
from gateway_auth.adapters.fastapi.routers import CallbackRouter

__all__ = [
    "DEFAULT_SIGNATURE_HEADER",
    "CallbackExceptionMapper",
    "CallbackRouter",
    "notification_from_request",
]
