"""Observability – structured logging helpers."""
from gateway_auth.observability.logging.factory import JsonLoggerFactory
from gateway_auth.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from gateway_auth.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
