"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── VerificationError              (verification.py)
    │   ├── MalformedRequestError
    │   ├── MissingParameterError
    │   ├── StaleOrFutureTimestampError
    │   ├── ReplayedNotificationError
    │   ├── InvalidSignatureError
    │   └── UnknownReferenceError
    └── ConfigError                    (gateway_auth.config.validation)
"""

from gateway_auth.kernel.errors.base import BaseError
from gateway_auth.kernel.errors.verification import (
    InvalidSignatureError,
    MalformedRequestError,
    MissingParameterError,
    ReplayedNotificationError,
    StaleOrFutureTimestampError,
    UnknownReferenceError,
    VerificationError,
)

__all__ = [
    "BaseError",
    "InvalidSignatureError",
    "MalformedRequestError",
    "MissingParameterError",
    "ReplayedNotificationError",
    "StaleOrFutureTimestampError",
    "UnknownReferenceError",
    "VerificationError",
]
