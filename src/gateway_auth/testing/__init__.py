"""Testing helpers for code built on gateway_auth."""
from gateway_auth.testing.fakes import FakeClock, signed_notification

__all__ = ["FakeClock", "signed_notification"]
