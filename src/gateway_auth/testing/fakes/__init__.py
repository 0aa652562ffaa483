"""Testing fakes – deterministic clock and a fake gateway signer."""
from gateway_auth.testing.fakes.clock import FakeClock
from gateway_auth.testing.fakes.gateway import signed_notification

__all__ = ["FakeClock", "signed_notification"]
