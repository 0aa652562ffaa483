"""Kernel time – Clock port + implementations."""
from gateway_auth.kernel.time.clock import Clock, FrozenClock, SystemClock, epoch_seconds, utc_now

__all__ = ["Clock", "FrozenClock", "SystemClock", "epoch_seconds", "utc_now"]
