"""httpx adapter – request authentication for outbound gateway calls."""
from gateway_auth.adapters.httpx.auth import GatewayAuth, request_parameters

__all__ = ["GatewayAuth", "request_parameters"]
