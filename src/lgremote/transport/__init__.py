"""Transport module for lgremote.

Moves request and response bytes between the controller and a device.

Public API:
    Transport -- Abstract base class
    TransportError -- Connection-level failure
    HttpTransport -- httpx backed implementation
"""

from lgremote.transport.base import Transport, TransportError

__all__ = ["Transport", "TransportError", "HttpTransport"]


def __getattr__(name: str) -> type:
    """Lazy import for the concrete implementation that requires httpx."""
    if name == "HttpTransport":
        from lgremote.transport.http_backend import HttpTransport
        return HttpTransport
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
