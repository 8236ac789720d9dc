"""Abstract base class for device transports.

The control protocol needs two request shapes: an unauthenticated read
for state queries and a write that carries an XML envelope. Transports
only move bytes; building and interpreting envelopes is left to the
codec and the controller.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from lgremote.domain.models import TransportResponse

logger = logging.getLogger(__name__)


class Transport(ABC):
    """Abstract interface for sending requests to a device.

    HTTP status codes are never treated as errors here: callers inspect
    the status code and the parsed body together. Only connection-level
    failures raise.

    Example usage::

        async with HttpTransport(timeout=5.0) as transport:
            body = await transport.get("http://10.0.0.5:8080/roap/api/data?target=is_3d")
            reply = await transport.post(uri, build_pairing_request())
    """

    @abstractmethod
    async def connect(self) -> None:
        """Acquire the resources needed to send requests.

        Raises:
            TransportError: If the transport cannot be prepared.
        """
        ...

    @abstractmethod
    async def disconnect(self) -> None:
        """Release transport resources. Safe to call multiple times."""
        ...

    @abstractmethod
    async def get(self, uri: str) -> bytes:
        """Read ``uri`` and return the response body.

        Raises:
            TransportError: On connection, DNS or timeout failure.
        """
        ...

    @abstractmethod
    async def post(self, uri: str, body: bytes) -> TransportResponse:
        """Post an XML envelope to ``uri``.

        Raises:
            TransportError: On connection, DNS or timeout failure.
        """
        ...

    async def __aenter__(self) -> Transport:
        """Async context manager entry -- prepares the transport."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: object) -> None:
        """Async context manager exit -- releases the transport."""
        await self.disconnect()


class TransportError(Exception):
    """Raised when a request cannot reach the device."""

    def __init__(self, message: str, uri: str = "") -> None:
        super().__init__(message)
        self.uri = uri
