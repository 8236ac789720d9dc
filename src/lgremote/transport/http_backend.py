"""HTTP transport backend.

Sends protocol requests to devices with a single shared httpx client.
"""

from __future__ import annotations

import logging

import httpx

from lgremote.domain.models import TransportResponse
from lgremote.transport.base import Transport, TransportError

logger = logging.getLogger(__name__)

CONTENT_TYPE = "atom+xml"


class HttpTransport(Transport):
    """Sends requests to devices over HTTP.

    Every request is bounded by ``timeout``. No retries are attempted.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    async def connect(self) -> None:
        """Create the HTTP client."""
        if self._client is not None:
            return
        self._client = httpx.AsyncClient(
            timeout=self._timeout,
            transport=self._transport,
        )
        logger.debug("HTTP transport ready (timeout %.1fs)", self._timeout)

    async def disconnect(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.debug("HTTP transport closed")

    async def get(self, uri: str) -> bytes:
        """Send a GET request and return the body whatever the status."""
        resp = await self._request("GET", uri)
        return resp.content

    async def post(self, uri: str, body: bytes) -> TransportResponse:
        """Send a POST request carrying an XML envelope."""
        resp = await self._request(
            "POST", uri, content=body, headers={"Content-Type": CONTENT_TYPE}
        )
        return TransportResponse(status_code=resp.status_code, content=resp.content)

    async def _request(self, method: str, uri: str, **kwargs) -> httpx.Response:
        if self._client is None:
            raise TransportError("HTTP transport is not connected", uri=uri)
        try:
            resp = await self._client.request(method, uri, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"{method} {uri} failed: {e}", uri=uri) from e
        logger.debug("%s %s -> %d", method, uri, resp.status_code)
        return resp
