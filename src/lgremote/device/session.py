"""Session lifecycle for a device.

A device grants a session in exchange for its pairing key. The protocol
has no expiry, refresh or logout call, so a cached session is assumed
valid until a command is rejected, at which point it is dropped and the
next command authenticates again.
"""

from __future__ import annotations

import logging

from lgremote.domain.models import Device, Outcome
from lgremote.protocol.codec import (
    MalformedResponseError,
    build_auth_request,
    parse_auth_response,
)
from lgremote.protocol.endpoints import Endpoints
from lgremote.transport.base import Transport, TransportError

logger = logging.getLogger(__name__)


class SessionManager:
    """Acquires and caches the session token of a device."""

    def __init__(self, transport: Transport, endpoints: Endpoints | None = None) -> None:
        self._transport = transport
        self._endpoints = endpoints or Endpoints()

    async def ensure_session(self, device: Device) -> bool:
        """Make sure ``device`` holds a session token.

        Returns True immediately when a token is already cached. Never
        contacts the device when it has no pairing key.
        """
        return (await self.acquire(device)).ok

    async def acquire(self, device: Device) -> Outcome:
        """Like :meth:`ensure_session`, but report why authentication failed."""
        if device.is_authenticated:
            return Outcome.SUCCESS

        if not device.is_paired:
            logger.warning("%s: no pairing key, set key first", device.name)
            return Outcome.AUTHENTICATION_DENIED

        uri = self._endpoints.auth(device.address)
        try:
            resp = await self._transport.post(uri, build_auth_request(device.shared_secret))
            reply = parse_auth_response(resp.content)
        except TransportError as e:
            logger.warning("%s: authentication request failed: %s", device.name, e)
            device.session_token = ""
            return Outcome.TRANSPORT_ERROR
        except MalformedResponseError as e:
            logger.warning("%s: unreadable authentication reply: %s", device.name, e)
            device.session_token = ""
            return Outcome.MALFORMED_RESPONSE

        if not reply.ok:
            logger.warning(
                "%s: authentication denied (%s)", device.name, reply.status or "no status"
            )
            device.session_token = ""
            return Outcome.AUTHENTICATION_DENIED

        device.session_token = reply.session
        logger.info("%s: session acquired", device.name)
        return Outcome.SUCCESS

    def invalidate(self, device: Device) -> None:
        """Forget the cached session of ``device``."""
        if device.session_token:
            logger.debug("%s: dropping session", device.name)
        device.session_token = ""
