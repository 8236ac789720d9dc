"""High-level operations on a single device.

The controller composes the session manager, the envelope codec and a
transport into the operations an operator runs: querying and switching
the 3D display, showing the pairing key, and pressing remote keys.

Every public operation returns a bool and never raises for network or
protocol failures. The reason behind the last result is kept in
:attr:`DeviceController.last_outcome` for diagnostics.
"""

from __future__ import annotations

import asyncio
import logging

from lgremote.device.session import SessionManager
from lgremote.domain.models import Device, KeyCodes, Outcome, ThreeDState
from lgremote.protocol.codec import (
    MalformedResponseError,
    build_command_request,
    build_pairing_request,
    parse_auth_response,
    parse_command_response,
    parse_state_response,
)
from lgremote.protocol.endpoints import Endpoints
from lgremote.transport.base import Transport, TransportError

logger = logging.getLogger(__name__)


class DeviceController:
    """Runs protocol operations against one device.

    The controller assumes exclusive use of its device: operations on the
    same device must not run concurrently.
    """

    def __init__(
        self,
        device: Device,
        transport: Transport,
        endpoints: Endpoints | None = None,
        key_codes: KeyCodes | None = None,
        settle_delay: float = 1.0,
        session: SessionManager | None = None,
    ) -> None:
        self._device = device
        self._transport = transport
        self._endpoints = endpoints or Endpoints()
        self._key_codes = key_codes or KeyCodes()
        if device.key_codes is not None:
            self._key_codes = device.key_codes.apply_to(self._key_codes)
        self._settle_delay = settle_delay
        self._session = session or SessionManager(transport, self._endpoints)
        self.last_outcome: Outcome | None = None

    @property
    def device(self) -> Device:
        return self._device

    @property
    def key_codes(self) -> KeyCodes:
        return self._key_codes

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    async def get_session(self) -> bool:
        """Authenticate with the device unless a session is already held."""
        return self._finish(await self._session.acquire(self._device))

    async def check_3d(self) -> bool:
        """Query the 3D state and store it on the device.

        A reply that cannot be parsed still counts as a successful query
        and leaves the state ``unknown``. Only transport failures return
        False.
        """
        uri = self._endpoints.state(self._device.address)
        try:
            body = await self._transport.get(uri)
        except TransportError as e:
            logger.warning("%s: state query failed: %s", self._device.name, e)
            return self._finish(Outcome.TRANSPORT_ERROR)

        try:
            state = parse_state_response(body).three_d_state
        except MalformedResponseError as e:
            logger.debug("%s: unreadable state reply: %s", self._device.name, e)
            state = ThreeDState.UNKNOWN

        self._device.three_d_state = state
        logger.info("%s: 3D state is %s", self._device.name, state.value)
        return self._finish(Outcome.SUCCESS)

    async def enable_3d(self) -> bool:
        """Switch 3D on, unless it is already known to be on.

        Presses the 3D key and then each confirmation key, pausing before
        every confirmation so the device can process the previous key.
        The state becomes ``on`` only if every press succeeded.
        """
        if self._device.three_d_state is ThreeDState.ON:
            logger.info("%s: 3D already enabled", self._device.name)
            return self._finish(Outcome.SUCCESS)

        outcome = await self._session.acquire(self._device)
        if not outcome.ok:
            logger.warning("%s: could not get session", self._device.name)
            return self._finish(outcome)

        outcome = await self._press(self._key_codes.three_d)
        for code in self._key_codes.three_d_confirm:
            if not outcome.ok:
                break
            await asyncio.sleep(self._settle_delay)
            outcome = await self._press(code)

        if outcome.ok:
            self._device.three_d_state = ThreeDState.ON
            logger.info("%s: 3D enabled", self._device.name)
        return self._finish(outcome)

    async def disable_3d(self) -> bool:
        """Switch 3D off, unless it is already known to be off."""
        if self._device.three_d_state is ThreeDState.OFF:
            logger.info("%s: 3D already disabled", self._device.name)
            return self._finish(Outcome.SUCCESS)

        outcome = await self._send(self._key_codes.three_d)
        if outcome.ok:
            self._device.three_d_state = ThreeDState.OFF
            logger.info("%s: 3D disabled", self._device.name)
        return self._finish(outcome)

    async def display_pairing_key(self) -> bool:
        """Ask the device to show its pairing key on screen.

        Needs no session, since the key is what a session is acquired
        with. Succeeds only on HTTP 200 with an ``OK`` status.
        """
        uri = self._endpoints.auth(self._device.address)
        try:
            resp = await self._transport.post(uri, build_pairing_request())
            reply = parse_auth_response(resp.content)
        except TransportError as e:
            logger.warning("%s: pairing request failed: %s", self._device.name, e)
            return self._finish(Outcome.TRANSPORT_ERROR)
        except MalformedResponseError as e:
            logger.warning("%s: unreadable pairing reply: %s", self._device.name, e)
            return self._finish(Outcome.MALFORMED_RESPONSE)

        if resp.status_code != 200 or not reply.ok:
            logger.warning(
                "%s: pairing key request rejected (HTTP %d, %s)",
                self._device.name,
                resp.status_code,
                reply.status or "no status",
            )
            return self._finish(Outcome.COMMAND_REJECTED)
        return self._finish(Outcome.SUCCESS)

    async def send_command(self, key_code: str) -> bool:
        """Press the remote key ``key_code``, authenticating first if needed."""
        return self._finish(await self._send(key_code))

    async def power_off(self) -> bool:
        """Press the power key."""
        return await self.send_command(self._key_codes.power)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _send(self, key_code: str) -> Outcome:
        outcome = await self._session.acquire(self._device)
        if not outcome.ok:
            logger.warning("%s: could not get session", self._device.name)
            return outcome
        return await self._press(key_code)

    async def _press(self, key_code: str) -> Outcome:
        uri = self._endpoints.command(self._device.address)
        try:
            resp = await self._transport.post(uri, build_command_request(key_code))
            reply = parse_command_response(resp.content)
        except TransportError as e:
            logger.warning("%s: key %s failed: %s", self._device.name, key_code, e)
            return Outcome.TRANSPORT_ERROR
        except MalformedResponseError as e:
            logger.warning("%s: unreadable reply to key %s: %s", self._device.name, key_code, e)
            return Outcome.MALFORMED_RESPONSE

        if not reply.ok:
            logger.warning(
                "%s: key %s rejected (%s)", self._device.name, key_code, reply.status or "no status"
            )
            self._session.invalidate(self._device)
            return Outcome.COMMAND_REJECTED

        logger.debug("%s: key %s accepted", self._device.name, key_code)
        return Outcome.SUCCESS

    def _finish(self, outcome: Outcome) -> bool:
        self.last_outcome = outcome
        return outcome.ok
