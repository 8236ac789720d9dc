"""Runs a device operation against one device or the whole fleet.

With the ``all`` target every device gets its own worker, and every
worker is joined before the results are returned. Each worker is the
only user of its device for the duration of the operation.
"""

from __future__ import annotations

import asyncio
import enum
import logging

from pydantic import BaseModel, ConfigDict, Field

from lgremote.device.controller import DeviceController
from lgremote.domain.models import Device, KeyCodes, Outcome, ThreeDState
from lgremote.fleet.registry import Registry
from lgremote.protocol.endpoints import Endpoints
from lgremote.transport.base import Transport

logger = logging.getLogger(__name__)

ALL_DEVICES = "all"


class Operation(str, enum.Enum):
    """Operations an operator can run against devices."""

    QUERY_3D = "query-3d-state"
    ENABLE_3D = "enable-3d"
    DISABLE_3D = "disable-3d"
    DISPLAY_PAIRING_KEY = "display-pairing-key"
    POWER_OFF = "power-off"


class DeviceResult(BaseModel):
    """Outcome of one operation on one device."""

    model_config = ConfigDict(frozen=True)

    name: str
    operation: Operation
    success: bool
    outcome: Outcome | None = Field(default=None)
    three_d_state: ThreeDState = Field(default=ThreeDState.UNKNOWN)


class FleetDispatcher:
    """Dispatches operations to the devices of a registry."""

    def __init__(
        self,
        registry: Registry,
        transport: Transport,
        endpoints: Endpoints | None = None,
        key_codes: KeyCodes | None = None,
        settle_delay: float = 1.0,
    ) -> None:
        self._registry = registry
        self._transport = transport
        self._endpoints = endpoints or Endpoints()
        self._key_codes = key_codes or KeyCodes()
        self._settle_delay = settle_delay
        self._locks: dict[str, asyncio.Lock] = {}

    @property
    def registry(self) -> Registry:
        return self._registry

    def controller_for(self, device: Device) -> DeviceController:
        return DeviceController(
            device,
            self._transport,
            endpoints=self._endpoints,
            key_codes=self._key_codes,
            settle_delay=self._settle_delay,
        )

    async def dispatch(
        self,
        operation: Operation,
        target: str,
        parallel: bool = True,
    ) -> list[DeviceResult]:
        """Run ``operation`` on the device named ``target``, or on all of them.

        Results come back in registry order.

        Raises:
            DeviceNotFoundError: If ``target`` names no known device.
        """
        if target != ALL_DEVICES:
            device = self._registry.get(target)
            return [await self.run(device, operation)]

        devices = list(self._registry)
        if parallel:
            return list(await asyncio.gather(*(self.run(d, operation) for d in devices)))

        results = []
        for device in devices:
            results.append(await self.run(device, operation))
        return results

    async def run(self, device: Device, operation: Operation) -> DeviceResult:
        """Run ``operation`` on a single device."""
        async with self._lock_for(device):
            controller = self.controller_for(device)
            logger.debug("%s: running %s", device.name, operation.value)
            success = await self._invoke(controller, operation)

        result = DeviceResult(
            name=device.name,
            operation=operation,
            success=success,
            outcome=controller.last_outcome,
            three_d_state=device.three_d_state,
        )
        if success:
            logger.info("%s: %s succeeded", device.name, operation.value)
        else:
            logger.warning(
                "%s: %s failed (%s)",
                device.name,
                operation.value,
                result.outcome.value if result.outcome else "unknown",
            )
        return result

    def _lock_for(self, device: Device) -> asyncio.Lock:
        lock = self._locks.get(device.name)
        if lock is None:
            lock = self._locks[device.name] = asyncio.Lock()
        return lock

    @staticmethod
    async def _invoke(controller: DeviceController, operation: Operation) -> bool:
        if operation is Operation.QUERY_3D:
            return await controller.check_3d()
        if operation is Operation.ENABLE_3D:
            return await controller.enable_3d()
        if operation is Operation.DISABLE_3D:
            return await controller.disable_3d()
        if operation is Operation.DISPLAY_PAIRING_KEY:
            return await controller.display_pairing_key()
        if operation is Operation.POWER_OFF:
            return await controller.power_off()
        raise ValueError(f"Unsupported operation: {operation}")
