"""Fleet-wide dispatch for lgremote.

Public API:
    Registry -- Ordered, explicitly owned set of devices
    DeviceNotFoundError -- Unknown device name
    FleetDispatcher -- Runs operations on one device or all of them
    Operation -- Operations that can be dispatched
    DeviceResult -- Per-device result of a dispatch
"""

from lgremote.fleet.dispatcher import (
    ALL_DEVICES,
    DeviceResult,
    FleetDispatcher,
    Operation,
)
from lgremote.fleet.registry import DeviceNotFoundError, Registry

__all__ = [
    "ALL_DEVICES",
    "DeviceNotFoundError",
    "DeviceResult",
    "FleetDispatcher",
    "Operation",
    "Registry",
]
