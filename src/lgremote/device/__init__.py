"""Per-device control for lgremote.

Public API:
    SessionManager -- Acquires and caches session tokens
    DeviceController -- High-level operations on one device
"""

from lgremote.device.controller import DeviceController
from lgremote.device.session import SessionManager

__all__ = ["DeviceController", "SessionManager"]
