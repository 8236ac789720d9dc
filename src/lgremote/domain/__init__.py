"""Domain models for lgremote.

This package contains the core data structures, enumerations, and value
objects used throughout the system. All models use Pydantic v2 for
validation.
"""

from lgremote.domain.models import (
    SUCCESS_STATUS,
    AuthResponse,
    CommandResponse,
    Device,
    KeyCodes,
    Outcome,
    StateResponse,
    ThreeDState,
    TransportResponse,
)

__all__ = [
    "SUCCESS_STATUS",
    "AuthResponse",
    "CommandResponse",
    "Device",
    "KeyCodes",
    "Outcome",
    "StateResponse",
    "ThreeDState",
    "TransportResponse",
]
