"""Core domain models for the lgremote system.

These models represent the data flowing through the control path: the
devices under control, the firmware key codes they accept, the parsed
protocol replies, and the tagged outcome of every device operation.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field

# The only status token a device uses to report success.
SUCCESS_STATUS = "OK"


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class ThreeDState(str, enum.Enum):
    """Stereoscopic display state of a device."""

    ON = "on"
    OFF = "off"
    UNKNOWN = "unknown"

    @classmethod
    def from_flag(cls, raw: str) -> ThreeDState:
        """Map the raw ``is3D`` flag text reported by a device."""
        if raw == "true":
            return cls.ON
        if raw == "false":
            return cls.OFF
        return cls.UNKNOWN


class Outcome(str, enum.Enum):
    """Why a device operation ended the way it did."""

    SUCCESS = "success"
    TRANSPORT_ERROR = "transport_error"  # Connection, DNS or timeout failure
    MALFORMED_RESPONSE = "malformed_response"  # Body is not the expected XML
    AUTHENTICATION_DENIED = "authentication_denied"  # Missing or rejected key
    COMMAND_REJECTED = "command_rejected"  # Device replied with a non-OK status

    @property
    def ok(self) -> bool:
        return self is Outcome.SUCCESS


# ---------------------------------------------------------------------------
# Device Models
# ---------------------------------------------------------------------------


class KeyCodes(BaseModel):
    """Remote key codes for the operations built on key input.

    Key codes differ between firmware revisions, so they are configured
    rather than fixed. Confirmation codes are pressed in order after the
    3D key when enabling 3D.
    """

    model_config = ConfigDict(frozen=True)

    three_d: str = Field(default="400", description="Activates or toggles 3D mode")
    three_d_confirm: tuple[str, ...] = Field(
        default=("20",), description="Keys pressed after the 3D key to confirm activation"
    )
    power: str = Field(default="1", description="Powers the device off")

    def apply_to(self, base: KeyCodes) -> KeyCodes:
        """Return ``base`` with only the codes explicitly set here replaced."""
        return base.model_copy(update=self.model_dump(include=self.model_fields_set))


class Device(BaseModel):
    """One television under control.

    Identity fields are frozen; only the 3D state and the session token
    change while the process runs, and neither is persisted.
    """

    name: str = Field(frozen=True, description="Unique name within the registry")
    address: str = Field(frozen=True, description="Host name or IP address")
    shared_secret: str = Field(
        default="", frozen=True, description="Pairing key shown on screen; empty until paired"
    )
    key_codes: KeyCodes | None = Field(
        default=None,
        frozen=True,
        description="Firmware specific key codes; only the codes set here override the fleet's",
    )
    three_d_state: ThreeDState = Field(default=ThreeDState.UNKNOWN)
    session_token: str = Field(default="", description="Granted by the device on authentication")

    @property
    def is_paired(self) -> bool:
        return bool(self.shared_secret)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.session_token)


# ---------------------------------------------------------------------------
# Protocol Replies
# ---------------------------------------------------------------------------


class AuthResponse(BaseModel):
    """Reply to an authentication or pairing request."""

    model_config = ConfigDict(frozen=True)

    status: str = ""
    session: str = ""

    @property
    def ok(self) -> bool:
        return self.status == SUCCESS_STATUS


class CommandResponse(BaseModel):
    """Reply to a key input command."""

    model_config = ConfigDict(frozen=True)

    status: str = ""

    @property
    def ok(self) -> bool:
        return self.status == SUCCESS_STATUS


class StateResponse(BaseModel):
    """Reply to a 3D state query; the flag is kept as raw text."""

    model_config = ConfigDict(frozen=True)

    is_3d_raw: str = ""

    @property
    def three_d_state(self) -> ThreeDState:
        return ThreeDState.from_flag(self.is_3d_raw)


class TransportResponse(BaseModel):
    """Status code and body of an HTTP write."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    content: bytes = b""
