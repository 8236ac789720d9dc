"""XML envelope codec for the device control protocol.

Requests are small XML documents posted to the ``/auth`` and
``/command`` endpoints. Every reply is wrapped in an ``<envelope>``
root; the fields an operation needs are read out of it and anything
else is ignored. Status values are free text from the device and only
``OK`` means success, so no failure vocabulary is assumed here.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from lgremote.domain.models import AuthResponse, CommandResponse, StateResponse

logger = logging.getLogger(__name__)

ENVELOPE_TAG = "envelope"
STATUS_TAG = "ROAPErrorDetail"
SESSION_TAG = "session"
IS_3D_PATH = "data/is3D"

AUTH_KEY_REQUEST = "AuthKeyReq"
AUTH_REQUEST = "AuthReq"
HANDLE_KEY_INPUT = "HandleKeyInput"


class MalformedResponseError(Exception):
    """Raised when a reply body is not a well-formed response envelope."""

    def __init__(self, message: str, body: bytes = b"") -> None:
        super().__init__(message)
        self.body = body


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


def _envelope(root_tag: str, **children: str) -> bytes:
    root = ET.Element(root_tag)
    for tag, text in children.items():
        ET.SubElement(root, tag).text = text
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def build_auth_request(secret: str) -> bytes:
    """Build the request that exchanges the pairing key for a session."""
    return _envelope("auth", type=AUTH_REQUEST, value=secret)


def build_pairing_request() -> bytes:
    """Build the request that shows the pairing key on the device screen."""
    return _envelope("auth", type=AUTH_KEY_REQUEST)


def build_command_request(key_code: str) -> bytes:
    """Build the request that presses the remote key ``key_code``."""
    return _envelope("command", name=HANDLE_KEY_INPUT, value=str(key_code))


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


def _parse_envelope(body: bytes) -> ET.Element:
    data = body.strip()
    if not data:
        raise MalformedResponseError("Empty response body", body=body)
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise MalformedResponseError(f"Response is not well-formed XML: {e}", body=body) from e
    if root.tag != ENVELOPE_TAG:
        raise MalformedResponseError(
            f"Expected <{ENVELOPE_TAG}> root element, got <{root.tag}>", body=body
        )
    return root


def _text(root: ET.Element, path: str) -> str:
    return (root.findtext(path) or "").strip()


def parse_auth_response(body: bytes) -> AuthResponse:
    """Extract the status and session id from an authentication reply.

    Raises:
        MalformedResponseError: If the body is not a response envelope.
    """
    root = _parse_envelope(body)
    return AuthResponse(status=_text(root, STATUS_TAG), session=_text(root, SESSION_TAG))


def parse_command_response(body: bytes) -> CommandResponse:
    """Extract the status from a command reply.

    Raises:
        MalformedResponseError: If the body is not a response envelope.
    """
    root = _parse_envelope(body)
    return CommandResponse(status=_text(root, STATUS_TAG))


def parse_state_response(body: bytes) -> StateResponse:
    """Extract the raw 3D flag from a state query reply.

    Raises:
        MalformedResponseError: If the body is not a response envelope.
    """
    root = _parse_envelope(body)
    return StateResponse(is_3d_raw=_text(root, IS_3D_PATH))
