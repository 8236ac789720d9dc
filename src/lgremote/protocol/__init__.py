"""Wire protocol for lgremote.

Builds the XML request envelopes, parses the reply envelopes, and
computes the request URIs for each device.
"""

from lgremote.protocol.codec import (
    MalformedResponseError,
    build_auth_request,
    build_command_request,
    build_pairing_request,
    parse_auth_response,
    parse_command_response,
    parse_state_response,
)
from lgremote.protocol.endpoints import Endpoints, build_uri

__all__ = [
    "Endpoints",
    "MalformedResponseError",
    "build_auth_request",
    "build_command_request",
    "build_pairing_request",
    "build_uri",
    "parse_auth_response",
    "parse_command_response",
    "parse_state_response",
]
