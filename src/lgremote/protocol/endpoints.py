"""Request URIs for the device control API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PORT = 8080
DEFAULT_BASE_PATH = "/roap/api"

AUTH_PATH = "/auth"
COMMAND_PATH = "/command"
STATE_PATH = "/data?target=is_3d"


def build_uri(
    address: str,
    path: str,
    port: int = DEFAULT_PORT,
    base_path: str = DEFAULT_BASE_PATH,
) -> str:
    """Return the complete URI for ``path`` on the device at ``address``."""
    return f"http://{address}:{port}{base_path}{path}"


class Endpoints(BaseModel):
    """Port and base path shared by every device in the fleet."""

    model_config = ConfigDict(frozen=True)

    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    base_path: str = Field(default=DEFAULT_BASE_PATH)

    def uri(self, address: str, path: str) -> str:
        return build_uri(address, path, port=self.port, base_path=self.base_path)

    def auth(self, address: str) -> str:
        return self.uri(address, AUTH_PATH)

    def command(self, address: str) -> str:
        return self.uri(address, COMMAND_PATH)

    def state(self, address: str) -> str:
        return self.uri(address, STATE_PATH)
