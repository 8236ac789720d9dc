"""Shared test fixtures for the lgremote test suite.

Provides sample devices and an in-process fake television network that
answers protocol requests through ``httpx.MockTransport``.
"""

from __future__ import annotations

import httpx
import pytest
import pytest_asyncio

from lgremote.domain.models import Device, ThreeDState
from lgremote.transport.http_backend import HttpTransport


def envelope(status: str = "OK", session: str = "", error: str = "200") -> str:
    """A reply envelope as sent by the auth and command endpoints."""
    return (
        '<?xml version="1.0" encoding="utf-8"?><envelope>'
        f"<ROAPError>{error}</ROAPError><ROAPErrorDetail>{status}</ROAPErrorDetail>"
        f"<session>{session}</session></envelope>"
    )


def state_envelope(flag: str) -> str:
    """A reply envelope for the 3D state query."""
    return (
        '<?xml version="1.0" encoding="utf-8"?><envelope>'
        "<ROAPError>200</ROAPError><ROAPErrorDetail>OK</ROAPErrorDetail>"
        f"<dataList name=\"is3D\"></dataList><data><is3D>{flag}</is3D></data></envelope>"
    )


# ---------------------------------------------------------------------------
# Fake Network
# ---------------------------------------------------------------------------


class FakeTelevision:
    """Answers protocol requests the way a television would.

    Behaviour is driven by plain attributes so tests can tweak one aspect
    at a time. Every request received is recorded.
    """

    def __init__(
        self,
        session: str = "1051689385",
        auth_status: str = "OK",
        pairing_status_code: int = 200,
        pairing_status: str = "OK",
        command_status: str = "OK",
        state_body: str = "",
        unreachable: bool = False,
    ) -> None:
        self.session = session
        self.auth_status = auth_status
        self.pairing_status_code = pairing_status_code
        self.pairing_status = pairing_status
        self.command_status = command_status
        self.command_statuses: dict[str, str] = {}
        self.state_body = state_body
        self.unreachable = unreachable
        self.requests: list[httpx.Request] = []

    @property
    def key_presses(self) -> list[str]:
        """Key codes received on the command endpoint, in order."""
        codes = []
        for request in self.requests:
            if request.url.path.endswith("/command"):
                body = request.content.decode()
                codes.append(body.split("<value>")[1].split("</value>")[0])
        return codes

    @property
    def auth_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/auth")]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.unreachable:
            raise httpx.ConnectError("Connection refused", request=request)

        path = request.url.path
        if request.method == "GET" and path.endswith("/data"):
            return httpx.Response(200, text=self.state_body)
        if path.endswith("/auth"):
            body = request.content.decode()
            if "AuthKeyReq" in body:
                return httpx.Response(
                    self.pairing_status_code, text=envelope(self.pairing_status)
                )
            if self.auth_status == "OK":
                return httpx.Response(200, text=envelope("OK", session=self.session))
            return httpx.Response(200, text=envelope(self.auth_status, error="401"))
        if path.endswith("/command"):
            code = request.content.decode().split("<value>")[1].split("</value>")[0]
            status = self.command_statuses.get(code, self.command_status)
            return httpx.Response(200, text=envelope(status))
        return httpx.Response(404)


class FakeNetwork:
    """Routes requests to fake televisions by host."""

    def __init__(self) -> None:
        self.tvs: dict[str, FakeTelevision] = {}

    def add(self, host: str, **kwargs) -> FakeTelevision:
        tv = FakeTelevision(**kwargs)
        self.tvs[host] = tv
        return tv

    def handle(self, request: httpx.Request) -> httpx.Response:
        tv = self.tvs.get(request.url.host)
        if tv is None:
            raise httpx.ConnectError("No route to host", request=request)
        return tv.handle(request)

    @property
    def request_count(self) -> int:
        return sum(len(tv.requests) for tv in self.tvs.values())


@pytest.fixture
def network() -> FakeNetwork:
    """An empty fake network; tests add televisions to it."""
    return FakeNetwork()


@pytest_asyncio.fixture
async def transport(network: FakeNetwork):
    """An HttpTransport wired to the fake network."""
    async with HttpTransport(timeout=5.0, transport=httpx.MockTransport(network.handle)) as t:
        yield t


# ---------------------------------------------------------------------------
# Device Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def tv1() -> Device:
    """A paired device with 3D off."""
    return Device(
        name="TV-1", address="192.168.1.100", shared_secret="xyz123",
        three_d_state=ThreeDState.OFF,
    )


@pytest.fixture
def tv2() -> Device:
    """A second paired device with 3D off."""
    return Device(
        name="TV-2", address="192.168.1.101", shared_secret="123xyz",
        three_d_state=ThreeDState.OFF,
    )


@pytest.fixture
def unpaired_tv() -> Device:
    """A device that has never been given its pairing key."""
    return Device(name="TV-3", address="192.168.1.102")


# ---------------------------------------------------------------------------
# Envelope Builders
# ---------------------------------------------------------------------------


@pytest.fixture
def make_envelope():
    """Builder for auth/command reply envelopes."""
    return envelope


@pytest.fixture
def make_state_envelope():
    """Builder for 3D state reply envelopes."""
    return state_envelope
