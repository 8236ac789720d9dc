"""Tests for request URI construction."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from lgremote.protocol.endpoints import Endpoints, build_uri


class TestBuildUri:
    def test_auth_uri(self) -> None:
        assert build_uri("203.0.113.5", "/auth") == "http://203.0.113.5:8080/roap/api/auth"

    def test_state_uri_keeps_query(self) -> None:
        assert (
            build_uri("tv.local", "/data?target=is_3d")
            == "http://tv.local:8080/roap/api/data?target=is_3d"
        )

    def test_custom_port_and_base_path(self) -> None:
        assert (
            build_uri("10.0.0.2", "/command", port=9090, base_path="/udap/api")
            == "http://10.0.0.2:9090/udap/api/command"
        )


class TestEndpoints:
    def test_defaults(self) -> None:
        endpoints = Endpoints()
        assert endpoints.auth("203.0.113.5") == "http://203.0.113.5:8080/roap/api/auth"
        assert endpoints.command("203.0.113.5") == "http://203.0.113.5:8080/roap/api/command"
        assert (
            endpoints.state("203.0.113.5")
            == "http://203.0.113.5:8080/roap/api/data?target=is_3d"
        )

    def test_rejects_invalid_port(self) -> None:
        with pytest.raises(ValidationError):
            Endpoints(port=0)
