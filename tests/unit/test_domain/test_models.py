"""Tests for the core domain models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from lgremote.domain.models import (
    AuthResponse,
    CommandResponse,
    Device,
    KeyCodes,
    Outcome,
    StateResponse,
    ThreeDState,
)


class TestThreeDState:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("true", ThreeDState.ON),
            ("false", ThreeDState.OFF),
            ("", ThreeDState.UNKNOWN),
            ("TRUE", ThreeDState.UNKNOWN),
            ("1", ThreeDState.UNKNOWN),
        ],
    )
    def test_from_flag(self, raw: str, expected: ThreeDState) -> None:
        assert ThreeDState.from_flag(raw) is expected

    def test_state_response_maps_flag(self) -> None:
        assert StateResponse(is_3d_raw="true").three_d_state is ThreeDState.ON


class TestOutcome:
    def test_only_success_is_ok(self) -> None:
        assert [o for o in Outcome if o.ok] == [Outcome.SUCCESS]


class TestDevice:
    def test_defaults(self) -> None:
        device = Device(name="TV-1", address="192.168.1.100")
        assert device.three_d_state is ThreeDState.UNKNOWN
        assert device.session_token == ""
        assert device.is_paired is False
        assert device.is_authenticated is False

    def test_shared_secret_is_immutable(self) -> None:
        device = Device(name="TV-1", address="192.168.1.100", shared_secret="xyz123")
        with pytest.raises(ValidationError):
            device.shared_secret = "other"

    def test_state_is_mutable(self) -> None:
        device = Device(name="TV-1", address="192.168.1.100")
        device.three_d_state = ThreeDState.ON
        device.session_token = "42"
        assert device.is_authenticated is True


class TestResponses:
    def test_success_sentinel(self) -> None:
        assert AuthResponse(status="OK").ok is True
        assert CommandResponse(status="OK").ok is True
        assert CommandResponse(status="").ok is False
        assert CommandResponse(status="Failed").ok is False

    def test_key_codes_accept_lists(self) -> None:
        codes = KeyCodes.model_validate({"three_d_confirm": ["401", "412"]})
        assert codes.three_d_confirm == ("401", "412")

    def test_override_replaces_only_set_codes(self) -> None:
        fleet = KeyCodes(three_d="401", power="8")
        device = KeyCodes.model_validate({"three_d_confirm": ["412"]})

        codes = device.apply_to(fleet)

        assert codes.three_d == "401"
        assert codes.three_d_confirm == ("412",)
        assert codes.power == "8"

    def test_empty_override_keeps_base(self) -> None:
        fleet = KeyCodes(three_d="401")
        assert KeyCodes().apply_to(fleet) == fleet
