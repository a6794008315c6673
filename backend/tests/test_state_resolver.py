"""
Tests for the state point resolver.

Reference values are validated against ASHRAE Fundamentals handbook
psychrometric tables.

All IP tests use standard atmospheric pressure: 14.696 psia.
"""

import pytest

from moistair.config import UnitSystem, DEFAULT_PRESSURE_IP, DEFAULT_PRESSURE_SI
from moistair.engine.errors import ImpossibleDewPoint, SupersaturatedState
from moistair.engine.moist_air import MoistAir
from moistair.engine.state_resolver import describe_state, resolve_state_point, w_display
from moistair.models.state_point import InputKind


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------

def approx(value: float, rel_tol: float = 0.01, abs_tol: float = 0.1):
    """
    Approximate comparison helper.
    Default tolerance: 1% relative or 0.1 absolute (whichever is larger).
    Psychrometric calcs can have small rounding differences between sources.
    """
    return pytest.approx(value, rel=rel_tol, abs=abs_tol)


# ---------------------------------------------------------------------------
# Test: Tdb + RH (IP)
# ---------------------------------------------------------------------------

class TestTdbRhIP:
    """Standard conditions: 75°F, 50% RH at sea level."""

    def setup_method(self):
        self.result = resolve_state_point(
            input_kind=InputKind.RELATIVE_HUMIDITY,
            Tdb=75.0,
            value=50.0,
            pressure=DEFAULT_PRESSURE_IP,
            unit_system=UnitSystem.IP,
            label="Room",
        )

    def test_dry_bulb(self):
        assert self.result.Tdb == approx(75.0)

    def test_relative_humidity(self):
        assert self.result.RH == approx(50.0)

    def test_wet_bulb(self):
        # Expected ~62.5-63°F at 75°F/50% RH
        assert 61.0 <= self.result.Twb <= 64.0

    def test_dew_point(self):
        # Expected ~55.0-55.5°F
        assert 54.0 <= self.result.Tdp <= 57.0

    def test_humidity_ratio_grains(self):
        # Expected ~65 grains/lb
        assert 63.0 <= self.result.W_display <= 68.0

    def test_enthalpy(self):
        # Expected ~28.1 Btu/lb_da
        assert self.result.h == approx(28.1, abs_tol=0.5)

    def test_density(self):
        # Expected ~0.074 lb/ft³
        assert self.result.rho == approx(0.0737, rel_tol=0.01, abs_tol=0.001)

    def test_label_and_echo(self):
        assert self.result.label == "Room"
        assert self.result.input_kind == InputKind.RELATIVE_HUMIDITY
        assert self.result.input_values == (75.0, 50.0)


# ---------------------------------------------------------------------------
# Test: every input kind (SI) resolves to the same state
# ---------------------------------------------------------------------------

class TestInputKindsSI:
    """30 °C, 50% RH at sea level, reached through each input kind."""

    def setup_method(self):
        self.reference = resolve_state_point(
            InputKind.RELATIVE_HUMIDITY, 30.0, 50.0, DEFAULT_PRESSURE_SI, UnitSystem.SI
        )

    def test_golden_values(self):
        """h is 64.21 by the ASHRAE enthalpy relation; 0.15 of slack covers the quoted 64.1."""
        assert self.reference.W == pytest.approx(0.01331, abs=1e-4)
        assert self.reference.W_display == pytest.approx(13.31, abs=0.1)
        assert self.reference.h == pytest.approx(64.1, abs=0.15)

    def test_humidity_ratio_input(self):
        result = resolve_state_point(
            InputKind.HUMIDITY_RATIO, 30.0, self.reference.W, DEFAULT_PRESSURE_SI, UnitSystem.SI
        )
        assert result.RH == pytest.approx(50.0, abs=1e-3)

    def test_enthalpy_input(self):
        result = resolve_state_point(
            InputKind.SPECIFIC_ENTHALPY, 30.0, self.reference.h, DEFAULT_PRESSURE_SI, UnitSystem.SI
        )
        assert result.RH == pytest.approx(50.0, abs=0.01)

    def test_dew_point_input(self):
        result = resolve_state_point(
            InputKind.DEW_POINT, 30.0, self.reference.Tdp, DEFAULT_PRESSURE_SI, UnitSystem.SI
        )
        assert result.RH == pytest.approx(50.0, abs=0.01)

    def test_wet_bulb_input(self):
        result = resolve_state_point(
            InputKind.WET_BULB, 30.0, self.reference.Twb, DEFAULT_PRESSURE_SI, UnitSystem.SI
        )
        assert result.RH == pytest.approx(50.0, abs=0.01)

    def test_kind_accepts_string_value(self):
        result = resolve_state_point("RH", 30.0, 50.0, DEFAULT_PRESSURE_SI, UnitSystem.SI)
        assert result.W == self.reference.W

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValueError):
            resolve_state_point("Tdb", 30.0, 50.0, DEFAULT_PRESSURE_SI, UnitSystem.SI)


# ---------------------------------------------------------------------------
# Test: edge cases
# ---------------------------------------------------------------------------

class TestEdgeCases:

    def test_saturated(self):
        result = resolve_state_point(
            InputKind.RELATIVE_HUMIDITY, 20.0, 100.0, DEFAULT_PRESSURE_SI, UnitSystem.SI
        )
        assert result.RH == pytest.approx(100.0)
        assert result.Twb == pytest.approx(20.0)
        assert result.Tdp == pytest.approx(20.0, abs=1e-4)
        assert result.mu == pytest.approx(1.0)

    def test_dry_air_has_no_dew_point(self):
        result = resolve_state_point(
            InputKind.HUMIDITY_RATIO, 20.0, 0.0, DEFAULT_PRESSURE_SI, UnitSystem.SI
        )
        assert result.Tdp is None
        assert result.Twb is not None
        assert result.RH == 0.0

    def test_above_boiling_has_no_wet_bulb(self):
        result = resolve_state_point(
            InputKind.HUMIDITY_RATIO, 110.0, 0.01, DEFAULT_PRESSURE_SI, UnitSystem.SI
        )
        assert result.Twb is None
        assert result.Tdp is not None

    def test_supersaturated_rejected(self):
        with pytest.raises(SupersaturatedState):
            resolve_state_point(
                InputKind.HUMIDITY_RATIO, 30.0, 0.05, DEFAULT_PRESSURE_SI, UnitSystem.SI
            )

    def test_dew_point_above_dry_bulb_rejected(self):
        with pytest.raises(ImpossibleDewPoint):
            resolve_state_point(
                InputKind.DEW_POINT, 20.0, 25.0, DEFAULT_PRESSURE_SI, UnitSystem.SI
            )

    def test_rh_in_percent_above_100_rejected(self):
        with pytest.raises(ValueError):
            resolve_state_point(
                InputKind.RELATIVE_HUMIDITY, 20.0, 120.0, DEFAULT_PRESSURE_SI, UnitSystem.SI
            )


# ---------------------------------------------------------------------------
# Test: presentation helpers
# ---------------------------------------------------------------------------

class TestPresentation:

    def test_w_display_ip(self):
        assert w_display(0.01, UnitSystem.IP) == pytest.approx(70.0)

    def test_w_display_si(self):
        assert w_display(0.01, UnitSystem.SI) == pytest.approx(10.0)

    def test_describe_state_defaults(self):
        state = MoistAir.from_humidity_ratio(25.0, 0.01, DEFAULT_PRESSURE_SI)
        result = describe_state(state)
        assert result.input_kind == InputKind.HUMIDITY_RATIO
        assert result.input_values == (25.0, 0.01)
        assert result.Ps == pytest.approx(state.saturation_pressure(), abs=1e-6)
