"""
Tests for the isopleth generator.
"""

import math

import pytest

from moistair.config import UnitSystem, DEFAULT_PRESSURE_IP, DEFAULT_PRESSURE_SI, GRAINS_PER_LB
from moistair.engine.correlations import saturation_humidity_ratio, specific_enthalpy
from moistair.engine.errors import InvalidInput, OutOfRange
from moistair.engine.isopleths import (
    default_humidity_ratio_ceiling,
    enthalpy_line_saturation_temperature,
    relative_humidity_line,
    specific_enthalpy_line,
    tdb_grid,
)
from moistair.engine.moist_air import MoistAir


# ---------------------------------------------------------------------------
# Sampling grid
# ---------------------------------------------------------------------------

class TestGrid:

    def test_si_chart_range(self):
        grid = tdb_grid(-15.0, 40.0, UnitSystem.SI)
        assert len(grid) == 111
        assert grid[0] == -15.0
        assert grid[-1] == 40.0

    def test_ip_chart_range(self):
        grid = tdb_grid(5.0, 104.0, UnitSystem.IP)
        assert len(grid) == 100

    def test_partial_last_step(self):
        assert list(tdb_grid(0.0, 1.2, UnitSystem.SI)) == pytest.approx([0.0, 0.5, 1.0, 1.2])

    def test_empty_range_rejected(self):
        with pytest.raises(InvalidInput):
            tdb_grid(10.0, 10.0, UnitSystem.SI)

    def test_reversed_range_rejected(self):
        with pytest.raises(InvalidInput):
            relative_humidity_line(0.5, DEFAULT_PRESSURE_SI, 40.0, -15.0, UnitSystem.SI)

    def test_upper_bound_outside_correlation_range(self):
        with pytest.raises(OutOfRange):
            specific_enthalpy_line(50.0, DEFAULT_PRESSURE_SI, 0.0, 5000.0, UnitSystem.SI)

    def test_lower_bound_outside_correlation_range(self):
        with pytest.raises(OutOfRange):
            tdb_grid(-200.0, 40.0, UnitSystem.SI)

    def test_ip_bound_checked_in_fahrenheit(self):
        assert tdb_grid(-148.0, 392.0, UnitSystem.IP)[-1] == 392.0
        with pytest.raises(OutOfRange):
            tdb_grid(5.0, 393.0, UnitSystem.IP)

    @pytest.mark.parametrize("t_max", [math.inf, math.nan, 1e10])
    def test_non_finite_or_huge_bound_rejected(self, t_max):
        with pytest.raises(InvalidInput):
            relative_humidity_line(0.5, DEFAULT_PRESSURE_SI, 0.0, t_max, UnitSystem.SI)

    def test_nan_lower_bound_rejected(self):
        with pytest.raises(InvalidInput):
            tdb_grid(math.nan, 40.0, UnitSystem.SI)


# ---------------------------------------------------------------------------
# Constant relative humidity
# ---------------------------------------------------------------------------

class TestRelativeHumidityLine:

    def setup_method(self):
        self.saturation = relative_humidity_line(
            1.0, DEFAULT_PRESSURE_SI, -15.0, 40.0, UnitSystem.SI, w_max=math.inf
        )

    def test_full_length_without_ceiling(self):
        assert len(self.saturation) == 111

    def test_saturation_strictly_increasing(self):
        Ws = [W for _, W in self.saturation]
        assert all(b > a for a, b in zip(Ws, Ws[1:]))

    def test_saturation_matches_pointwise(self):
        for Tdb, W in self.saturation:
            assert W == saturation_humidity_ratio(Tdb, DEFAULT_PRESSURE_SI, UnitSystem.SI)

    def test_default_ceiling_truncates(self):
        line = relative_humidity_line(1.0, DEFAULT_PRESSURE_SI, -15.0, 40.0, UnitSystem.SI)
        ceiling = default_humidity_ratio_ceiling(UnitSystem.SI)
        assert ceiling == pytest.approx(0.030)
        assert all(W <= ceiling for _, W in line)
        # Ws passes 30 g/kg a little above 31 °C
        assert 30.0 <= line[-1][0] < 33.0
        assert line == self.saturation[:len(line)]

    def test_zero_rh_is_dry_air(self):
        line = relative_humidity_line(0.0, DEFAULT_PRESSURE_SI, -15.0, 40.0, UnitSystem.SI)
        assert len(line) == 111
        assert all(W == 0.0 for _, W in line)

    def test_half_rh_matches_states(self):
        line = relative_humidity_line(0.5, DEFAULT_PRESSURE_SI, 0.0, 30.0, UnitSystem.SI)
        for Tdb, W in line:
            state = MoistAir.from_relative_humidity(Tdb, 0.5, DEFAULT_PRESSURE_SI)
            assert W == state.humidity_ratio

    def test_stops_at_boiling(self):
        line = relative_humidity_line(
            1.0, DEFAULT_PRESSURE_SI, 90.0, 110.0, UnitSystem.SI, w_max=math.inf
        )
        assert line[-1][0] == 99.5

    def test_ip_ceiling_in_grains(self):
        line = relative_humidity_line(1.0, DEFAULT_PRESSURE_IP, 5.0, 104.0, UnitSystem.IP)
        assert all(W * GRAINS_PER_LB <= 210.0 for _, W in line)
        assert len(line) < 100

    def test_deterministic(self):
        a = relative_humidity_line(0.3, DEFAULT_PRESSURE_SI, -15.0, 40.0, UnitSystem.SI)
        b = relative_humidity_line(0.3, DEFAULT_PRESSURE_SI, -15.0, 40.0, UnitSystem.SI)
        assert a == b

    def test_invalid_rh(self):
        with pytest.raises(InvalidInput):
            relative_humidity_line(1.2, DEFAULT_PRESSURE_SI, -15.0, 40.0, UnitSystem.SI)


# ---------------------------------------------------------------------------
# Constant enthalpy
# ---------------------------------------------------------------------------

class TestEnthalpyLine:

    def setup_method(self):
        self.line = specific_enthalpy_line(50.0, DEFAULT_PRESSURE_SI, -15.0, 40.0, UnitSystem.SI)

    def test_constant_enthalpy(self):
        for Tdb, W in self.line:
            assert specific_enthalpy(Tdb, W, UnitSystem.SI) == pytest.approx(50.0, abs=1e-9)

    def test_within_unsaturated_region(self):
        for Tdb, W in self.line:
            assert 0.0 <= W <= saturation_humidity_ratio(Tdb, DEFAULT_PRESSURE_SI, UnitSystem.SI)

    def test_starts_at_saturation(self):
        t_sat = enthalpy_line_saturation_temperature(50.0, DEFAULT_PRESSURE_SI, UnitSystem.SI)
        assert self.line[0][0] >= t_sat
        assert self.line[0][0] - t_sat < 0.5

    def test_runs_to_range_end(self):
        assert self.line[-1][0] == 40.0

    def test_humidity_ratio_falls_with_temperature(self):
        Ws = [W for _, W in self.line]
        assert all(b < a for a, b in zip(Ws, Ws[1:]))

    def test_excludes_negative_humidity_ratio(self):
        # W reaches zero at 20/1.006 ≈ 19.9 °C
        line = specific_enthalpy_line(20.0, DEFAULT_PRESSURE_SI, -15.0, 40.0, UnitSystem.SI)
        assert line[-1][0] < 20.0

    def test_ip(self):
        line = specific_enthalpy_line(30.0, DEFAULT_PRESSURE_IP, 5.0, 104.0, UnitSystem.IP)
        assert len(line) > 0
        for Tdb, W in line:
            assert specific_enthalpy(Tdb, W, UnitSystem.IP) == pytest.approx(30.0, abs=1e-9)


class TestEnthalpySaturationTemperature:

    def test_meets_saturation_curve(self):
        t = enthalpy_line_saturation_temperature(64.0, DEFAULT_PRESSURE_SI, UnitSystem.SI)
        state = MoistAir.from_relative_humidity(t, 1.0, DEFAULT_PRESSURE_SI)
        assert state.specific_enthalpy() == pytest.approx(64.0, abs=1e-3)

    def test_reference_range(self):
        t = enthalpy_line_saturation_temperature(64.0, DEFAULT_PRESSURE_SI, UnitSystem.SI)
        assert 21.0 < t < 23.0
