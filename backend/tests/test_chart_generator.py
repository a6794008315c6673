"""
Tests for chart background data generation.
"""

import pytest

from moistair.config import UnitSystem, DEFAULT_PRESSURE_IP, DEFAULT_PRESSURE_SI, CHART_RANGES
from moistair.engine.chart_generator import generate_chart_data
from moistair.engine.correlations import saturation_humidity_ratio


class TestChartDataSI:

    def setup_method(self):
        self.data = generate_chart_data(DEFAULT_PRESSURE_SI, UnitSystem.SI)

    def test_keys(self):
        assert set(self.data) == {
            "unit_system", "pressure", "ranges", "units", "saturation_curve",
            "rh_lines", "enthalpy_lines", "enthalpy_labels",
        }

    def test_ranges(self):
        assert self.data["ranges"] == CHART_RANGES["SI"]

    def test_saturation_curve_on_chart(self):
        curve = self.data["saturation_curve"]
        assert curve[0]["Tdb"] == -15.0
        assert all(p["W_display"] <= 30.0 for p in curve)

    def test_saturation_curve_increasing(self):
        Ws = [p["W"] for p in self.data["saturation_curve"]]
        assert all(b > a for a, b in zip(Ws, Ws[1:]))

    def test_rh_lines(self):
        assert set(self.data["rh_lines"]) == {str(rh) for rh in range(10, 100, 10)}

    def test_rh_lines_below_saturation(self):
        sat = {p["Tdb"]: p["W"] for p in self.data["saturation_curve"]}
        for points in self.data["rh_lines"].values():
            for p in points:
                if p["Tdb"] in sat:
                    assert p["W"] < sat[p["Tdb"]]

    def test_lower_rh_lines_reach_further(self):
        rh = self.data["rh_lines"]
        assert rh["10"][-1]["Tdb"] >= rh["90"][-1]["Tdb"]
        assert rh["10"][-1]["Tdb"] == 40.0

    def test_enthalpy_lines_present(self):
        assert "50.0" in self.data["enthalpy_lines"]
        assert all(len(points) >= 2 for points in self.data["enthalpy_lines"].values())

    def test_enthalpy_labels_on_saturation(self):
        for key, label in self.data["enthalpy_labels"].items():
            assert key in self.data["enthalpy_lines"]
            Ws = saturation_humidity_ratio(label["Tdb"], DEFAULT_PRESSURE_SI, UnitSystem.SI)
            assert label["W"] == pytest.approx(Ws, rel=2e-3, abs=1e-6)


class TestChartDataIP:

    def setup_method(self):
        self.data = generate_chart_data(DEFAULT_PRESSURE_IP, UnitSystem.IP)

    def test_unit_system(self):
        assert self.data["unit_system"] == "IP"
        assert self.data["units"]["h"] == "Btu/lb_da"

    def test_saturation_curve_within_ceiling(self):
        assert all(p["W_display"] <= 210.0 for p in self.data["saturation_curve"])

    def test_grid_step(self):
        curve = self.data["saturation_curve"]
        assert curve[1]["Tdb"] - curve[0]["Tdb"] == pytest.approx(1.0)

    def test_enthalpy_lines_present(self):
        assert "30.0" in self.data["enthalpy_lines"]


class TestChartDataAltitude:

    def test_lower_pressure_raises_saturation(self):
        sea = generate_chart_data(DEFAULT_PRESSURE_SI, UnitSystem.SI)["saturation_curve"]
        high = generate_chart_data(80000.0, UnitSystem.SI)["saturation_curve"]
        assert high[20]["W"] > sea[20]["W"]
