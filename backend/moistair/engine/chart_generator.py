"""
Chart background data generator.

Generates all the reference lines needed to render a psychrometric chart:
- Saturation curve (100% RH)
- Constant relative humidity lines (10%, 20%, ... 90%)
- Constant enthalpy lines, with a label anchor where each meets saturation

Lines come from the isopleth generator and are converted to point dicts
{Tdb, W, W_display} for the frontend.
"""

from moistair.config import (
    CHART_ENTHALPY_VALUES,
    CHART_RANGES,
    CHART_RH_VALUES,
    PROPERTY_UNITS,
    UnitSystem,
)
from moistair.engine.correlations import humidity_ratio_from_enthalpy
from moistair.engine.errors import OutOfRange
from moistair.engine.isopleths import (
    enthalpy_line_saturation_temperature,
    relative_humidity_line,
    specific_enthalpy_line,
)
from moistair.engine.state_resolver import w_display


def _to_points(line: list[tuple[float, float]], unit_system: UnitSystem) -> list[dict]:
    return [
        {
            "Tdb": round(Tdb, 2),
            "W": round(W, 7),
            "W_display": round(w_display(W, unit_system), 2),
        }
        for Tdb, W in line
    ]


def _tdb_range(unit_system: UnitSystem) -> tuple[float, float]:
    ranges = CHART_RANGES[unit_system.value]
    return ranges["Tdb_min"], ranges["Tdb_max"]


def generate_saturation_curve(pressure: float, unit_system: UnitSystem) -> list[dict]:
    """
    Generate the saturation curve (100% RH boundary).

    Returns list of {Tdb, W, W_display} points tracing the upper boundary
    of the psychrometric chart.
    """
    t_min, t_max = _tdb_range(unit_system)
    return _to_points(
        relative_humidity_line(1.0, pressure, t_min, t_max, unit_system), unit_system
    )


def generate_rh_lines(pressure: float, unit_system: UnitSystem) -> dict[str, list[dict]]:
    """
    Generate constant relative humidity lines.

    Returns dict keyed by RH percentage string (e.g., "10", "20", ... "90").
    The 100% line is the saturation curve and is not repeated here.
    """
    t_min, t_max = _tdb_range(unit_system)
    lines = {}
    for rh in CHART_RH_VALUES:
        if rh >= 1.0:
            continue
        line = relative_humidity_line(rh, pressure, t_min, t_max, unit_system)
        lines[str(round(rh * 100))] = _to_points(line, unit_system)
    return lines


def generate_enthalpy_lines(
    pressure: float, unit_system: UnitSystem
) -> tuple[dict[str, list[dict]], dict[str, dict]]:
    """
    Generate constant enthalpy lines and their label anchors.

    Lines are clipped to the chart's humidity ratio range; a line with fewer
    than two points on the chart is dropped.  The label anchor is the point
    where the line meets the saturation curve.
    """
    t_min, t_max = _tdb_range(unit_system)
    w_max = CHART_RANGES[unit_system.value]["W_max"]

    lines = {}
    labels = {}
    for h in CHART_ENTHALPY_VALUES[unit_system.value]:
        points = [
            p for p in _to_points(
                specific_enthalpy_line(h, pressure, t_min, t_max, unit_system), unit_system
            )
            if p["W_display"] <= w_max
        ]
        if len(points) < 2:
            continue
        key = str(round(h, 1))
        lines[key] = points

        try:
            t_sat = enthalpy_line_saturation_temperature(h, pressure, unit_system)
        except OutOfRange:
            continue
        W_sat = humidity_ratio_from_enthalpy(t_sat, h, unit_system)
        labels[key] = _to_points([(t_sat, W_sat)], unit_system)[0]

    return lines, labels


def generate_chart_data(pressure: float, unit_system: UnitSystem) -> dict:
    """
    Generate all chart background data in a single call.

    Returns a dict containing all line sets needed to render the full
    psychrometric chart background.
    """
    unit_system = UnitSystem(unit_system)
    enthalpy_lines, enthalpy_labels = generate_enthalpy_lines(pressure, unit_system)
    return {
        "unit_system": unit_system.value,
        "pressure": pressure,
        "ranges": CHART_RANGES[unit_system.value],
        "units": PROPERTY_UNITS[unit_system.value],
        "saturation_curve": generate_saturation_curve(pressure, unit_system),
        "rh_lines": generate_rh_lines(pressure, unit_system),
        "enthalpy_lines": enthalpy_lines,
        "enthalpy_labels": enthalpy_labels,
    }
