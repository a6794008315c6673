"""
Isopleth generator.

Samples lines of constant relative humidity and constant enthalpy across a
dry-bulb range for the chart background.  Samples sit on a fixed grid
(CHART_TDB_STEP), so the number of points depends only on the range.

Points are (Tdb, W) tuples with W in mass ratio (kg_w/kg_da or lb_w/lb_da).
"""

import logging

import numpy as np

from moistair.config import (
    CHART_RANGES,
    CHART_TDB_STEP,
    GRAINS_PER_LB,
    UnitSystem,
)
from moistair.engine.correlations import (
    check_pressure,
    check_temperature,
    humidity_ratio_from_enthalpy,
    saturation_humidity_ratio,
)
from moistair.engine.errors import ImpossibleDewPoint, InvalidInput
from moistair.engine.moist_air import (
    MoistAir,
    t_dry_bulb_from_enthalpy_relative_humidity,
)

logger = logging.getLogger(__name__)


def default_humidity_ratio_ceiling(unit_system: UnitSystem) -> float:
    """Top of the chart, converted from display units to a mass ratio."""
    unit_system = UnitSystem(unit_system)
    w_max = CHART_RANGES[unit_system.value]["W_max"]
    if unit_system == UnitSystem.IP:
        return w_max / GRAINS_PER_LB
    return w_max / 1000.0


def tdb_grid(t_min: float, t_max: float, unit_system: UnitSystem) -> np.ndarray:
    """
    Dry-bulb samples from t_min to t_max at the fixed chart step.

    Both endpoints are included; when the range is not a whole number of
    steps the last interval is shorter.  Both ends must lie inside the
    correlation validity range.
    """
    check_temperature(t_min, unit_system)
    check_temperature(t_max, unit_system)
    if not t_min < t_max:
        raise InvalidInput(f"t_min ({t_min}) must be less than t_max ({t_max})")
    step = CHART_TDB_STEP[UnitSystem(unit_system).value]
    n_steps = int(np.floor((t_max - t_min) / step + 1e-9))
    grid = t_min + step * np.arange(n_steps + 1)
    if t_max - grid[-1] > 1e-9 * max(1.0, abs(t_max)):
        grid = np.append(grid, t_max)
    else:
        grid[-1] = t_max
    return grid


def relative_humidity_line(
    relative_humidity: float,
    pressure: float,
    t_min: float,
    t_max: float,
    unit_system: UnitSystem = UnitSystem.SI,
    w_max: float | None = None,
) -> list[tuple[float, float]]:
    """
    Constant relative humidity line.

    Args:
        relative_humidity: Fraction in [0, 1]
        pressure: Atmospheric pressure (Pa for SI, psia for IP)
        t_min, t_max: Dry-bulb range
        unit_system: IP or SI
        w_max: Humidity ratio ceiling; defaults to the top of the chart

    Returns:
        Ordered (Tdb, W) points.  The line is cut at the first sample above
        the ceiling, or where the vapor pressure would reach the total
        pressure.
    """
    if not (0.0 <= relative_humidity <= 1.0):
        raise InvalidInput(
            f"Relative humidity must be between 0 and 1, got {relative_humidity}"
        )
    check_pressure(pressure)
    if w_max is None:
        w_max = default_humidity_ratio_ceiling(unit_system)

    points = []
    for Tdb in tdb_grid(t_min, t_max, unit_system):
        Tdb = float(Tdb)
        try:
            state = MoistAir.from_relative_humidity(Tdb, relative_humidity, pressure, unit_system)
        except ImpossibleDewPoint:
            logger.debug("RH %.2f line stops at Tdb=%.2f: Pw reaches P", relative_humidity, Tdb)
            break
        if state.humidity_ratio > w_max:
            logger.debug("RH %.2f line leaves the chart at Tdb=%.2f", relative_humidity, Tdb)
            break
        points.append((Tdb, state.humidity_ratio))

    return points


def specific_enthalpy_line(
    h: float,
    pressure: float,
    t_min: float,
    t_max: float,
    unit_system: UnitSystem = UnitSystem.SI,
) -> list[tuple[float, float]]:
    """
    Constant enthalpy line.

    W follows in closed form at each sample.  Samples with W < 0 (below dry
    air) or above saturation are left out.
    """
    check_pressure(pressure)
    points = []
    for Tdb in tdb_grid(t_min, t_max, unit_system):
        Tdb = float(Tdb)
        W = humidity_ratio_from_enthalpy(Tdb, h, unit_system)
        if W < 0 or W > saturation_humidity_ratio(Tdb, pressure, unit_system):
            continue
        points.append((Tdb, W))
    return points


def enthalpy_line_saturation_temperature(
    h: float,
    pressure: float,
    unit_system: UnitSystem = UnitSystem.SI,
) -> float:
    """Dry-bulb where a constant enthalpy line meets the saturation curve."""
    return t_dry_bulb_from_enthalpy_relative_humidity(h, 1.0, pressure, unit_system)
