"""
API routes for chart background data and individual isopleths.
"""

from fastapi import APIRouter

from moistair.api.errors import to_http_exception
from moistair.config import UnitSystem, DEFAULT_PRESSURE_IP, DEFAULT_PRESSURE_SI
from moistair.engine.boundary import (
    line_arrays,
    relative_humidity_line,
    specific_enthalpy_line,
)
from moistair.engine.chart_generator import generate_chart_data

router = APIRouter(prefix="/api/v1", tags=["chart-data"])


def _default_pressure(use_si: bool) -> float:
    return DEFAULT_PRESSURE_SI if use_si else DEFAULT_PRESSURE_IP


def _line_response(points: list[tuple[float, float]]) -> dict:
    temperatures, humidity_ratios = line_arrays(points)
    return {
        "temperatures": temperatures.tolist(),
        "humidity_ratios": humidity_ratios.tolist(),
    }


@router.get("/chart-data")
async def get_chart_data(
    unit_system: UnitSystem = UnitSystem.IP,
    pressure: float | None = None,
) -> dict:
    """
    Generate all psychrometric chart background data.

    Returns saturation curve, constant RH lines and constant enthalpy lines.

    If pressure is not provided, uses standard sea-level pressure
    for the selected unit system.
    """
    if pressure is None:
        pressure = _default_pressure(unit_system == UnitSystem.SI)

    try:
        return generate_chart_data(pressure, unit_system)
    except Exception as e:
        raise to_http_exception(e)


@router.get("/isopleth/relative-humidity")
async def get_relative_humidity_line(
    rh: float,
    t_min: float,
    t_max: float,
    use_si: bool = True,
    pressure: float | None = None,
) -> dict:
    """Constant RH line; rh is a fraction in [0, 1]."""
    if pressure is None:
        pressure = _default_pressure(use_si)
    try:
        points = relative_humidity_line(rh, pressure, t_min, t_max, use_si)
    except Exception as e:
        raise to_http_exception(e)
    return _line_response(points)


@router.get("/isopleth/enthalpy")
async def get_enthalpy_line(
    h: float,
    t_min: float,
    t_max: float,
    use_si: bool = True,
    pressure: float | None = None,
) -> dict:
    """Constant enthalpy line, clipped to the unsaturated region."""
    if pressure is None:
        pressure = _default_pressure(use_si)
    try:
        points = specific_enthalpy_line(h, pressure, t_min, t_max, use_si)
    except Exception as e:
        raise to_http_exception(e)
    return _line_response(points)
