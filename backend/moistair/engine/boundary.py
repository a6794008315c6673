"""
Flat call surface for external collaborators (chart renderers, UI bindings).

Every function takes plain floats plus a ``use_si`` flag instead of a
UnitSystem, and each state constructor has its own named entry point.
Curves can be handed over either as (Tdb, W) pairs or, through
``line_arrays``, as two equal-length arrays.
"""

import numpy as np

from moistair.engine.atmosphere import pressure_from_altitude as _pressure_from_altitude
from moistair.engine.isopleths import (
    relative_humidity_line as _relative_humidity_line,
    specific_enthalpy_line as _specific_enthalpy_line,
)
from moistair.engine.moist_air import MoistAir
from moistair.engine.processes.runner import process_state
from moistair.engine.processes.sensible import cooling_to_saturation as _cooling_to_saturation
from moistair.engine.units import unit_system_from_flag
from moistair.models.process import InputMode, ProcessKind


def from_humidity_ratio(t_dry_bulb: float, humidity_ratio: float, pressure: float, use_si: bool) -> MoistAir:
    return MoistAir.from_humidity_ratio(
        t_dry_bulb, humidity_ratio, pressure, unit_system_from_flag(use_si)
    )


def from_relative_humidity(t_dry_bulb: float, relative_humidity: float, pressure: float, use_si: bool) -> MoistAir:
    return MoistAir.from_relative_humidity(
        t_dry_bulb, relative_humidity, pressure, unit_system_from_flag(use_si)
    )


def from_specific_enthalpy(t_dry_bulb: float, h: float, pressure: float, use_si: bool) -> MoistAir:
    return MoistAir.from_specific_enthalpy(
        t_dry_bulb, h, pressure, unit_system_from_flag(use_si)
    )


def from_t_dew_point(t_dry_bulb: float, t_dew_point: float, pressure: float, use_si: bool) -> MoistAir:
    return MoistAir.from_t_dew_point(
        t_dry_bulb, t_dew_point, pressure, unit_system_from_flag(use_si)
    )


def from_t_wet_bulb(t_dry_bulb: float, t_wet_bulb: float, pressure: float, use_si: bool) -> MoistAir:
    return MoistAir.from_t_wet_bulb(
        t_dry_bulb, t_wet_bulb, pressure, unit_system_from_flag(use_si)
    )


def apply(
    state: MoistAir,
    kind: ProcessKind | str,
    mode: InputMode | str,
    magnitude: float,
    dry_air_mass_flow: float,
) -> MoistAir:
    """Run one process; kind and mode may be given as their string values."""
    return process_state(
        state, ProcessKind(kind), InputMode(mode), magnitude, dry_air_mass_flow
    )


def cooling_to_saturation(state: MoistAir, dry_air_mass_flow: float) -> tuple[MoistAir, float]:
    """Leaving state at the dew point, and the (negative) heat rate."""
    return _cooling_to_saturation(state, dry_air_mass_flow)


def relative_humidity_line(
    relative_humidity: float, pressure: float, t_min: float, t_max: float, use_si: bool
) -> list[tuple[float, float]]:
    return _relative_humidity_line(
        relative_humidity, pressure, t_min, t_max, unit_system_from_flag(use_si)
    )


def specific_enthalpy_line(
    h: float, pressure: float, t_min: float, t_max: float, use_si: bool
) -> list[tuple[float, float]]:
    return _specific_enthalpy_line(h, pressure, t_min, t_max, unit_system_from_flag(use_si))


def pressure_from_altitude(altitude: float, use_si: bool) -> float:
    """Altitude in m (SI) or ft (IP); pressure in Pa or psia."""
    return _pressure_from_altitude(altitude, unit_system_from_flag(use_si))


def line_arrays(points: list[tuple[float, float]]) -> tuple[np.ndarray, np.ndarray]:
    """Split (Tdb, W) pairs into a temperature array and a humidity ratio array."""
    if not points:
        return np.empty(0), np.empty(0)
    temperatures, humidity_ratios = zip(*points)
    return np.asarray(temperatures, dtype=float), np.asarray(humidity_ratios, dtype=float)
