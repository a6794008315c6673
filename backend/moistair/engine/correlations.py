"""
Correlation library.

Saturation vapor pressure, saturation humidity ratio, enthalpy and the other
closed-form moist-air relations, in SI and IP units.  Every function is pure
and takes the unit system explicitly; nothing here touches global state.

The saturation pressure correlation is the Hyland-Wexler fit used by ASHRAE
(Fundamentals 2017, ch. 1 eq. 5 and 6): one form over ice at or below the
triple point, another over liquid water above it.  Temperatures outside the
fitted range raise OutOfRange instead of being extrapolated.
"""

import math

from moistair.config import UnitSystem
from moistair.engine.errors import ImpossibleDewPoint, InvalidInput, OutOfRange
from moistair.engine.units import (
    MASS_RATIO_WATER_DRY_AIR,
    VOLUME_MOISTURE_FACTOR,
    UnitConstants,
    constants_for,
)


def check_temperature(t: float, unit_system: UnitSystem) -> None:
    """Raise OutOfRange if t lies outside the correlation validity range."""
    c = constants_for(unit_system)
    if not (c.t_min <= t <= c.t_max):
        raise OutOfRange(
            f"Temperature {t} is outside the valid range "
            f"[{c.t_min}, {c.t_max}] for unit system {c.unit_system.value}"
        )


def check_pressure(pressure: float) -> None:
    if not pressure > 0:
        raise InvalidInput(f"Pressure must be positive, got {pressure}")


def _pws_coefficients(t: float, c: UnitConstants) -> tuple:
    return c.pws_ice if t <= c.triple_point else c.pws_water


def _ln_saturation_pressure(t: float, c: UnitConstants) -> float:
    k0, k1, k2, k3, k4, k5, k6 = _pws_coefficients(t, c)
    T = t + c.zero_absolute
    return k0 / T + k1 + k2 * T + k3 * T**2 + k4 * T**3 + k5 * T**4 + k6 * math.log(T)


def _d_ln_saturation_pressure(t: float, c: UnitConstants) -> float:
    k0, _, k2, k3, k4, k5, k6 = _pws_coefficients(t, c)
    T = t + c.zero_absolute
    return -k0 / T**2 + k2 + 2.0 * k3 * T + 3.0 * k4 * T**2 + 4.0 * k5 * T**3 + k6 / T


def saturation_pressure(t: float, unit_system: UnitSystem) -> float:
    """
    Saturation vapor pressure of water at temperature t.

    Returns Pa (SI, t in °C) or psia (IP, t in °F).
    """
    check_temperature(t, unit_system)
    return math.exp(_ln_saturation_pressure(t, constants_for(unit_system)))


def saturation_pressure_derivative(t: float, unit_system: UnitSystem) -> float:
    """dPws/dt, in Pa/K (SI) or psia/°R (IP)."""
    check_temperature(t, unit_system)
    c = constants_for(unit_system)
    return math.exp(_ln_saturation_pressure(t, c)) * _d_ln_saturation_pressure(t, c)


def humidity_ratio_from_vapor_pressure(vapor_pressure: float, pressure: float) -> float:
    """W = 0.621945·Pw / (P - Pw).  Pw must stay below the total pressure."""
    check_pressure(pressure)
    if vapor_pressure < 0:
        raise InvalidInput(f"Vapor pressure cannot be negative, got {vapor_pressure}")
    if vapor_pressure >= pressure:
        raise ImpossibleDewPoint(
            f"Vapor pressure {vapor_pressure:.6g} is not below the total "
            f"pressure {pressure:.6g}"
        )
    return MASS_RATIO_WATER_DRY_AIR * vapor_pressure / (pressure - vapor_pressure)


def vapor_pressure_from_humidity_ratio(humidity_ratio: float, pressure: float) -> float:
    """Partial pressure of water vapor, in the unit of `pressure`."""
    check_pressure(pressure)
    return pressure * humidity_ratio / (MASS_RATIO_WATER_DRY_AIR + humidity_ratio)


def saturation_humidity_ratio(t: float, pressure: float, unit_system: UnitSystem) -> float:
    """
    Humidity ratio of saturated air at temperature t and total pressure.

    Above the boiling point (Pws >= P) air can hold any amount of vapor, so
    the saturation humidity ratio is infinite.
    """
    check_pressure(pressure)
    pws = saturation_pressure(t, unit_system)
    if pws >= pressure:
        return math.inf
    return humidity_ratio_from_vapor_pressure(pws, pressure)


def specific_enthalpy(t: float, humidity_ratio: float, unit_system: UnitSystem) -> float:
    """Moist air enthalpy, kJ/kg_da (SI) or Btu/lb_da (IP)."""
    c = constants_for(unit_system)
    return c.cp_dry_air * t + humidity_ratio * saturated_vapor_enthalpy(t, unit_system)


def humidity_ratio_from_enthalpy(t: float, h: float, unit_system: UnitSystem) -> float:
    """Invert the enthalpy relation for W at fixed dry-bulb temperature."""
    c = constants_for(unit_system)
    return (h - c.cp_dry_air * t) / (c.h_fg0 + c.cp_water_vapor * t)


def t_dry_bulb_from_enthalpy(h: float, humidity_ratio: float, unit_system: UnitSystem) -> float:
    """Invert the enthalpy relation for Tdb at fixed humidity ratio."""
    c = constants_for(unit_system)
    return (h - humidity_ratio * c.h_fg0) / (c.cp_dry_air + humidity_ratio * c.cp_water_vapor)


def saturated_vapor_enthalpy(t: float, unit_system: UnitSystem) -> float:
    """Specific enthalpy of saturated water vapor, kJ/kg (SI) or Btu/lb (IP)."""
    c = constants_for(unit_system)
    return c.h_fg0 + c.cp_water_vapor * t


def humidity_ratio_from_wet_bulb(
    t_dry_bulb: float, t_wet_bulb: float, pressure: float, unit_system: UnitSystem
) -> float:
    """
    Humidity ratio from dry-bulb and wet-bulb temperatures.

    ASHRAE Fundamentals (2017) ch. 1 eq. 33 and 35.  Once Ws at the wet-bulb
    temperature is known the energy balance is linear in W, so no iteration
    is needed.
    """
    c = constants_for(unit_system)
    ws_star = humidity_ratio_from_vapor_pressure(
        saturation_pressure(t_wet_bulb, unit_system), pressure
    )
    if t_wet_bulb >= c.freezing_point:
        a, b, k = c.wet_bulb_water
    else:
        a, b, k = c.wet_bulb_ice
    return (
        (a - b * t_wet_bulb) * ws_star - c.cp_dry_air * (t_dry_bulb - t_wet_bulb)
    ) / (a + c.cp_water_vapor * t_dry_bulb - k * t_wet_bulb)


def dew_point_estimate(vapor_pressure: float, unit_system: UnitSystem) -> float:
    """
    Approximate inverse of the saturation pressure correlation.

    ASHRAE Fundamentals (2017) ch. 1 eq. 39 (above freezing) and 40 (below).
    Accurate to a few hundredths of a degree; used to seed the exact solve.
    """
    if vapor_pressure <= 0:
        raise InvalidInput(f"Vapor pressure must be positive, got {vapor_pressure}")
    c = constants_for(unit_system)
    p = vapor_pressure * c.dew_point_pressure_factor
    alpha = math.log(p)
    a0, a1, a2, a3, a4 = c.dew_point_above
    t = a0 + a1 * alpha + a2 * alpha**2 + a3 * alpha**3 + a4 * p**0.1984
    if t >= c.freezing_point:
        return t
    b0, b1, b2 = c.dew_point_below
    return b0 + b1 * alpha + b2 * alpha**2


def specific_volume(
    t: float, humidity_ratio: float, pressure: float, unit_system: UnitSystem
) -> float:
    """Moist air specific volume, m³/kg_da (SI) or ft³/lb_da (IP)."""
    check_pressure(pressure)
    c = constants_for(unit_system)
    return (
        c.r_dry_air
        * (t + c.zero_absolute)
        * (1.0 + VOLUME_MOISTURE_FACTOR * humidity_ratio)
        / (pressure * c.pressure_volume_factor)
    )
