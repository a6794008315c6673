"""
U.S. Standard Atmosphere 1976, geopotential altitudes 0 to 84 852 m.

The model is a stack of seven layers, each with a constant temperature lapse
rate.  Pressure in a layer follows from the base pressure of that layer:

    lapse != 0:  P = Pb·(Tb / (Tb + L·(z - zb)))^(g·M / (R·L))
    lapse == 0:  P = Pb·exp(-g·M·(z - zb) / (R·Tb))
"""

import math

from moistair.config import UnitSystem
from moistair.engine.errors import OutOfRange
from moistair.engine.units import FEET_TO_METERS, PSI_TO_PA

GRAVITY = 9.80665        # m/s²
MOLAR_MASS_AIR = 0.0289644  # kg/mol
GAS_CONSTANT = 8.31447   # J/(mol·K)

SEA_LEVEL_PRESSURE = 101325.0  # Pa
ALTITUDE_MIN = 0.0       # m
ALTITUDE_MAX = 84852.0   # m

# (base altitude m, base temperature °C, lapse rate K/m)
_LAYERS = (
    (0.0, 15.0, -0.0065),
    (11000.0, -56.5, 0.0),
    (20000.0, -56.5, 0.001),
    (32000.0, -44.5, 0.0028),
    (47000.0, -2.5, 0.0),
    (51000.0, -2.5, -0.0028),
    (71000.0, -58.5, -0.002),
)


def _layer_pressure(base_pressure: float, base_t: float, lapse: float, dz: float) -> float:
    t_k = base_t + 273.15
    if lapse == 0.0:
        return base_pressure * math.exp(-GRAVITY * MOLAR_MASS_AIR * dz / (GAS_CONSTANT * t_k))
    return base_pressure * (t_k / (t_k + lapse * dz)) ** (
        GRAVITY * MOLAR_MASS_AIR / (GAS_CONSTANT * lapse)
    )


def _base_pressures() -> tuple[float, ...]:
    pressures = [SEA_LEVEL_PRESSURE]
    for (z0, t0, lapse), (z1, _, _) in zip(_LAYERS, _LAYERS[1:]):
        pressures.append(_layer_pressure(pressures[-1], t0, lapse, z1 - z0))
    return tuple(pressures)


_BASE_PRESSURES = _base_pressures()


def _check_altitude(altitude: float) -> None:
    if not (ALTITUDE_MIN <= altitude <= ALTITUDE_MAX):
        raise OutOfRange(
            f"Altitude {altitude} m is outside the standard atmosphere model "
            f"[{ALTITUDE_MIN}, {ALTITUDE_MAX}]"
        )


def _layer_index(altitude: float) -> int:
    index = 0
    for i, (base, _, _) in enumerate(_LAYERS):
        if altitude > base:
            index = i
    return index


def atmosphere_temperature(altitude: float) -> float:
    """Air temperature in °C at a geopotential altitude in meters."""
    _check_altitude(altitude)
    base, t0, lapse = _LAYERS[_layer_index(altitude)]
    return t0 + lapse * (altitude - base)


def atmosphere_pressure(altitude: float) -> float:
    """Atmospheric pressure in Pa at a geopotential altitude in meters."""
    _check_altitude(altitude)
    i = _layer_index(altitude)
    base, t0, lapse = _LAYERS[i]
    return _layer_pressure(_BASE_PRESSURES[i], t0, lapse, altitude - base)


def pressure_from_altitude(altitude: float, unit_system: UnitSystem = UnitSystem.SI) -> float:
    """
    Standard atmospheric pressure at an altitude.

    Args:
        altitude: Altitude in feet (IP) or meters (SI)
        unit_system: IP or SI

    Returns:
        Pressure in psia (IP) or Pa (SI)
    """
    if UnitSystem(unit_system) == UnitSystem.IP:
        return atmosphere_pressure(altitude * FEET_TO_METERS) / PSI_TO_PA
    return atmosphere_pressure(altitude)
