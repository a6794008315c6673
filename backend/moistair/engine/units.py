"""
Unit system adapter.

Each unit system carries its own set of constants: gas constant, reference
temperatures, enthalpy coefficients, and the ASHRAE correlation coefficients
that were fitted separately in SI and IP units.  Correlations never branch on
the unit system themselves; they look up a UnitConstants record instead.

Reference: ASHRAE Handbook, Fundamentals (2017), Chapter 1.
"""

from dataclasses import dataclass

from moistair.config import UnitSystem

# Ratio of molecular masses of water and dry air (same in both unit systems)
MASS_RATIO_WATER_DRY_AIR = 0.621945

# Ratio of molecular masses of dry air and water, minus one
VOLUME_MOISTURE_FACTOR = 1.607858

PSI_TO_PA = 6894.75729
FEET_TO_METERS = 0.3048


@dataclass(frozen=True)
class UnitConstants:
    unit_system: UnitSystem

    # Validity range of the saturation correlations
    t_min: float
    t_max: float

    # Absolute temperature offset (K or °R)
    zero_absolute: float
    freezing_point: float
    triple_point: float

    # Dry-air gas constant and the factor that turns pressure into a
    # volume-consistent unit (psia → lbf/ft² in IP)
    r_dry_air: float
    pressure_volume_factor: float

    # h = cp_da·t + W·(h_fg0 + cp_wv·t)
    cp_dry_air: float
    cp_water_vapor: float
    h_fg0: float

    # Wet-bulb energy balance:
    #   W = ((a - b·t*)·Ws* - cp_da·(t - t*)) / (a + cp_wv·t - c·t*)
    # one (a, b, c) triple over liquid water, one over ice
    wet_bulb_water: tuple[float, float, float]
    wet_bulb_ice: tuple[float, float, float]

    # Hyland-Wexler: ln Pws = k0/T + k1 + k2·T + k3·T² + k4·T³ + k5·T⁴ + k6·ln T
    pws_ice: tuple[float, float, float, float, float, float, float]
    pws_water: tuple[float, float, float, float, float, float, float]

    # Dew point approximation (ASHRAE eq. 39/40), vapor pressure scaled by
    # dew_point_pressure_factor first (Pa → kPa in SI)
    dew_point_above: tuple[float, float, float, float, float]
    dew_point_below: tuple[float, float, float]
    dew_point_pressure_factor: float


SI_CONSTANTS = UnitConstants(
    unit_system=UnitSystem.SI,
    t_min=-100.0,
    t_max=200.0,
    zero_absolute=273.15,
    freezing_point=0.0,
    triple_point=0.01,
    r_dry_air=287.042,
    pressure_volume_factor=1.0,
    cp_dry_air=1.006,
    cp_water_vapor=1.86,
    h_fg0=2501.0,
    wet_bulb_water=(2501.0, 2.326, 4.186),
    wet_bulb_ice=(2830.0, 0.24, 2.1),
    pws_ice=(
        -5.6745359e03,
        6.3925247,
        -9.677843e-03,
        6.2215701e-07,
        2.0747825e-09,
        -9.4840240e-13,
        4.1635019,
    ),
    pws_water=(
        -5.8002206e03,
        1.3914993,
        -4.8640239e-02,
        4.1764768e-05,
        -1.4452093e-08,
        0.0,
        6.5459673,
    ),
    dew_point_above=(6.54, 14.526, 0.7389, 0.09486, 0.4569),
    dew_point_below=(6.09, 12.608, 0.4959),
    dew_point_pressure_factor=0.001,
)

IP_CONSTANTS = UnitConstants(
    unit_system=UnitSystem.IP,
    t_min=-148.0,
    t_max=392.0,
    zero_absolute=459.67,
    freezing_point=32.0,
    triple_point=32.018,
    r_dry_air=53.350,
    pressure_volume_factor=144.0,
    cp_dry_air=0.240,
    cp_water_vapor=0.444,
    h_fg0=1061.0,
    wet_bulb_water=(1093.0, 0.556, 1.0),
    wet_bulb_ice=(1220.0, 0.04, 0.48),
    pws_ice=(
        -1.0214165e04,
        -4.8932428,
        -5.3765794e-03,
        1.9202377e-07,
        3.5575832e-10,
        -9.0344688e-14,
        4.1635019,
    ),
    pws_water=(
        -1.0440397e04,
        -1.1294650e01,
        -2.7022355e-02,
        1.2890360e-05,
        -2.4780681e-09,
        0.0,
        6.5459673,
    ),
    dew_point_above=(100.45, 33.193, 2.319, 0.17074, 1.2063),
    dew_point_below=(90.12, 26.142, 0.8927),
    dew_point_pressure_factor=1.0,
)

_CONSTANTS = {
    UnitSystem.SI: SI_CONSTANTS,
    UnitSystem.IP: IP_CONSTANTS,
}


def constants_for(unit_system: UnitSystem) -> UnitConstants:
    """Return the constant set for the given unit system."""
    return _CONSTANTS[UnitSystem(unit_system)]


def unit_system_from_flag(use_si: bool) -> UnitSystem:
    """Map the boundary's boolean unit flag onto UnitSystem."""
    return UnitSystem.SI if use_si else UnitSystem.IP


def celsius_to_fahrenheit(t_c: float) -> float:
    return t_c * 1.8 + 32.0


def fahrenheit_to_celsius(t_f: float) -> float:
    return (t_f - 32.0) / 1.8


def convert_temperature(t: float, source: UnitSystem, target: UnitSystem) -> float:
    if source == target:
        return t
    if target == UnitSystem.IP:
        return celsius_to_fahrenheit(t)
    return fahrenheit_to_celsius(t)


def convert_pressure(p: float, source: UnitSystem, target: UnitSystem) -> float:
    if source == target:
        return p
    if target == UnitSystem.IP:
        return p / PSI_TO_PA
    return p * PSI_TO_PA
