"""
MoistAir configuration and constants.
"""

from enum import Enum


class UnitSystem(str, Enum):
    IP = "IP"  # Inch-Pound (°F, psia, Btu/lb_da, ft³/lb_da)
    SI = "SI"  # Metric (°C, Pa, kJ/kg_da, m³/kg_da)


# Default atmospheric pressure at sea level
DEFAULT_PRESSURE_IP = 14.696  # psia
DEFAULT_PRESSURE_SI = 101325.0  # Pa

# Grains per lb conversion
GRAINS_PER_LB = 7000.0

# Bounded root finding.  rtol applies to the temperature being solved for,
# xtol is an absolute floor for temperatures close to zero.
SOLVER_RTOL = 1e-6
SOLVER_XTOL = 1e-9
SOLVER_MAX_ITER = 100

# Relative slack on the W <= Ws check; absorbs floating-point rounding only.
SATURATION_TOLERANCE = 1e-9

# Chart axis ranges (W in display units: grains/lb or g/kg)
CHART_RANGES = {
    "IP": {
        "Tdb_min": 5.0,    # °F
        "Tdb_max": 104.0,  # °F
        "W_min": 0.0,      # grains/lb
        "W_max": 210.0,    # grains/lb
    },
    "SI": {
        "Tdb_min": -15.0,  # °C
        "Tdb_max": 40.0,   # °C
        "W_min": 0.0,      # g/kg (grams per kg dry air)
        "W_max": 30.0,     # g/kg
    },
}

# Fixed dry-bulb sampling step for isopleths
CHART_TDB_STEP = {
    "IP": 1.0,  # °F
    "SI": 0.5,  # °C
}

# Isopleth values drawn on the chart background
CHART_RH_VALUES = [0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0]
CHART_ENTHALPY_VALUES = {
    "IP": [float(h) for h in range(0, 51, 5)],     # Btu/lb_da
    "SI": [float(h) for h in range(-10, 121, 10)],  # kJ/kg_da
}

# Property labels and units for display
PROPERTY_UNITS = {
    "IP": {
        "Tdb": "°F",
        "Twb": "°F",
        "Tdp": "°F",
        "RH": "%",
        "W": "lb_w/lb_da",
        "W_grains": "gr/lb",
        "h": "Btu/lb_da",
        "v": "ft³/lb_da",
        "rho": "lb/ft³",
        "Pv": "psi",
        "Ps": "psi",
        "mu": "",
    },
    "SI": {
        "Tdb": "°C",
        "Twb": "°C",
        "Tdp": "°C",
        "RH": "%",
        "W": "kg_w/kg_da",
        "W_gpkg": "g/kg",
        "h": "kJ/kg_da",
        "v": "m³/kg_da",
        "rho": "kg/m³",
        "Pv": "Pa",
        "Ps": "Pa",
        "mu": "",
    },
}
