"""
Pydantic models for state point input/output.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field
from moistair.config import UnitSystem, DEFAULT_PRESSURE_SI


class InputKind(str, Enum):
    """Which property accompanies the dry-bulb temperature."""

    HUMIDITY_RATIO = "W"
    RELATIVE_HUMIDITY = "RH"
    SPECIFIC_ENTHALPY = "h"
    DEW_POINT = "Tdp"
    WET_BULB = "Twb"


class StatePointInput(BaseModel):
    """Input model for resolving a state point from Tdb and one other property."""

    input_kind: InputKind = Field(
        ...,
        description="Property given alongside Tdb",
        examples=["RH", "Twb"],
    )
    Tdb: float = Field(..., description="Dry-bulb temperature (°C SI, °F IP)")
    value: float = Field(
        ...,
        description=(
            "Value of the second property. RH in percent (0-100), "
            "W in kg/kg or lb/lb, h in kJ/kg_da or Btu/lb_da"
        ),
        examples=[50.0, 62.5],
    )
    pressure: float = Field(
        default=DEFAULT_PRESSURE_SI,
        gt=0,
        description="Atmospheric pressure. IP: psia, SI: Pa",
    )
    unit_system: UnitSystem = Field(
        default=UnitSystem.SI,
        description="Unit system: IP or SI",
    )
    label: str = Field(
        default="",
        description="Optional user-facing label for this state point",
    )


class StatePointOutput(BaseModel):
    """Full resolved state point with all psychrometric properties."""

    # Input echo
    label: str = ""
    unit_system: UnitSystem = UnitSystem.SI
    pressure: float
    input_kind: InputKind
    input_values: tuple[float, float]

    # Resolved properties
    Tdb: float = Field(..., description="Dry-bulb temperature")
    Twb: Optional[float] = Field(
        None, description="Wet-bulb temperature (None above the boiling point)"
    )
    Tdp: Optional[float] = Field(
        None, description="Dew point temperature (None for perfectly dry air)"
    )
    RH: float = Field(..., description="Relative humidity (0-100%)")
    W: float = Field(..., description="Humidity ratio (kg_w/kg_da or lb_w/lb_da)")
    W_display: float = Field(
        ...,
        description="Humidity ratio for display (g/kg for SI, grains/lb for IP)",
    )
    h: float = Field(..., description="Specific enthalpy (kJ/kg_da or Btu/lb_da)")
    v: float = Field(..., description="Specific volume (m³/kg_da or ft³/lb_da)")
    rho: float = Field(..., description="Moist air density (kg/m³ or lb/ft³)")
    Pv: float = Field(..., description="Partial vapor pressure")
    Ps: float = Field(..., description="Saturation pressure at Tdb")
    mu: float = Field(..., description="Degree of saturation (0-1)")
