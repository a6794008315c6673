"""
Pydantic models for psychrometric process input/output.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from moistair.config import UnitSystem, DEFAULT_PRESSURE_SI
from moistair.models.state_point import InputKind


class ProcessKind(str, Enum):
    HEATING = "heating"
    COOLING = "cooling"
    HUMIDIFY_ADIABATIC = "humidify_adiabatic"
    HUMIDIFY_ISOTHERMAL = "humidify_isothermal"


class InputMode(str, Enum):
    POWER = "power"        # heat rate; kW with kg/s (SI), Btu/h with lb/h (IP)
    DELTA_T = "delta_t"    # temperature change magnitude
    DELTA_W = "delta_w"    # humidity ratio added
    TARGET_T = "target_t"  # leaving dry-bulb temperature


class ProcessDescriptor(BaseModel):
    """A single transform request: what to do, how it is specified, how much."""

    model_config = ConfigDict(frozen=True)

    kind: ProcessKind
    mode: InputMode
    magnitude: float = Field(
        ...,
        description="Power, ΔT, ΔW or target Tdb depending on mode",
    )


class ProcessInput(BaseModel):
    """Input for a psychrometric process calculation."""

    unit_system: UnitSystem = UnitSystem.SI
    pressure: float = Field(default=DEFAULT_PRESSURE_SI, gt=0)

    # Start state: resolved from Tdb plus one other property
    start_input_kind: InputKind
    start_point_values: tuple[float, float]

    dry_air_mass_flow: float = Field(
        ...,
        gt=0,
        description="Dry-air mass flow (kg/s SI, lb/h IP)",
    )
    process: ProcessDescriptor


class PathPoint(BaseModel):
    """A point along a process path for chart rendering."""

    Tdb: float
    W: float
    W_display: float


class ProcessOutput(BaseModel):
    """Result of a process calculation."""

    kind: ProcessKind
    mode: InputMode
    unit_system: UnitSystem
    pressure: float

    start_point: dict  # Full StatePointOutput as dict
    end_point: dict  # Full StatePointOutput as dict
    path_points: list[PathPoint]

    metadata: dict = Field(default_factory=dict)
