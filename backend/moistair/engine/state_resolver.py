"""
State point resolver.

Turns an (input kind, Tdb, value) triple from the API into a MoistAir state
and renders the state as a StatePointOutput with every property filled in.

The constructor is chosen from a table keyed by InputKind, so the set of
accepted inputs is closed: a kind that is not in the table cannot reach the
engine.
"""

from moistair.config import UnitSystem, GRAINS_PER_LB
from moistair.engine.errors import InvalidInput, OutOfRange
from moistair.engine.moist_air import MoistAir
from moistair.models.state_point import InputKind, StatePointOutput


_CONSTRUCTORS = {
    InputKind.HUMIDITY_RATIO: MoistAir.from_humidity_ratio,
    InputKind.RELATIVE_HUMIDITY: MoistAir.from_relative_humidity,
    InputKind.SPECIFIC_ENTHALPY: MoistAir.from_specific_enthalpy,
    InputKind.DEW_POINT: MoistAir.from_t_dew_point,
    InputKind.WET_BULB: MoistAir.from_t_wet_bulb,
}


def w_display(W: float, unit_system: UnitSystem) -> float:
    """Convert humidity ratio to display units (grains/lb IP or g/kg SI)."""
    if unit_system == UnitSystem.IP:
        return round(W * GRAINS_PER_LB, 4)
    else:
        return round(W * 1000.0, 4)


def build_state(
    input_kind: InputKind,
    Tdb: float,
    value: float,
    pressure: float,
    unit_system: UnitSystem,
) -> MoistAir:
    """
    Build a MoistAir state from Tdb and one other property.

    Relative humidity arrives in percent, as everywhere at the API level.
    """
    constructor = _CONSTRUCTORS[InputKind(input_kind)]
    if input_kind == InputKind.RELATIVE_HUMIDITY:
        value = value / 100.0
    return constructor(Tdb, value, pressure, unit_system)


def describe_state(
    state: MoistAir,
    input_kind: InputKind = InputKind.HUMIDITY_RATIO,
    input_values: tuple[float, float] | None = None,
    label: str = "",
) -> StatePointOutput:
    """Compute every derived property of a state for presentation."""
    unit_system = state.unit_system
    Tdb = state.t_dry_bulb
    W = state.humidity_ratio

    try:
        Twb = round(state.wet_bulb_temperature(), 4)
    except InvalidInput:
        # above the boiling point
        Twb = None

    try:
        Tdp = round(state.dew_point_temperature(), 4)
    except OutOfRange:
        # dry air, or dew point below the correlation range
        Tdp = None

    if input_values is None:
        input_values = (Tdb, W)

    return StatePointOutput(
        label=label,
        unit_system=unit_system,
        pressure=state.pressure,
        input_kind=input_kind,
        input_values=input_values,
        Tdb=round(Tdb, 4),
        Twb=Twb,
        Tdp=Tdp,
        RH=round(state.relative_humidity() * 100.0, 4),
        W=round(W, 7),
        W_display=w_display(W, unit_system),
        h=round(state.specific_enthalpy(), 4),
        v=round(state.specific_volume(), 4),
        rho=round(state.density(), 5),
        Pv=round(state.vapor_pressure(), 6),
        Ps=round(state.saturation_pressure(), 6),
        mu=round(state.degree_of_saturation(), 6),
    )


def resolve_state_point(
    input_kind: InputKind,
    Tdb: float,
    value: float,
    pressure: float,
    unit_system: UnitSystem,
    label: str = "",
) -> StatePointOutput:
    """
    Main entry point. Resolves a full state point from Tdb and one property.

    Args:
        input_kind: Which property accompanies Tdb
        Tdb: Dry-bulb temperature (°C SI, °F IP)
        value: Value of the second property (RH in percent)
        pressure: Atmospheric pressure (Pa for SI, psia for IP)
        unit_system: IP or SI
        label: Optional user label

    Returns:
        StatePointOutput with all resolved properties

    Raises:
        PsychrometricError: If the inputs do not describe a valid state
    """
    state = build_state(input_kind, Tdb, value, pressure, unit_system)
    return describe_state(
        state,
        input_kind=InputKind(input_kind),
        input_values=(Tdb, value),
        label=label,
    )
