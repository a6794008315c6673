"""
Shared utility functions for psychrometric process solvers.
"""

from moistair.config import UnitSystem
from moistair.engine.correlations import t_dry_bulb_from_enthalpy
from moistair.engine.errors import SupersaturatedResult, SupersaturatedState
from moistair.engine.moist_air import MoistAir
from moistair.engine.state_resolver import w_display
from moistair.models.process import PathPoint


def leaving_state(state: MoistAir, t_dry_bulb: float, humidity_ratio: float) -> MoistAir:
    """
    Build the leaving state at the entering state's pressure and units.

    A leaving state above the saturation line is reported as
    SupersaturatedResult; it is never clamped onto the line.
    """
    try:
        return MoistAir.from_humidity_ratio(
            t_dry_bulb, humidity_ratio, state.pressure, state.unit_system
        )
    except SupersaturatedState as e:
        raise SupersaturatedResult(f"Process would end in the fog region: {e}") from e


def heat_rate(before: MoistAir, after: MoistAir, dry_air_mass_flow: float) -> float:
    """ṁ_da·(h2 - h1): positive when heat is added to the air."""
    return dry_air_mass_flow * (after.specific_enthalpy() - before.specific_enthalpy())


def water_rate(before: MoistAir, after: MoistAir, dry_air_mass_flow: float) -> float:
    """ṁ_da·(W2 - W1): mass flow of water added to the air."""
    return dry_air_mass_flow * (after.humidity_ratio - before.humidity_ratio)


def generate_path_points(
    start: MoistAir,
    end: MoistAir,
    n_points: int = 12,
) -> list[PathPoint]:
    """Generate intermediate points along a straight process line."""
    unit_system: UnitSystem = start.unit_system
    points = []
    for i in range(n_points + 1):
        t = i / n_points
        Tdb = start.t_dry_bulb + t * (end.t_dry_bulb - start.t_dry_bulb)
        W = start.humidity_ratio + t * (end.humidity_ratio - start.humidity_ratio)
        points.append(PathPoint(
            Tdb=round(Tdb, 4),
            W=round(W, 7),
            W_display=w_display(W, unit_system),
        ))
    return points


def generate_constant_enthalpy_path(
    start: MoistAir,
    end: MoistAir,
    n_points: int = 20,
) -> list[PathPoint]:
    """
    Points along the constant-enthalpy line between two states.

    On the chart this line is slightly curved, so each point is placed at
    the exact Tdb for its humidity ratio.
    """
    unit_system: UnitSystem = start.unit_system
    h = start.specific_enthalpy()
    points = []
    for i in range(n_points + 1):
        t = i / n_points
        W = start.humidity_ratio + t * (end.humidity_ratio - start.humidity_ratio)
        Tdb = t_dry_bulb_from_enthalpy(h, W, unit_system)
        points.append(PathPoint(
            Tdb=round(Tdb, 4),
            W=round(W, 7),
            W_display=w_display(W, unit_system),
        ))
    return points
