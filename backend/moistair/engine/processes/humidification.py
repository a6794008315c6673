"""
Humidification process solvers: adiabatic and isothermal.

Adiabatic humidification:
    Water is sprayed or evaporated into the air without outside heat.  The
    enthalpy stays constant, so the added moisture is paid for with sensible
    heat and the dry-bulb temperature drops (evaporative cooling).

Isothermal humidification:
    Moisture is added at constant dry-bulb temperature (steam injection,
    vertical path on the chart).  Enthalpy rises by ΔW·h_g.

Both take ΔW (mass of water per unit mass of dry air) as the magnitude.
"""

from moistair.engine.correlations import t_dry_bulb_from_enthalpy
from moistair.engine.moist_air import MoistAir
from moistair.engine.processes.base import ProcessSolver
from moistair.engine.processes.utils import leaving_state
from moistair.models.process import InputMode, ProcessDescriptor, ProcessKind


# ---------------------------------------------------------------------------
# Adiabatic humidification: constant enthalpy
# ---------------------------------------------------------------------------

class AdiabaticHumidificationSolver(ProcessSolver):
    """Solver for adiabatic humidification (constant enthalpy)."""

    modes = frozenset({InputMode.DELTA_W})

    def transform(
        self,
        state: MoistAir,
        descriptor: ProcessDescriptor,
        dry_air_mass_flow: float,
    ) -> MoistAir:
        end_W = state.humidity_ratio + descriptor.magnitude
        end_Tdb = t_dry_bulb_from_enthalpy(
            state.specific_enthalpy(), end_W, state.unit_system
        )
        return leaving_state(state, end_Tdb, end_W)


# ---------------------------------------------------------------------------
# Isothermal humidification: constant dry-bulb (vertical line)
# ---------------------------------------------------------------------------

class IsothermalHumidificationSolver(ProcessSolver):
    """Solver for isothermal (steam) humidification."""

    modes = frozenset({InputMode.DELTA_W})

    def transform(
        self,
        state: MoistAir,
        descriptor: ProcessDescriptor,
        dry_air_mass_flow: float,
    ) -> MoistAir:
        end_W = state.humidity_ratio + descriptor.magnitude
        return leaving_state(state, state.t_dry_bulb, end_W)


_ADIABATIC = AdiabaticHumidificationSolver()
_ISOTHERMAL = IsothermalHumidificationSolver()


def humidify_adiabatic(state: MoistAir, dry_air_mass_flow: float, delta_w: float) -> MoistAir:
    descriptor = ProcessDescriptor(
        kind=ProcessKind.HUMIDIFY_ADIABATIC, mode=InputMode.DELTA_W, magnitude=delta_w
    )
    return _ADIABATIC.apply(state, descriptor, dry_air_mass_flow)


def humidify_isothermal(state: MoistAir, dry_air_mass_flow: float, delta_w: float) -> MoistAir:
    descriptor = ProcessDescriptor(
        kind=ProcessKind.HUMIDIFY_ISOTHERMAL, mode=InputMode.DELTA_W, magnitude=delta_w
    )
    return _ISOTHERMAL.apply(state, descriptor, dry_air_mass_flow)
