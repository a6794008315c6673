"""
Sensible heating and cooling process solvers.

A sensible process is a horizontal line on the psychrometric chart: the humidity
ratio (W) stays constant while the dry-bulb temperature changes.

Three input modes:
  - POWER: heat rate Q at dry-air mass flow ṁ_da; h2 = h1 ± Q/ṁ_da and the
    leaving Tdb follows from the enthalpy relation at constant W
  - DELTA_T: temperature change magnitude
  - TARGET_T: the desired leaving dry-bulb

Cooling below the dew point would condense moisture, which this model does not
do; such a request ends in the fog region and raises SupersaturatedResult.
cooling_to_saturation stops exactly at the dew point instead.
"""

import math

from moistair.engine.correlations import t_dry_bulb_from_enthalpy
from moistair.engine.errors import InvalidInput
from moistair.engine.moist_air import MoistAir
from moistair.engine.processes.base import ProcessSolver
from moistair.engine.processes.utils import heat_rate, leaving_state
from moistair.models.process import InputMode, ProcessDescriptor, ProcessKind


class SensibleSolver(ProcessSolver):
    """Solver for sensible heating (sign=+1) or cooling (sign=-1)."""

    modes = frozenset({InputMode.POWER, InputMode.DELTA_T, InputMode.TARGET_T})

    def __init__(self, sign: float):
        self.sign = sign

    def transform(
        self,
        state: MoistAir,
        descriptor: ProcessDescriptor,
        dry_air_mass_flow: float,
    ) -> MoistAir:
        W = state.humidity_ratio
        mode = descriptor.mode

        if mode == InputMode.POWER:
            h2 = state.specific_enthalpy() + self.sign * descriptor.magnitude / dry_air_mass_flow
            end_Tdb = t_dry_bulb_from_enthalpy(h2, W, state.unit_system)

        elif mode == InputMode.DELTA_T:
            end_Tdb = state.t_dry_bulb + self.sign * descriptor.magnitude

        else:
            end_Tdb = descriptor.magnitude
            if self.sign * (end_Tdb - state.t_dry_bulb) < 0:
                direction = "above" if self.sign < 0 else "below"
                raise InvalidInput(
                    f"Target Tdb {end_Tdb} is {direction} the entering Tdb "
                    f"{state.t_dry_bulb} for a {descriptor.kind.value} process"
                )

        return leaving_state(state, end_Tdb, W)


class HeatingSolver(SensibleSolver):
    def __init__(self):
        super().__init__(sign=1.0)


class CoolingSolver(SensibleSolver):
    def __init__(self):
        super().__init__(sign=-1.0)


_HEATING = HeatingSolver()
_COOLING = CoolingSolver()


def heating_power(state: MoistAir, dry_air_mass_flow: float, power: float) -> MoistAir:
    descriptor = ProcessDescriptor(kind=ProcessKind.HEATING, mode=InputMode.POWER, magnitude=power)
    return _HEATING.apply(state, descriptor, dry_air_mass_flow)


def heating_delta_t(state: MoistAir, dry_air_mass_flow: float, delta_t: float) -> MoistAir:
    descriptor = ProcessDescriptor(kind=ProcessKind.HEATING, mode=InputMode.DELTA_T, magnitude=delta_t)
    return _HEATING.apply(state, descriptor, dry_air_mass_flow)


def heating_to(state: MoistAir, dry_air_mass_flow: float, t_dry_bulb: float) -> MoistAir:
    descriptor = ProcessDescriptor(kind=ProcessKind.HEATING, mode=InputMode.TARGET_T, magnitude=t_dry_bulb)
    return _HEATING.apply(state, descriptor, dry_air_mass_flow)


def cooling_power(state: MoistAir, dry_air_mass_flow: float, power: float) -> MoistAir:
    descriptor = ProcessDescriptor(kind=ProcessKind.COOLING, mode=InputMode.POWER, magnitude=power)
    return _COOLING.apply(state, descriptor, dry_air_mass_flow)


def cooling_delta_t(state: MoistAir, dry_air_mass_flow: float, delta_t: float) -> MoistAir:
    descriptor = ProcessDescriptor(kind=ProcessKind.COOLING, mode=InputMode.DELTA_T, magnitude=delta_t)
    return _COOLING.apply(state, descriptor, dry_air_mass_flow)


def cooling_to(state: MoistAir, dry_air_mass_flow: float, t_dry_bulb: float) -> MoistAir:
    descriptor = ProcessDescriptor(kind=ProcessKind.COOLING, mode=InputMode.TARGET_T, magnitude=t_dry_bulb)
    return _COOLING.apply(state, descriptor, dry_air_mass_flow)


def cooling_to_saturation(state: MoistAir, dry_air_mass_flow: float) -> tuple[MoistAir, float]:
    """
    Cool at constant W until the air is saturated.

    Returns the leaving state (at the dew point) and the heat rate, which is
    negative since heat is removed.  Dry air has no dew point and raises
    OutOfRange.
    """
    if not (dry_air_mass_flow > 0 and math.isfinite(dry_air_mass_flow)):
        raise InvalidInput(f"Dry-air mass flow must be positive, got {dry_air_mass_flow}")
    # tight enough that W stays within the saturation slack at the dew point
    t_dew_point = state.dew_point_temperature(rtol=1e-12)
    end = leaving_state(state, t_dew_point, state.humidity_ratio)
    return end, heat_rate(state, end, dry_air_mass_flow)
