"""
Process dispatch.

Maps each ProcessKind to its solver and runs a full process request: resolve
the entering state, apply the transform, then describe both ends and the path
between them.
"""

import logging

from moistair.engine.errors import InvalidInput
from moistair.engine.moist_air import MoistAir
from moistair.engine.processes.base import ProcessSolver
from moistair.engine.processes.humidification import (
    AdiabaticHumidificationSolver,
    IsothermalHumidificationSolver,
)
from moistair.engine.processes.sensible import CoolingSolver, HeatingSolver
from moistair.engine.processes.utils import (
    generate_constant_enthalpy_path,
    generate_path_points,
    heat_rate,
    water_rate,
)
from moistair.engine.state_resolver import build_state, describe_state
from moistair.models.process import (
    InputMode,
    ProcessDescriptor,
    ProcessInput,
    ProcessKind,
    ProcessOutput,
)

logger = logging.getLogger(__name__)

# Solver dispatch table: maps process kinds to solver instances
_SOLVERS: dict[ProcessKind, ProcessSolver] = {
    ProcessKind.HEATING: HeatingSolver(),
    ProcessKind.COOLING: CoolingSolver(),
    ProcessKind.HUMIDIFY_ADIABATIC: AdiabaticHumidificationSolver(),
    ProcessKind.HUMIDIFY_ISOTHERMAL: IsothermalHumidificationSolver(),
}


def apply_process(
    state: MoistAir,
    descriptor: ProcessDescriptor,
    dry_air_mass_flow: float,
) -> MoistAir:
    """Apply one process to a state and return the leaving state."""
    solver = _SOLVERS.get(descriptor.kind)
    if solver is None:
        raise InvalidInput(f"Process kind '{descriptor.kind}' is not supported")
    return solver.apply(state, descriptor, dry_air_mass_flow)


def process_state(
    state: MoistAir,
    kind: ProcessKind,
    mode: InputMode,
    magnitude: float,
    dry_air_mass_flow: float,
) -> MoistAir:
    """Keyword-free form of apply_process, used by the binding helpers."""
    descriptor = ProcessDescriptor(kind=kind, mode=mode, magnitude=magnitude)
    return apply_process(state, descriptor, dry_air_mass_flow)


def solve_process(input_data: ProcessInput) -> ProcessOutput:
    """
    Run a complete process request.

    Returns start state, end state, path points and metadata (heat and
    water rates, property deltas).
    """
    Tdb, value = input_data.start_point_values
    start = build_state(
        input_data.start_input_kind,
        Tdb,
        value,
        input_data.pressure,
        input_data.unit_system,
    )
    descriptor = input_data.process
    m_da = input_data.dry_air_mass_flow

    end = apply_process(start, descriptor, m_da)
    logger.debug(
        "%s/%s: %.4f -> %.4f",
        descriptor.kind.value,
        descriptor.mode.value,
        start.t_dry_bulb,
        end.t_dry_bulb,
    )

    if descriptor.kind == ProcessKind.HUMIDIFY_ADIABATIC:
        path = generate_constant_enthalpy_path(start, end)
    else:
        path = generate_path_points(start, end)

    start_out = describe_state(
        start,
        input_kind=input_data.start_input_kind,
        input_values=input_data.start_point_values,
        label="Entering",
    )
    end_out = describe_state(end, label="Leaving")

    metadata = {
        "heat_rate": round(heat_rate(start, end, m_da), 6),
        "water_rate": round(water_rate(start, end, m_da), 9),
        "delta_h": round(end.specific_enthalpy() - start.specific_enthalpy(), 6),
        "delta_T": round(end.t_dry_bulb - start.t_dry_bulb, 6),
        "delta_W": round(end.humidity_ratio - start.humidity_ratio, 9),
    }

    return ProcessOutput(
        kind=descriptor.kind,
        mode=descriptor.mode,
        unit_system=input_data.unit_system,
        pressure=input_data.pressure,
        start_point=start_out.model_dump(),
        end_point=end_out.model_dump(),
        path_points=path,
        metadata=metadata,
    )
