"""
API routes for state point resolution.
"""

from fastapi import APIRouter

from moistair.api.errors import to_http_exception
from moistair.config import UnitSystem
from moistair.engine.atmosphere import pressure_from_altitude as standard_pressure
from moistair.engine.state_resolver import resolve_state_point
from moistair.models.state_point import StatePointInput, StatePointOutput

router = APIRouter(prefix="/api/v1", tags=["state-point"])


@router.post("/state-point", response_model=StatePointOutput)
async def create_state_point(data: StatePointInput) -> StatePointOutput:
    """
    Resolve a full psychrometric state point from Tdb and one other property.

    Accepts any supported input kind (W, RH, h, Tdp, Twb) and returns all
    psychrometric properties.
    """
    try:
        return resolve_state_point(
            input_kind=data.input_kind,
            Tdb=data.Tdb,
            value=data.value,
            pressure=data.pressure,
            unit_system=data.unit_system,
            label=data.label,
        )
    except Exception as e:
        raise to_http_exception(e)


@router.get("/pressure-from-altitude")
async def pressure_from_altitude(
    altitude: float, unit_system: UnitSystem = UnitSystem.SI
) -> dict:
    """
    Convert altitude to standard atmospheric pressure.

    Args:
        altitude: Altitude in feet (IP) or meters (SI)
        unit_system: IP or SI

    Returns:
        Atmospheric pressure in psia (IP) or Pa (SI)
    """
    try:
        pressure = standard_pressure(altitude, unit_system)
    except Exception as e:
        raise to_http_exception(e)
    return {"altitude": altitude, "pressure": round(pressure, 6), "unit_system": unit_system}
