"""
API routes for psychrometric process calculations.
"""

from fastapi import APIRouter

from moistair.api.errors import to_http_exception
from moistair.engine.processes.runner import solve_process
from moistair.models.process import ProcessInput, ProcessOutput

router = APIRouter(prefix="/api/v1", tags=["process"])


@router.post("/process", response_model=ProcessOutput)
async def calculate_process(data: ProcessInput) -> ProcessOutput:
    """
    Calculate a psychrometric process.

    Dispatches to the solver for the requested kind.  Returns start state,
    end state, path points and metadata.
    """
    try:
        return solve_process(data)
    except Exception as e:
        raise to_http_exception(e)
