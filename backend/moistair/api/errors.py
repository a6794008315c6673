"""
Translation of engine errors into HTTP errors.

Engine errors are ValueErrors and map to 422; a solver that ran out of
iterations is a server-side failure and maps to 500.  Either way the detail
carries the error kind and message.
"""

import logging

from fastapi import HTTPException

from moistair.engine.errors import ConvergenceFailure

logger = logging.getLogger(__name__)


def error_detail(e: Exception) -> dict:
    return {"kind": getattr(e, "kind", "calculation_error"), "message": str(e)}


def to_http_exception(e: Exception) -> HTTPException:
    if isinstance(e, ConvergenceFailure):
        return HTTPException(status_code=500, detail=error_detail(e))
    if isinstance(e, ValueError):
        return HTTPException(status_code=422, detail=error_detail(e))
    logger.exception("Unexpected calculation error")
    return HTTPException(
        status_code=500,
        detail={"kind": "calculation_error", "message": f"Calculation error: {e}"},
    )
