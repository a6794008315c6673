"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from moistair.api.state_point import router as state_point_router
from moistair.api.chart_data import router as chart_data_router
from moistair.api.process import router as process_router

router = APIRouter()
router.include_router(state_point_router)
router.include_router(chart_data_router)
router.include_router(process_router)
