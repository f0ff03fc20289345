"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from heatmap.api.heatmap import router as heatmap_router

router = APIRouter()
router.include_router(heatmap_router)
