"""
API v1 Router

All API endpoints for the frontend.
"""

from fastapi import APIRouter

from smacross.api.v1.endpoints import analysis

router = APIRouter()

router.include_router(analysis.router, prefix="/analysis", tags=["SMA Analysis"])
