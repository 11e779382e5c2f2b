"""
Top-level router for version 1 of the API.
"""

from fastapi import APIRouter

from .endpoints import plants

router = APIRouter()

router.include_router(plants.router, prefix="/plants", tags=["plants"])
