"""
FastAPI dependencies shared by the endpoints.

The ``Database`` handle and the settings are attached to ``app.state``
by ``create_app``; these helpers hand them to request handlers.
"""

from fastapi import Depends, Request

from plants_api.app.core.config import Settings
from plants_api.app.core.db import Database
from plants_api.app.repositories.plant_repository import PlantRepository
from plants_api.app.services.plant_service import PlantService


def get_database(request: Request) -> Database:
    return request.app.state.db


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_plant_service(db: Database = Depends(get_database)) -> PlantService:
    return PlantService(PlantRepository(db))
