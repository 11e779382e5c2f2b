"""Pytest fixtures for the Plants API tests."""

import pytest
from fastapi.testclient import TestClient

from plants_api.app.core.config import Settings
from plants_api.app.core.db import Database
from plants_api.app.main import create_app
from plants_api.app.repositories.plant_repository import PlantRepository
from plants_api.app.schemas.plant import PlantCreate
from plants_api.app.services.plant_service import PlantService


@pytest.fixture
def db(tmp_path):
    """A fresh database file with the PLANTS table created."""
    database = Database(str(tmp_path / "plants.db"))
    database.init_db()
    return database


@pytest.fixture
def repository(db):
    return PlantRepository(db)


@pytest.fixture
def service(repository):
    return PlantService(repository)


@pytest.fixture
def garden(repository):
    """Seed a mix of fruiting and non-fruiting plants.

    Returns the stored plants keyed by name.
    """
    plants = [
        PlantCreate(name="Fern", quantity=5, watering_frequency=3, has_fruit=False),
        PlantCreate(name="Tomato", quantity=4, watering_frequency=1, has_fruit=True),
        PlantCreate(name="Lemon", quantity=12, watering_frequency=7, has_fruit=True),
        PlantCreate(name="Cactus", quantity=20, watering_frequency=30, has_fruit=False),
        PlantCreate(name="Strawberry", quantity=10, watering_frequency=2, has_fruit=True),
        PlantCreate(name="Mystery", quantity=None, watering_frequency=None, has_fruit=None),
    ]
    return {plant.name: repository.create(plant) for plant in plants}


def _client(tmp_path, **overrides):
    app_settings = Settings(database_url=str(tmp_path / "api.db"), **overrides)
    return TestClient(create_app(app_settings))


@pytest.fixture
def client(tmp_path):
    with _client(tmp_path) as test_client:
        yield test_client


@pytest.fixture
def strict_client(tmp_path):
    with _client(tmp_path, strict_not_found=True) as test_client:
        yield test_client
