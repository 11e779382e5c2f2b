"""
Business logic for plants.

``PlantService`` implements the six operations of the plants API on
top of a ``PlantRepository``.  Lookups by an unknown id return
``None``; mapping that to an HTTP response is left to the endpoints.
"""

import logging
from typing import List, Optional

from plants_api.app.repositories.plant_repository import PlantRepository
from plants_api.app.repositories.queries import PlantQuery
from plants_api.app.schemas.plant import PlantCreate, PlantRead, PlantUpdate

logger = logging.getLogger(__name__)

# Fields a client may change; ``id`` is never overwritten.
MUTABLE_FIELDS = ("name", "quantity", "watering_frequency", "has_fruit")


class PlantService:
    """Service for managing plants."""

    def __init__(self, repository: PlantRepository) -> None:
        self.repository = repository

    async def list_plants(self) -> List[PlantRead]:
        return self.repository.list_all()

    async def get_plant(self, plant_id: int) -> Optional[PlantRead]:
        return self.repository.get_by_id(plant_id)

    async def create_plant(self, data: PlantCreate) -> PlantRead:
        plant = self.repository.create(data)
        logger.info("Created plant %s", plant.id)
        return plant

    async def update_plant(self, plant_id: int, data: PlantUpdate) -> Optional[PlantRead]:
        """Merge the non-null fields of ``data`` into the stored plant.

        Returns the updated plant, or ``None`` if no plant has
        ``plant_id``; nothing is created in that case.
        """
        current = self.repository.get_by_id(plant_id)
        if current is None:
            logger.debug("Update skipped, plant %s not found", plant_id)
            return None
        changes = {}
        for field in MUTABLE_FIELDS:
            value = getattr(data, field)
            if value is not None:
                changes[field] = value
        updated = self.repository.update(current.model_copy(update=changes))
        logger.info("Updated plant %s (%s)", plant_id, ", ".join(sorted(changes)) or "no changes")
        return updated

    async def delete_plant(self, plant_id: int) -> Optional[PlantRead]:
        """Delete a plant and return its last stored state, or ``None``."""
        plant = self.repository.get_by_id(plant_id)
        if plant is None:
            logger.debug("Delete skipped, plant %s not found", plant_id)
            return None
        self.repository.delete(plant)
        logger.info("Deleted plant %s", plant_id)
        return plant

    async def search_plants(
        self,
        has_fruit: Optional[bool] = None,
        max_quantity: Optional[int] = None,
    ) -> List[PlantRead]:
        """Filter plants by fruit flag and/or a quantity upper bound (exclusive).

        With neither parameter the result is empty.
        """
        query = PlantQuery.select(has_fruit=has_fruit, max_quantity=max_quantity)
        if query is None:
            return []
        return self.repository.find(query, threshold=max_quantity)
