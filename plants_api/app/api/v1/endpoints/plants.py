"""
Plant endpoints for API v1.

These routes expose CRUD operations and a search over plants.  By
default an unknown id is not an error: ``GET`` answers with an empty
body, ``PUT`` and ``DELETE`` with ``null``.  With the
``strict_not_found`` setting enabled the three routes respond 404
instead.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query, Response, status

from plants_api.app.api.deps import get_plant_service, get_settings
from plants_api.app.core.config import Settings
from plants_api.app.schemas.plant import INT_MAX, INT_MIN, PlantCreate, PlantRead, PlantUpdate
from plants_api.app.services.plant_service import PlantService

router = APIRouter()


def _not_found(settings: Settings) -> None:
    if settings.strict_not_found:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plant not found")


@router.get("", response_model=List[PlantRead])
async def list_plants(service: PlantService = Depends(get_plant_service)) -> List[PlantRead]:
    """Return all plants ordered by id."""
    return await service.list_plants()


# Declared before ``/{plant_id}`` so "search" is never parsed as an id.
@router.get("/search", response_model=List[PlantRead])
async def search_plants(
    has_fruit: Optional[bool] = Query(None, alias="hasFruit"),
    max_quantity: Optional[int] = Query(None, alias="maxQuantity", ge=INT_MIN, le=INT_MAX),
    service: PlantService = Depends(get_plant_service),
) -> List[PlantRead]:
    """Search plants.

    - **hasFruit**: keep only plants with (``true``) or without
      (``false``) fruit.
    - **maxQuantity**: keep only plants whose quantity is strictly
      below this value.

    Without any parameter the result is an empty list.
    """
    return await service.search_plants(has_fruit=has_fruit, max_quantity=max_quantity)


@router.get("/{plant_id}", response_model=PlantRead)
async def get_plant(
    plant_id: int = Path(..., ge=INT_MIN, le=INT_MAX, description="ID of the plant"),
    service: PlantService = Depends(get_plant_service),
    settings: Settings = Depends(get_settings),
):
    """Retrieve a single plant by id; empty body if it does not exist."""
    plant = await service.get_plant(plant_id)
    if plant is None:
        _not_found(settings)
        return Response(status_code=status.HTTP_200_OK)
    return plant


@router.post("", response_model=PlantRead, status_code=status.HTTP_201_CREATED)
async def create_plant(
    plant_in: PlantCreate,
    service: PlantService = Depends(get_plant_service),
) -> PlantRead:
    """Create a new plant.  Any ``id`` in the body is ignored."""
    return await service.create_plant(plant_in)


@router.put("/{plant_id}", response_model=Optional[PlantRead])
async def update_plant(
    plant_id: int = Path(..., ge=INT_MIN, le=INT_MAX, description="ID of the plant"),
    plant_in: PlantUpdate = Body(...),
    service: PlantService = Depends(get_plant_service),
    settings: Settings = Depends(get_settings),
) -> Optional[PlantRead]:
    """Update the fields present (non-null) in the body; others are kept."""
    plant = await service.update_plant(plant_id, plant_in)
    if plant is None:
        _not_found(settings)
    return plant


@router.delete("/{plant_id}", response_model=Optional[PlantRead])
async def delete_plant(
    plant_id: int = Path(..., ge=INT_MIN, le=INT_MAX, description="ID of the plant"),
    service: PlantService = Depends(get_plant_service),
    settings: Settings = Depends(get_settings),
) -> Optional[PlantRead]:
    """Delete a plant and return it as it was before deletion."""
    plant = await service.delete_plant(plant_id)
    if plant is None:
        _not_found(settings)
    return plant
