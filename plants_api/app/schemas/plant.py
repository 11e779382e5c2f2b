"""
Pydantic models for plant data.

``PlantBase`` holds the four mutable fields, all optional.  JSON
payloads use camelCase names (``wateringFrequency``, ``hasFruit``);
the snake_case attribute names are accepted on input as well.
``PlantRead`` adds the store-generated ``id`` for responses.
"""

from typing import Optional

from pydantic import BaseModel, Field

# Integer columns hold 32-bit values; larger numbers are rejected with 422.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class PlantBase(BaseModel):
    name: Optional[str] = Field(None, examples=["Fern"])
    quantity: Optional[int] = Field(None, ge=INT_MIN, le=INT_MAX, examples=[5])
    watering_frequency: Optional[int] = Field(
        None,
        alias="wateringFrequency",
        ge=INT_MIN,
        le=INT_MAX,
        description="Days between watering",
        examples=[3],
    )
    has_fruit: Optional[bool] = Field(None, alias="hasFruit", examples=[False])

    model_config = {
        "populate_by_name": True,
    }


class PlantCreate(PlantBase):
    """Schema for creating a plant.

    An ``id`` sent by the client is ignored; the store assigns one.
    """
    pass


class PlantUpdate(PlantBase):
    """Schema for updating a plant.

    Only non-null fields are applied; missing or null fields keep
    their stored value.
    """
    pass


class PlantRead(PlantBase):
    """Schema for reading a plant from the API."""

    id: int
