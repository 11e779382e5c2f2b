"""
Record store for plants.

``PlantRepository`` performs create/read/update/delete on the
``PLANTS`` table and runs the named filters from
:mod:`plants_api.app.repositories.queries`.  All statements are
parameterized.  Failures of the database surface as ``StorageError``
(raised by ``Database.cursor``) and are not retried.
"""

from __future__ import annotations

import sqlite3
from typing import List, Optional

from plants_api.app.core.db import Database
from plants_api.app.repositories.queries import PlantQuery
from plants_api.app.schemas.plant import PlantBase, PlantRead

COLUMNS = "ID, NAME, QUANTITY, WATERING_FREQUENCY, HAS_FRUIT"


class PlantRepository:
    """CRUD access to the ``PLANTS`` table."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def create(self, plant: PlantBase) -> PlantRead:
        """Insert ``plant`` under a newly generated id and return the stored row.

        ``ID`` is an ``AUTOINCREMENT`` key, so ids of deleted rows are
        never handed out again.
        """
        with self.db.cursor() as cursor:
            cursor.execute(
                """
                INSERT INTO PLANTS (NAME, QUANTITY, WATERING_FREQUENCY, HAS_FRUIT)
                VALUES (?, ?, ?, ?)
                """,
                self._values(plant),
            )
            row = cursor.execute(
                f"SELECT {COLUMNS} FROM PLANTS WHERE ID = ?",
                (cursor.lastrowid,),
            ).fetchone()
        return self._row_to_plant(row)

    def get_by_id(self, plant_id: int) -> Optional[PlantRead]:
        with self.db.cursor() as cursor:
            row = cursor.execute(
                f"SELECT {COLUMNS} FROM PLANTS WHERE ID = ?",
                (plant_id,),
            ).fetchone()
        if not row:
            return None
        return self._row_to_plant(row)

    def list_all(self) -> List[PlantRead]:
        with self.db.cursor() as cursor:
            rows = cursor.execute(f"SELECT {COLUMNS} FROM PLANTS ORDER BY ID").fetchall()
        return [self._row_to_plant(row) for row in rows]

    def update(self, plant: PlantRead) -> PlantRead:
        """Persist every field of ``plant`` under its id.

        Inserts the row if the id is not present yet (upsert).
        """
        with self.db.cursor() as cursor:
            cursor.execute(
                """
                INSERT INTO PLANTS (ID, NAME, QUANTITY, WATERING_FREQUENCY, HAS_FRUIT)
                VALUES (?, ?, ?, ?, ?)
                ON CONFLICT(ID) DO UPDATE SET
                    NAME = excluded.NAME,
                    QUANTITY = excluded.QUANTITY,
                    WATERING_FREQUENCY = excluded.WATERING_FREQUENCY,
                    HAS_FRUIT = excluded.HAS_FRUIT
                """,
                (plant.id, *self._values(plant)),
            )
            row = cursor.execute(
                f"SELECT {COLUMNS} FROM PLANTS WHERE ID = ?",
                (plant.id,),
            ).fetchone()
        return self._row_to_plant(row)

    def delete(self, plant: PlantRead) -> None:
        """Remove the row with ``plant.id``.  Missing rows are not reported."""
        with self.db.cursor() as cursor:
            cursor.execute("DELETE FROM PLANTS WHERE ID = ?", (plant.id,))

    def find(self, query: PlantQuery, threshold: Optional[int] = None) -> List[PlantRead]:
        """Run one of the named filters, ordered by id."""
        params: tuple = ()
        if query.needs_threshold:
            if threshold is None:
                raise ValueError(f"Query {query.value} requires a quantity threshold")
            params = (threshold,)
        with self.db.cursor() as cursor:
            rows = cursor.execute(
                f"SELECT {COLUMNS} FROM PLANTS WHERE {query.where} ORDER BY ID",
                params,
            ).fetchall()
        return [self._row_to_plant(row) for row in rows]

    @staticmethod
    def _values(plant: PlantBase) -> tuple:
        has_fruit = int(plant.has_fruit) if plant.has_fruit is not None else None
        return (plant.name, plant.quantity, plant.watering_frequency, has_fruit)

    @staticmethod
    def _row_to_plant(row: sqlite3.Row) -> PlantRead:
        """Convert a database row to a PlantRead schema instance."""
        has_fruit = bool(row["HAS_FRUIT"]) if row["HAS_FRUIT"] is not None else None
        return PlantRead(
            id=row["ID"],
            name=row["NAME"],
            quantity=row["QUANTITY"],
            watering_frequency=row["WATERING_FREQUENCY"],
            has_fruit=has_fruit,
        )
