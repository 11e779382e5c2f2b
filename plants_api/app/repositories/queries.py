"""
Named filters over the ``PLANTS`` table.

``PlantQuery`` enumerates the five fixed searches the API supports.
Each member maps to a literal, parameterized ``WHERE`` clause; members
comparing ``QUANTITY`` take the threshold as their single parameter.
Comparisons are strict ("less than") and rows with a NULL in a
filtered column never match.
"""

from enum import Enum
from typing import Optional


class PlantQuery(str, Enum):
    HAS_FRUIT = "has_fruit"
    NO_FRUIT = "no_fruit"
    QUANTITY_BELOW = "quantity_below"
    HAS_FRUIT_QUANTITY_BELOW = "has_fruit_quantity_below"
    NO_FRUIT_QUANTITY_BELOW = "no_fruit_quantity_below"

    @property
    def where(self) -> str:
        return _WHERE_CLAUSES[self]

    @property
    def needs_threshold(self) -> bool:
        return self in _THRESHOLD_QUERIES

    @classmethod
    def select(
        cls,
        has_fruit: Optional[bool] = None,
        max_quantity: Optional[int] = None,
    ) -> Optional["PlantQuery"]:
        """Pick the query matching the supplied search parameters.

        Returns ``None`` when neither parameter is given, in which case
        the caller answers with an empty result without touching the
        database.
        """
        if has_fruit is not None and max_quantity is not None:
            return cls.HAS_FRUIT_QUANTITY_BELOW if has_fruit else cls.NO_FRUIT_QUANTITY_BELOW
        if has_fruit is not None:
            return cls.HAS_FRUIT if has_fruit else cls.NO_FRUIT
        if max_quantity is not None:
            return cls.QUANTITY_BELOW
        return None


_WHERE_CLAUSES = {
    PlantQuery.HAS_FRUIT: "HAS_FRUIT = 1",
    PlantQuery.NO_FRUIT: "HAS_FRUIT = 0",
    PlantQuery.QUANTITY_BELOW: "QUANTITY < ?",
    PlantQuery.HAS_FRUIT_QUANTITY_BELOW: "HAS_FRUIT = 1 AND QUANTITY < ?",
    PlantQuery.NO_FRUIT_QUANTITY_BELOW: "HAS_FRUIT = 0 AND QUANTITY < ?",
}

_THRESHOLD_QUERIES = frozenset(
    {
        PlantQuery.QUANTITY_BELOW,
        PlantQuery.HAS_FRUIT_QUANTITY_BELOW,
        PlantQuery.NO_FRUIT_QUANTITY_BELOW,
    }
)
