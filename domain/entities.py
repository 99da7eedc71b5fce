"""
Domain entities - immutable value records passed between services and stores.
"""

from dataclasses import dataclass
from typing import Optional

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 20
UNIT_MAX_LENGTH = 20
DESCRIPTION_MAX_LENGTH = 30


def normalize_name(name: str) -> str:
    """Key used for case-insensitive name comparison; folded in Python only."""
    return name.casefold()


@dataclass(frozen=True)
class Ingredient:
    """An ingredient of the catalogue.

    ``id`` is None until the store assigns one on insert.
    """

    name: str
    unit_of_measure: Optional[str] = None
    description: Optional[str] = None
    id: Optional[int] = None

    def has_same_name(self, other_name: str) -> bool:
        return normalize_name(self.name) == normalize_name(other_name)
