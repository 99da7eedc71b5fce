"""
Ingredient store contract - the persistence interface the ingredient service depends on.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from domain.entities import Ingredient


class IngredientStore(ABC):
    """
    Persistence abstraction over ingredient records.

    Implementations take and return plain ``Ingredient`` values; nothing is
    change-tracked between calls. Every method may raise StoreError when the
    underlying storage fails.
    """

    @abstractmethod
    def list_all(self) -> List[Ingredient]:
        """Return every ingredient in storage order."""

    @abstractmethod
    def find_by_id(self, ingredient_id: int) -> Optional[Ingredient]:
        """Return the ingredient with this id, or None."""

    @abstractmethod
    def exists_by_name_case_insensitive(
        self, name: str, exclude_id: Optional[int] = None
    ) -> bool:
        """
        Check whether any ingredient already uses this name, ignoring case.

        Args:
            name: candidate name
            exclude_id: id to leave out of the check (the record being renamed)
        """

    @abstractmethod
    def insert(self, record: Ingredient) -> Ingredient:
        """Persist a new ingredient and return it with its assigned id."""

    @abstractmethod
    def update(self, record: Ingredient) -> Ingredient:
        """Overwrite the mutable fields of the ingredient identified by ``record.id``."""

    @abstractmethod
    def delete(self, ingredient_id: int) -> bool:
        """Remove the ingredient. Returns False if there was nothing to remove."""
