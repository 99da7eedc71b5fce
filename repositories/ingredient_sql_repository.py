"""
Ingredient SQL Repository - Data access layer for the Ingredients table
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from app.exceptions import NotFoundError
from domain.entities import Ingredient, normalize_name
from domain.models.ingredient import IngredientRow
from repositories.base import BaseRepository
from repositories.ingredient_repository import IngredientStore


class IngredientSQLRepository(BaseRepository[IngredientRow], IngredientStore):
    """Repository for ingredient data in the relational store"""

    def __init__(self, db: Session):
        super().__init__(db, IngredientRow)

    @staticmethod
    def _to_entity(row: IngredientRow) -> Ingredient:
        return Ingredient(
            id=row.id,
            name=row.name,
            unit_of_measure=row.unit_of_measure,
            description=row.description,
        )

    def _get_row(self, ingredient_id: int) -> Optional[IngredientRow]:
        return (
            self.db.query(IngredientRow)
            .filter(IngredientRow.id == ingredient_id)
            .first()
        )

    def list_all(self) -> List[Ingredient]:
        """Get all ingredients ordered by id"""
        with self.store_operation("list_all"):
            rows = self.db.query(IngredientRow).order_by(IngredientRow.id).all()
        return [self._to_entity(row) for row in rows]

    def find_by_id(self, ingredient_id: int) -> Optional[Ingredient]:
        """Get ingredient by ID"""
        with self.store_operation("find_by_id"):
            row = self._get_row(ingredient_id)
        return self._to_entity(row) if row else None

    def exists_by_name_case_insensitive(
        self, name: str, exclude_id: Optional[int] = None
    ) -> bool:
        """
        Check for an ingredient with the same name (case-insensitive).

        Names are folded in Python rather than with SQL lower(), whose
        handling of non-ASCII letters depends on the database and its locale.
        """
        query = self.db.query(IngredientRow.name)
        if exclude_id is not None:
            query = query.filter(IngredientRow.id != exclude_id)

        with self.store_operation("exists_by_name"):
            stored_names = [row.name for row in query.all()]

        key = normalize_name(name)
        return any(normalize_name(stored) == key for stored in stored_names)

    def insert(self, record: Ingredient) -> Ingredient:
        """Create new ingredient; the database assigns the id"""
        row = IngredientRow(
            name=record.name,
            unit_of_measure=record.unit_of_measure,
            description=record.description,
        )
        with self.store_operation("insert"):
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        return self._to_entity(row)

    def update(self, record: Ingredient) -> Ingredient:
        """Overwrite name, unit of measure and description of an existing ingredient"""
        with self.store_operation("update"):
            row = self._get_row(record.id)
            if row is None:
                raise NotFoundError(f"Ingredient {record.id} not found")

            row.name = record.name
            row.unit_of_measure = record.unit_of_measure
            row.description = record.description
            self.db.commit()
            self.db.refresh(row)
        return self._to_entity(row)

    def delete(self, ingredient_id: int) -> bool:
        """Delete ingredient by ID"""
        with self.store_operation("delete"):
            row = self._get_row(ingredient_id)
            if row is None:
                return False
            self.db.delete(row)
            self.db.commit()
        return True
