"""Ingredient service - ingredient catalogue management."""

from dataclasses import replace
from typing import List, Optional
import logging

from app.exceptions import (
    DuplicateNameError,
    NotFoundError,
    ServiceValidationError,
    UnauthenticatedError,
)
from domain.entities import (
    Ingredient,
    NAME_MIN_LENGTH,
    NAME_MAX_LENGTH,
    UNIT_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
)
from repositories.ingredient_repository import IngredientStore

logger = logging.getLogger("recetarre.ingredient")


class IngredientService:
    """
    Business logic for the ingredient catalogue.

    Every mutation requires an explicit caller identity and keeps ingredient
    names unique ignoring case. The check and the write are separate store
    calls, so two concurrent writers with the same name can both succeed.
    """

    def __init__(self, store: IngredientStore):
        self.store = store

    def list(self) -> List[Ingredient]:
        """Return all ingredients."""
        return self.store.list_all()

    def get(self, ingredient_id: int) -> Ingredient:
        """Return one ingredient or raise NotFoundError."""
        ingredient = self.store.find_by_id(ingredient_id)
        if ingredient is None:
            logger.warning(f"ingredient_not_found id={ingredient_id}")
            raise NotFoundError(f"Ingredient {ingredient_id} not found")
        return ingredient

    def create(
        self,
        name: str,
        unit_of_measure: Optional[str],
        description: Optional[str],
        caller_identity: Optional[str],
    ) -> Ingredient:
        """
        Create a new ingredient.

        Raises:
            UnauthenticatedError: caller_identity is empty
            ServiceValidationError: a field breaks the length rules
            DuplicateNameError: the name is already taken (case-insensitive)
        """
        self._require_caller(caller_identity)
        self._validate_fields(name, unit_of_measure, description)

        if self.store.exists_by_name_case_insensitive(name):
            logger.info(f"ingredient_duplicate_name name={name!r}")
            raise DuplicateNameError(details={"name": name})

        ingredient = self.store.insert(
            Ingredient(
                name=name,
                unit_of_measure=unit_of_measure,
                description=description,
            )
        )
        logger.info(
            f"ingredient_created id={ingredient.id} name={ingredient.name!r} "
            f"caller={caller_identity}"
        )
        return ingredient

    def update(
        self,
        ingredient_id: int,
        name: str,
        unit_of_measure: Optional[str],
        description: Optional[str],
        caller_identity: Optional[str],
    ) -> Ingredient:
        """
        Overwrite name, unit of measure and description of an ingredient.

        The duplicate check only runs when the name changes other than by
        case, and never counts the ingredient itself.
        """
        self._require_caller(caller_identity)
        existing = self.get(ingredient_id)
        self._validate_fields(name, unit_of_measure, description)

        if not existing.has_same_name(name) and self.store.exists_by_name_case_insensitive(
            name, exclude_id=ingredient_id
        ):
            logger.info(
                f"ingredient_duplicate_name name={name!r} id={ingredient_id}"
            )
            raise DuplicateNameError(details={"name": name})

        updated = self.store.update(
            replace(
                existing,
                name=name,
                unit_of_measure=unit_of_measure,
                description=description,
            )
        )
        logger.info(
            f"ingredient_updated id={ingredient_id} name={updated.name!r} "
            f"caller={caller_identity}"
        )
        return updated

    def delete(self, ingredient_id: int, caller_identity: Optional[str]) -> None:
        """Delete an ingredient (hard delete)."""
        self._require_caller(caller_identity)
        self.get(ingredient_id)
        self.store.delete(ingredient_id)
        logger.info(f"ingredient_deleted id={ingredient_id} caller={caller_identity}")

    @staticmethod
    def _require_caller(caller_identity: Optional[str]) -> None:
        if not caller_identity:
            logger.warning("ingredient_mutation_rejected reason=unauthenticated")
            raise UnauthenticatedError()

    @staticmethod
    def _validate_fields(
        name: str, unit_of_measure: Optional[str], description: Optional[str]
    ) -> None:
        errors = {}
        if not name or not name.strip():
            errors["name"] = "Name is required"
        elif not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
            errors["name"] = (
                f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
            )
        if unit_of_measure is not None and len(unit_of_measure) > UNIT_MAX_LENGTH:
            errors["unit_of_measure"] = (
                f"Unit of measure must be at most {UNIT_MAX_LENGTH} characters"
            )
        if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
            errors["description"] = (
                f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters"
            )

        if errors:
            raise ServiceValidationError("Invalid ingredient data", details=errors)
