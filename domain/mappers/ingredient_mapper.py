"""
Ingredient domain mappers.
Handles transformation between ingredient records and DTOs.
"""

from typing import List

from domain.entities import Ingredient
from domain.schemas.ingredient_schemas import IngredientResponse


class IngredientMapper:
    """Mapper for ingredient transformations."""

    @staticmethod
    def to_response(ingredient: Ingredient) -> IngredientResponse:
        """
        Convert an Ingredient record to an IngredientResponse DTO.

        Args:
            ingredient: persisted Ingredient (id assigned)

        Returns:
            IngredientResponse DTO
        """
        return IngredientResponse(
            id=ingredient.id,
            name=ingredient.name,
            unit_of_measure=ingredient.unit_of_measure,
            description=ingredient.description,
        )

    @staticmethod
    def to_response_list(ingredients: List[Ingredient]) -> List[IngredientResponse]:
        return [IngredientMapper.to_response(i) for i in ingredients]
