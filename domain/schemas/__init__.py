"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.ingredient_schemas import (
    IngredientCreate,
    IngredientUpdate,
    IngredientResponse,
)

__all__ = [
    # Ingredient schemas
    "IngredientCreate",
    "IngredientUpdate",
    "IngredientResponse",
]
