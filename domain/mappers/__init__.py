"""
Domain mappers package.
Handles transformation between domain records and DTOs (Data Transfer Objects).
"""

from domain.mappers.ingredient_mapper import IngredientMapper

__all__ = ["IngredientMapper"]
