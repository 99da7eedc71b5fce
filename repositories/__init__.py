"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.ingredient_repository import IngredientStore
from repositories.ingredient_sql_repository import IngredientSQLRepository

__all__ = [
    "BaseRepository",
    "IngredientStore",
    "IngredientSQLRepository",
]
