"""
Domain layer - Business entities, models, schemas, and mappers.
"""

from domain import entities, models, schemas

__all__ = ["entities", "models", "schemas"]
