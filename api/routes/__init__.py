"""API routes package"""

from . import ingredients, health

__all__ = ["ingredients", "health"]
