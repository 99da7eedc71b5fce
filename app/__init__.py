"""
App package - Application configuration and core utilities.
Contains settings, exceptions, identity lookup and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    ServiceError,
    ServiceValidationError,
    DuplicateNameError,
    NotFoundError,
    UnauthenticatedError,
    StoreError,
)

__all__ = [
    "settings",
    "ServiceError",
    "ServiceValidationError",
    "DuplicateNameError",
    "NotFoundError",
    "UnauthenticatedError",
    "StoreError",
]
