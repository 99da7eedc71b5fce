"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

import logging
from contextlib import contextmanager
from typing import Generic, Iterator, TypeVar, Type
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from abc import ABC

from app.exceptions import StoreError

ModelType = TypeVar("ModelType")

logger = logging.getLogger("recetarre.repository")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository holding the session and ORM model.
    All SQL repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    @contextmanager
    def store_operation(self, operation: str) -> Iterator[None]:
        """
        Run a block of session work, translating database failures.

        Any SQLAlchemy error rolls the session back and is re-raised as
        StoreError so no partial write survives the failed request.

        Args:
            operation: short name used in logs and the error message
        """
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(
                f"store_operation_failed model={self.model.__name__} "
                f"operation={operation} error={e}"
            )
            raise StoreError(
                f"Ingredient store failed during {operation}",
                details={"operation": operation},
            ) from e
