"""
API dependencies for dependency injection
"""

from typing import Generator, Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.identity import resolve_caller_identity
from domain.models import get_db_session
from repositories import IngredientSQLRepository
from services.ingredient_service import IngredientService

# Bearer token scheme; missing credentials are left for the service to reject
bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_caller_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    """Resolve the caller from the Authorization header, or None when unresolved."""
    if credentials is None:
        return None
    return resolve_caller_identity(credentials.credentials)


def get_ingredient_service(db: Session = Depends(get_db)) -> IngredientService:
    """Ingredient service bound to the request's database session."""
    return IngredientService(IngredientSQLRepository(db))
