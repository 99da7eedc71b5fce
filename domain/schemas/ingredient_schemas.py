from pydantic import BaseModel, Field
from typing import Optional

from domain.entities import (
    NAME_MIN_LENGTH,
    NAME_MAX_LENGTH,
    UNIT_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
)


class IngredientCreate(BaseModel):
    """Schema for creating a new ingredient"""

    name: str = Field(
        ...,
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
        description="Ingredient name, unique ignoring case",
    )
    unit_of_measure: Optional[str] = Field(
        None,
        max_length=UNIT_MAX_LENGTH,
        description="Unit of measurement (e.g., 'g', 'kg', 'ml', 'pieces')",
    )
    description: Optional[str] = Field(
        None, max_length=DESCRIPTION_MAX_LENGTH, description="Short description"
    )


class IngredientUpdate(IngredientCreate):
    """Schema for replacing the editable fields of an ingredient"""


class IngredientResponse(BaseModel):
    """Schema for ingredient response"""

    id: int
    name: str
    unit_of_measure: Optional[str] = None
    description: Optional[str] = None
