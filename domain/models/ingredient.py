"""
Ingredient model - the ingredient catalogue table.
"""

from sqlalchemy import Column, Integer, String

from domain.entities import (
    NAME_MAX_LENGTH,
    UNIT_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
)
from domain.models.database import Base


class IngredientRow(Base):
    """
    ORM mapping of the Ingredients table.

    Rows never leave the repository layer; services work with the immutable
    ``domain.entities.Ingredient`` record instead. Name uniqueness is checked
    by the service, so there is no unique constraint on Nombre.
    """

    __tablename__ = "Ingredients"
    # SQLite would otherwise hand out the id of a deleted last row again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column("Id", Integer, primary_key=True, autoincrement=True)
    name = Column("Nombre", String(NAME_MAX_LENGTH), nullable=False)
    unit_of_measure = Column("UnidadMed", String(UNIT_MAX_LENGTH), nullable=True)
    description = Column("Descripcion", String(DESCRIPTION_MAX_LENGTH), nullable=True)

    def __repr__(self):
        return f"<IngredientRow(id={self.id}, name='{self.name}')>"
