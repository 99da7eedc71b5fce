"""Ingredient catalogue routes"""

from fastapi import APIRouter, Depends, Request, Response, status
from typing import List, Optional

from api.dependencies import get_caller_identity, get_ingredient_service
from api.responses import APIResponse
from domain.mappers import IngredientMapper
from domain.schemas.ingredient_schemas import (
    IngredientCreate,
    IngredientUpdate,
    IngredientResponse,
)
from services.ingredient_service import IngredientService

router = APIRouter(prefix="/ingredients", tags=["Ingredients"])


@router.get("", response_model=List[IngredientResponse])
def list_ingredients(service: IngredientService = Depends(get_ingredient_service)):
    """Return every ingredient"""
    return IngredientMapper.to_response_list(service.list())


@router.get("/{ingredient_id}", response_model=IngredientResponse)
def get_ingredient(
    ingredient_id: int, service: IngredientService = Depends(get_ingredient_service)
):
    """Get a single ingredient"""
    return IngredientMapper.to_response(service.get(ingredient_id))


@router.post(
    "", response_model=IngredientResponse, status_code=status.HTTP_201_CREATED
)
def create_ingredient(
    payload: IngredientCreate,
    request: Request,
    response: Response,
    service: IngredientService = Depends(get_ingredient_service),
    caller: Optional[str] = Depends(get_caller_identity),
):
    """
    Create an ingredient. Requires a bearer token.

    Names are unique ignoring case: "Flour" and "FLOUR" cannot coexist.
    The Location header points at the new resource.
    """
    ingredient = service.create(
        payload.name, payload.unit_of_measure, payload.description, caller
    )
    response.headers["Location"] = str(
        request.url_for("get_ingredient", ingredient_id=ingredient.id)
    )
    return IngredientMapper.to_response(ingredient)


@router.put("/{ingredient_id}", response_model=APIResponse[IngredientResponse])
def update_ingredient(
    ingredient_id: int,
    payload: IngredientUpdate,
    service: IngredientService = Depends(get_ingredient_service),
    caller: Optional[str] = Depends(get_caller_identity),
):
    """Replace name, unit of measure and description of an ingredient. Requires a bearer token."""
    ingredient = service.update(
        ingredient_id,
        payload.name,
        payload.unit_of_measure,
        payload.description,
        caller,
    )
    return APIResponse[IngredientResponse](
        success=True,
        message="Ingredient updated successfully",
        data=IngredientMapper.to_response(ingredient),
    )


@router.delete("/{ingredient_id}", response_model=APIResponse)
def delete_ingredient(
    ingredient_id: int,
    service: IngredientService = Depends(get_ingredient_service),
    caller: Optional[str] = Depends(get_caller_identity),
):
    """Delete an ingredient. Requires a bearer token."""
    service.delete(ingredient_id, caller)
    return APIResponse(success=True, message="Ingredient deleted")
