from fastapi import APIRouter, Depends, HTTPException, Request
import logging
from typing import List

from ..models.recipe import Recipe
from ..services.generation_client import GenerationError, GenerationTimeoutError
from ..services.recipe_service import RecipeService

log = logging.getLogger(__name__)
router = APIRouter(prefix="/recipe", tags=["recipes"])


def get_recipe_service(request: Request) -> RecipeService:
    """Shared RecipeService built at startup."""
    return request.app.state.recipe_service


@router.get("", response_model=List[Recipe], response_model_by_alias=True)
def list_recipes(service: RecipeService = Depends(get_recipe_service)):
    """Get all recipes"""
    log.info("Get all recipes")
    return service.get_recipes()


@router.get("/{recipe_name}", response_model=Recipe, response_model_by_alias=True)
def get_recipe(recipe_name: str, service: RecipeService = Depends(get_recipe_service)):
    """Get recipe by name"""
    log.info(f"Get recipe: {recipe_name}")
    recipe = service.get_recipe(recipe_name)
    if recipe is None:
        raise HTTPException(status_code=404, detail=f"Recipe not found: {recipe_name}")
    return recipe


@router.get("/{recipe_name}/instructions", response_model=List[str])
def get_recipe_instructions(recipe_name: str, service: RecipeService = Depends(get_recipe_service)):
    """Get recipe instructions by name"""
    log.info(f"Get recipe instructions for: {recipe_name}")
    try:
        return service.get_instructions(recipe_name)
    except GenerationTimeoutError as e:
        log.error(f"Instruction generation timed out for {recipe_name}: {e}")
        raise HTTPException(status_code=504, detail="Instruction generation timed out")
    except GenerationError as e:
        log.error(f"Instruction generation unavailable for {recipe_name}: {e}")
        raise HTTPException(status_code=503, detail="Instruction generation unavailable")
