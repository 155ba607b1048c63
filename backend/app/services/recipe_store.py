"""
In-memory recipe collection, loaded once at startup from a bundled JSON file.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from ..models.recipe import Recipe

log = logging.getLogger(__name__)

_recipe_list = TypeAdapter(List[Recipe])


class RecipeLoadError(Exception):
    """Raised when the recipe source cannot be read or parsed."""


def load_recipes(path: Path) -> List[Recipe]:
    log.info(f"Loading recipes from {path}")
    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        raise RecipeLoadError(f"Cannot read recipes from {path}: {e}") from e

    try:
        recipes = _recipe_list.validate_json(raw)
    except ValidationError as e:
        raise RecipeLoadError(f"Invalid recipe data in {path}: {e}") from e

    log.info(f"Loaded {len(recipes)} recipes")
    return recipes


class RecipeStore:
    """Read-only lookup over the loaded recipes."""

    def __init__(self, recipes: Sequence[Recipe]):
        self._recipes = tuple(recipes)

    @classmethod
    def from_path(cls, path: Path) -> "RecipeStore":
        return cls(load_recipes(path))

    def all(self) -> List[Recipe]:
        return list(self._recipes)

    def find(self, name: str) -> Optional[Recipe]:
        """Case-insensitive exact title match; the first match wins."""
        if name is None:
            return None
        wanted = name.casefold()
        for recipe in self._recipes:
            if recipe.title.casefold() == wanted:
                return recipe
        return None
