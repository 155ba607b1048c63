import logging
from typing import List, Optional

from ..models.recipe import Recipe
from .generation_client import GenerationClient
from .instruction_parser import InstructionParser
from .prompt_builder import build_instruction_prompt
from .recipe_store import RecipeStore

log = logging.getLogger(__name__)


class RecipeService:
    def __init__(self, store: RecipeStore, generator: GenerationClient):
        self.store = store
        self.generator = generator

    def get_recipes(self) -> List[Recipe]:
        return self.store.all()

    def get_recipe(self, name: str) -> Optional[Recipe]:
        return self.store.find(name)

    def get_instructions(self, name: str) -> List[str]:
        """
        Generate ordered cooking steps for the named recipe.

        Unknown recipes give an empty list without calling the model.
        Generation errors are not caught here.
        """
        recipe = self.store.find(name)
        if recipe is None:
            log.info(f"No recipe named '{name}', returning no instructions")
            return []

        prompt = build_instruction_prompt(recipe)
        raw = self.generator.generate(prompt)
        log.info(f"Gemini response: {raw}")
        return InstructionParser.parse_steps(raw)
