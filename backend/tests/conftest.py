import pytest

from backend.app.models.recipe import Recipe
from backend.app.services.recipe_store import RecipeStore


class FakeGenerator:
    """Records prompts and replies with a canned response."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def pancakes():
    return Recipe(title="Pancakes", **{"yield": 4}, ingredients=["flour", "egg", "milk"])


@pytest.fixture
def store(pancakes):
    return RecipeStore([
        pancakes,
        Recipe(title="Tomato Soup", yield_=6, ingredients=["tomatoes", "onion"]),
        Recipe(title="Toast", yield_=1),
    ])


@pytest.fixture
def make_generator():
    return FakeGenerator
