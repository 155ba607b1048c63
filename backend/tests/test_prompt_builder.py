from backend.app.models.recipe import Recipe
from backend.app.services.prompt_builder import build_instruction_prompt


def test_pancakes_prompt(pancakes):
    prompt = build_instruction_prompt(pancakes)

    assert "Return ONLY a valid JSON array of strings." in prompt
    assert "Each array element must be one step." in prompt
    assert "Do not include numbers, titles, commentary, code fences" in prompt
    assert "Order steps from first to last." in prompt
    assert "Recipe title: Pancakes\n" in prompt
    assert "Yield: 4\n" in prompt
    assert prompt.endswith("Ingredients:\n- flour\n- egg\n- milk\n")


def test_prompt_is_deterministic(pancakes):
    assert build_instruction_prompt(pancakes) == build_instruction_prompt(pancakes)


def test_no_ingredients_placeholder():
    recipe = Recipe(title="Toast", yield_=1, ingredients=None)
    prompt = build_instruction_prompt(recipe)
    assert prompt.endswith("Ingredients:\n- (none provided)\n")


def test_empty_title_is_not_null():
    prompt = build_instruction_prompt(Recipe(title="", yield_=0))
    assert "Recipe title: \n" in prompt
    assert "None" not in prompt
    assert "Yield: 0\n" in prompt
