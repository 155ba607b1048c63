from ..models.recipe import Recipe

INSTRUCTION_PREAMBLE = (
    "You are an expert chef.\n"
    "Create clear, complete cooking instructions for the recipe below.\n"
    "Return ONLY a valid JSON array of strings.\n"
    "Each array element must be one step.\n"
    "Do not include numbers, titles, commentary, code fences, or any text outside the JSON array.\n"
    "Order steps from first to last.\n\n"
)

NO_INGREDIENTS_LINE = "- (none provided)\n"


def build_instruction_prompt(recipe: Recipe) -> str:
    """Build a constrained instruction-generation prompt for ``recipe``."""
    lines = [
        INSTRUCTION_PREAMBLE,
        f"Recipe title: {recipe.title or ''}\n",
        f"Yield: {recipe.yield_}\n",
        "Ingredients:\n",
    ]
    if recipe.ingredients:
        lines.extend(f"- {ingredient}\n" for ingredient in recipe.ingredients)
    else:
        lines.append(NO_INGREDIENTS_LINE)
    return "".join(lines)
