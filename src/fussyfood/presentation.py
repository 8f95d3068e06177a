"""Plain-text rendering of meal suggestions."""

from collections.abc import Iterable, Sequence

from fussyfood.domain.foods import (
    AllergyTag,
    DietaryRestriction,
    Food,
    MealType,
    Suggestion,
)


def _yes_no(value: bool) -> str:
    return "Yes" if value else "No"


def format_food(food: Food, allergens: Iterable[AllergyTag]) -> str:
    """Render a single food and its allergens."""
    lines = [
        f"Name: {food.name}",
        f"Category: {food.category}",
        f"Vegetarian: {_yes_no(food.is_vegetarian)}",
        f"Vegan: {_yes_no(food.is_vegan)}",
        f"Pescatarian: {_yes_no(food.is_pescatarian)}",
    ]
    if not food.toddler_approved:
        lines.append("Warning: not toddler-approved")
    labels = sorted(tag.label for tag in allergens)
    if labels:
        lines.append("Allergens:")
        lines.extend(f"  - {label}" for label in labels)
    return "\n".join(lines)


def format_meal(
    meal_type: MealType,
    suggestions: Sequence[Suggestion],
    *,
    toddler_only: bool,
    restriction: DietaryRestriction,
) -> str:
    """Render a meal as numbered options under a header line."""
    audience = "toddler" if toddler_only else "family"
    header = (
        f"{meal_type.value.capitalize()} suggestions "
        f"({audience}, diet: {restriction.value})"
    )
    if not suggestions:
        return f"{header}\nNo foods match these filters."
    blocks = [header]
    for index, suggestion in enumerate(suggestions, start=1):
        blocks.append(
            f"Option {index}\n{format_food(suggestion.food, suggestion.allergens)}"
        )
    return "\n\n".join(blocks)
