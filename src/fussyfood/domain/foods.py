"""Domain models for foods, diets and meals."""

from dataclasses import dataclass
from enum import Enum


class FoodCategory:
    """Food categories stored in the ``food_type`` column."""

    FRUIT = "fruit"
    VEGETABLE = "vegetable"


@dataclass(frozen=True)
class Food:
    """Represents a food stored in the Food Store."""

    id: int
    name: str
    category: str
    toddler_approved: bool
    is_vegetarian: bool
    is_vegan: bool
    is_pescatarian: bool


class AllergyTag(Enum):
    """Allergy tags recognised by the Food Store."""

    DAIRY = "dairy"
    EGGS = "eggs"
    PEANUTS = "peanuts"
    TREE_NUTS = "tree_nuts"
    SOY = "soy"
    WHEAT = "wheat"
    FISH = "fish"
    SHELLFISH = "shellfish"
    SESAME = "sesame"

    @property
    def label(self) -> str:
        """Return a human-readable label."""
        return self.value.replace("_", " ").capitalize()

    @classmethod
    def parse(cls, raw: str) -> "AllergyTag":
        """Parse a stored allergy value, tolerating case and spaces."""
        return cls(raw.strip().lower().replace(" ", "_"))


@dataclass(frozen=True)
class DietaryFlags:
    """Boolean filters derived from a dietary restriction."""

    vegetarian: bool = False
    vegan: bool = False
    pescatarian: bool = False


class DietaryRestriction(Enum):
    """Named dietary restrictions accepted on the command line."""

    NONE = "none"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    PESCATARIAN = "pescatarian"

    def flags(self) -> DietaryFlags:
        """Return the filter flags for this restriction."""
        return _DIET_FLAGS[self]


_DIET_FLAGS: dict[DietaryRestriction, DietaryFlags] = {
    DietaryRestriction.NONE: DietaryFlags(),
    DietaryRestriction.VEGETARIAN: DietaryFlags(vegetarian=True),
    DietaryRestriction.VEGAN: DietaryFlags(vegetarian=True, vegan=True),
    DietaryRestriction.PESCATARIAN: DietaryFlags(pescatarian=True),
}


class MealType(Enum):
    """Meal contexts a suggestion can be requested for."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"

    @property
    def policy(self) -> "MealPolicy":
        """Return the category policy for this meal."""
        return _MEAL_POLICIES[self]


@dataclass(frozen=True)
class MealPolicy:
    """Which categories a meal draws from and whether each pick is required."""

    categories: tuple[str, ...]
    required: bool


_MAIN_MEAL = MealPolicy(
    categories=(FoodCategory.FRUIT, FoodCategory.VEGETABLE), required=False
)

_MEAL_POLICIES: dict[MealType, MealPolicy] = {
    MealType.BREAKFAST: _MAIN_MEAL,
    MealType.LUNCH: _MAIN_MEAL,
    MealType.DINNER: _MAIN_MEAL,
    MealType.SNACK: MealPolicy(categories=(FoodCategory.FRUIT,), required=True),
}


@dataclass(frozen=True)
class Suggestion:
    """A suggested food together with its allergens."""

    food: Food
    allergens: frozenset[AllergyTag]
