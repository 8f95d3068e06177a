"""Food Store persistence interface."""

from typing import Protocol

from fussyfood.domain.foods import Food


class FoodRepository(Protocol):
    """Read-only interface to the Food Store."""

    def find_foods(  # noqa: PLR0913
        self,
        category: str,
        *,
        vegetarian: bool,
        vegan: bool,
        pescatarian: bool,
        toddler_only: bool,
    ) -> set[Food]:
        """Return foods in a category matching every active filter."""

    def list_allergies(self, food_id: int) -> list[str]:
        """Return raw allergy values recorded for a food."""
