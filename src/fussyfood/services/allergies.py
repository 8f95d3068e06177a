"""Allergen lookups for suggested foods."""

from dataclasses import dataclass

from fussyfood.domain.errors import FoodQueryError
from fussyfood.domain.foods import AllergyTag
from fussyfood.services.foods import FoodRepository


@dataclass
class AllergyService:
    """Resolves allergy tags for foods."""

    repository: FoodRepository

    def allergens_for(self, food_id: int) -> set[AllergyTag]:
        """Return the allergens recorded for a food, empty when none are."""
        tags: set[AllergyTag] = set()
        for raw in self.repository.list_allergies(food_id):
            try:
                tags.add(AllergyTag.parse(raw))
            except ValueError as exc:
                raise FoodQueryError(
                    f"Unknown allergy tag {raw!r} for food {food_id}"
                ) from exc
        return tags
