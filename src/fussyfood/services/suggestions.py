"""Random meal suggestions drawn from filtered Food Store lookups."""

import logging
import random
from collections.abc import Collection
from dataclasses import dataclass, field

from fussyfood.domain.errors import NoFoodFoundError
from fussyfood.domain.foods import DietaryFlags, Food, MealType
from fussyfood.services.foods import FoodRepository

_logger = logging.getLogger(__name__)


@dataclass
class SuggestionService:
    """Picks foods for a meal according to its category policy."""

    repository: FoodRepository
    rng: random.Random = field(default_factory=random.Random)

    def suggest_one(self, candidates: Collection[Food], category: str = "food") -> Food:
        """Pick one candidate uniformly at random."""
        if not candidates:
            raise NoFoodFoundError(category)
        return self.rng.choice(list(candidates))

    def suggest_meal(
        self, meal_type: MealType, flags: DietaryFlags, toddler_only: bool
    ) -> list[Food]:
        """Return one pick per category of the meal, in policy order.

        Picks for optional categories are dropped when nothing matches, so a
        main meal may yield zero, one or two foods. A snack requires its fruit
        and raises ``NoFoodFoundError`` otherwise.
        """
        policy = meal_type.policy
        picks: list[Food] = []
        for category in policy.categories:
            candidates = self.repository.find_foods(
                category,
                vegetarian=flags.vegetarian,
                vegan=flags.vegan,
                pescatarian=flags.pescatarian,
                toddler_only=toddler_only,
            )
            try:
                picks.append(self.suggest_one(candidates, category))
            except NoFoodFoundError:
                if policy.required:
                    raise
                _logger.debug(
                    "No %s candidate for %s, omitting", category, meal_type.value
                )
        return picks
