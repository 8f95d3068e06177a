"""Shared test fixtures."""

import random
from dataclasses import dataclass, field

import pytest

from fussyfood.config import Settings
from fussyfood.containers import AppContainer
from fussyfood.domain.foods import Food, FoodCategory
from fussyfood.services.allergies import AllergyService
from fussyfood.services.foods import FoodRepository
from fussyfood.services.suggestions import SuggestionService


def make_food(  # noqa: PLR0913
    food_id: int,
    name: str,
    category: str = FoodCategory.FRUIT,
    *,
    toddler_approved: bool = True,
    vegetarian: bool = True,
    vegan: bool = True,
    pescatarian: bool = True,
) -> Food:
    return Food(
        id=food_id,
        name=name,
        category=category,
        toddler_approved=toddler_approved,
        is_vegetarian=vegetarian,
        is_vegan=vegan,
        is_pescatarian=pescatarian,
    )


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory Food Store for tests."""

    foods: list[Food] = field(default_factory=list)
    allergies: dict[int, list[str]] = field(default_factory=dict)
    queries: list[str] = field(default_factory=list)
    allergy_lookups: list[int] = field(default_factory=list)

    def find_foods(  # noqa: PLR0913
        self,
        category: str,
        *,
        vegetarian: bool,
        vegan: bool,
        pescatarian: bool,
        toddler_only: bool,
    ) -> set[Food]:
        self.queries.append(category)
        return {
            food
            for food in self.foods
            if food.category == category
            and (not vegetarian or food.is_vegetarian)
            and (not vegan or food.is_vegan)
            and (not pescatarian or food.is_pescatarian)
            and (not toddler_only or food.toddler_approved)
        }

    def list_allergies(self, food_id: int) -> list[str]:
        self.allergy_lookups.append(food_id)
        return self.allergies.get(food_id, [])


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
    )


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository(
        foods=[
            make_food(1, "banana"),
            make_food(2, "apple", toddler_approved=False),
            make_food(3, "carrot", FoodCategory.VEGETABLE),
            make_food(
                4,
                "broccoli cheese bake",
                FoodCategory.VEGETABLE,
                vegan=False,
            ),
            make_food(
                5,
                "salmon with greens",
                FoodCategory.VEGETABLE,
                vegetarian=False,
                vegan=False,
            ),
        ],
        allergies={4: ["dairy"], 5: ["fish", "sesame"]},
    )


@pytest.fixture
def container(
    settings: Settings, food_repository: InMemoryFoodRepository
) -> AppContainer:
    return AppContainer(
        settings=settings,
        suggestion_service=SuggestionService(food_repository, rng=random.Random()),
        allergy_service=AllergyService(food_repository),
        close_resources=lambda: None,
    )
