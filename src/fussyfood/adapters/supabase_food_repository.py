"""Supabase-backed Food Store repository."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from fussyfood.domain.errors import FoodQueryError, FoodStoreConnectionError
from fussyfood.domain.foods import Food
from fussyfood.services.foods import FoodRepository

_logger = logging.getLogger(__name__)

_FOOD_COLUMNS = (
    "id, name, food_type, toddler_approved, is_vegetarian, is_vegan, is_pescatarian"
)

T = TypeVar("T")


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase implementation of the read-only Food Store."""

    client: Client
    foods_table: str = "foods"
    allergies_table: str = "food_allergies"

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
        query = (
            self.client.table(self.foods_table)
            .select(_FOOD_COLUMNS)
            .eq("food_type", category)
        )
        active = {
            "is_vegetarian": vegetarian,
            "is_vegan": vegan,
            "is_pescatarian": pescatarian,
            "toddler_approved": toddler_only,
        }
        for column, enabled in active.items():
            if enabled:
                query = query.eq(column, True)
        response = _run(query.execute)
        foods = {_parse_food(row) for row in response.data or []}
        _logger.info("Food query: category=%s results=%s", category, len(foods))
        return foods

    def list_allergies(self, food_id: int) -> list[str]:
        """Return raw allergy values recorded for a food."""
        response = _run(
            self.client.table(self.allergies_table)
            .select("allergy")
            .eq("food_id", food_id)
            .execute
        )
        return [str(row["allergy"]) for row in response.data or []]


def _run(execute: Callable[[], T]) -> T:
    """Execute a query, mapping transport and API failures to domain errors."""
    try:
        return execute()
    except httpx.TransportError as exc:
        raise FoodStoreConnectionError(f"Cannot reach the Food Store: {exc}") from exc
    except APIError as exc:
        raise FoodQueryError(f"Food Store query failed: {exc.message}") from exc
    except httpx.HTTPError as exc:
        raise FoodQueryError(f"Food Store query failed: {exc}") from exc


def _parse_food(row: dict[str, object]) -> Food:
    """Parse a foods row into a domain model."""
    try:
        return Food(
            id=int(row["id"]),
            name=str(row["name"]),
            category=str(row["food_type"]),
            toddler_approved=bool(row.get("toddler_approved", False)),
            is_vegetarian=bool(row.get("is_vegetarian", False)),
            is_vegan=bool(row.get("is_vegan", False)),
            is_pescatarian=bool(row.get("is_pescatarian", False)),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise FoodQueryError(f"Malformed food row: {row!r}") from exc
