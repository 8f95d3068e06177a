"""Dependency container wiring for the application."""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from supabase import Client, create_client

from fussyfood.adapters.supabase_food_repository import SupabaseFoodRepository
from fussyfood.config import Settings, load_settings
from fussyfood.domain.errors import FoodStoreConnectionError
from fussyfood.services.allergies import AllergyService
from fussyfood.services.suggestions import SuggestionService

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds the dependencies for one invocation."""

    settings: Settings
    suggestion_service: SuggestionService
    allergy_service: AllergyService
    close_resources: Callable[[], None]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or load_settings()
    try:
        supabase_client = create_client(
            resolved_settings.supabase_url, resolved_settings.supabase_service_key
        )
    except Exception as exc:  # noqa: BLE001
        raise FoodStoreConnectionError(
            f"Cannot create Food Store client: {exc}"
        ) from exc
    food_repository = SupabaseFoodRepository(
        supabase_client,
        foods_table=resolved_settings.foods_table,
        allergies_table=resolved_settings.food_allergies_table,
    )

    def close_resources() -> None:
        _close_client(supabase_client)

    return AppContainer(
        settings=resolved_settings,
        suggestion_service=SuggestionService(food_repository),
        allergy_service=AllergyService(food_repository),
        close_resources=close_resources,
    )


@contextmanager
def open_container(settings: Settings | None = None) -> Iterator[AppContainer]:
    """Yield a container whose Food Store session is closed on exit."""
    container = build_container(settings)
    try:
        yield container
    finally:
        container.close_resources()


def _close_client(client: Client) -> None:
    """Close the PostgREST HTTP session held by a Supabase client."""
    client.postgrest.session.close()
    _logger.debug("Food Store session closed")
