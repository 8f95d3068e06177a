"""Tests for container wiring."""

from dataclasses import dataclass, field

import pytest

from fussyfood import containers
from fussyfood.adapters.supabase_food_repository import SupabaseFoodRepository
from fussyfood.containers import build_container, open_container
from fussyfood.domain.errors import FoodStoreConnectionError


@dataclass
class FakeSession:
    closed: bool = False

    def close(self) -> None:
        self.closed = True


@dataclass
class FakePostgrest:
    session: FakeSession = field(default_factory=FakeSession)


@dataclass
class FakeClient:
    postgrest: FakePostgrest = field(default_factory=FakePostgrest)


def test_build_container_wires_repository(
    monkeypatch: pytest.MonkeyPatch, settings
) -> None:
    client = FakeClient()
    monkeypatch.setattr(containers, "create_client", lambda url, key: client)

    container = build_container(settings)

    repository = container.suggestion_service.repository
    assert isinstance(repository, SupabaseFoodRepository)
    assert repository.client is client
    assert container.allergy_service.repository is repository


def test_open_container_closes_session_on_error(
    monkeypatch: pytest.MonkeyPatch, settings
) -> None:
    client = FakeClient()
    monkeypatch.setattr(containers, "create_client", lambda url, key: client)

    with pytest.raises(RuntimeError), open_container(settings):
        raise RuntimeError("boom")

    assert client.postgrest.session.closed is True


def test_build_container_reports_client_failure(
    monkeypatch: pytest.MonkeyPatch, settings
) -> None:
    def fail(url: str, key: str) -> None:
        raise ValueError("Invalid URL")

    monkeypatch.setattr(containers, "create_client", fail)

    with pytest.raises(FoodStoreConnectionError, match="Invalid URL"):
        build_container(settings)
