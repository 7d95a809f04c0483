"""
Fixtures pytest partagees pour les tests Vyla.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test (sans fichier .env ni fichier de log)
- Contextes de mise en forme (mode proxy et mode direct)
- Mock du client TMDB et application FastAPI branchee dessus
"""

from typing import Iterator
from unittest.mock import AsyncMock

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from vyla.adapters.api.tmdb_client import TMDBClient
from vyla.config import Settings
from vyla.container import Container
from vyla.services.images import ImageUrlBuilder
from vyla.services.shapers.common import Links, ShapingContext
from vyla.web.app import create_app


def make_settings(**overrides) -> Settings:
    values = {
        "tmdb_api_key": "test_api_key",
        "environment": "test",
        "log_file": None,
        "static_dir": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def test_settings() -> Settings:
    return make_settings()


@pytest.fixture
def ctx() -> ShapingContext:
    """Contexte proxy sous /api (configuration par defaut)."""
    return ShapingContext(
        images=ImageUrlBuilder(mode="proxy", proxy_prefix="/api"),
        links=Links(prefix="/api"),
    )


@pytest.fixture
def direct_ctx() -> ShapingContext:
    """Contexte avec URLs directes du CDN TMDB."""
    return ShapingContext(
        images=ImageUrlBuilder(mode="direct"),
        links=Links(prefix="/api"),
    )


@pytest.fixture
def mock_tmdb() -> AsyncMock:
    """
    Mock de TMDBClient.

    Les valeurs de retour doivent etre configurees dans chaque test.
    """
    return AsyncMock(spec=TMDBClient)


def build_container(mock_tmdb: AsyncMock, settings: Settings) -> Container:
    container = Container()
    container.config.override(providers.Object(settings))
    container.tmdb_client.override(providers.Object(mock_tmdb))
    return container


@pytest.fixture
def container(mock_tmdb: AsyncMock, test_settings: Settings) -> Container:
    return build_container(mock_tmdb, test_settings)


@pytest.fixture
def client(container: Container) -> Iterator[TestClient]:
    """TestClient sur l'application complete (lifespan inclus)."""
    app = create_app(container)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
