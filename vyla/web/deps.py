"""
Dépendances partagées de l'application web.

Chaque dépendance lit le Container DI attaché à app.state au démarrage.
"""

from fastapi import Request

from ..adapters.api.tmdb_client import TMDBClient
from ..config import Settings
from ..container import Container
from ..services.metrics import MetricsRegistry
from ..services.player import PlayerService
from ..services.shapers.common import ShapingContext


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_tmdb_client(request: Request) -> TMDBClient:
    return get_container(request).tmdb_client()


def get_shaping_context(request: Request) -> ShapingContext:
    return get_container(request).shaping_context()


def get_player_service(request: Request) -> PlayerService:
    return get_container(request).player_service()


def get_metrics(request: Request) -> MetricsRegistry:
    return get_container(request).metrics()
