"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour l'application web et la CLI.
Tous les objets sont des singletons construits une fois au demarrage :
le service est sans etat partage hormis les compteurs de /status.
"""

from dependency_injector import containers, providers

from .adapters.api.tmdb_client import TMDBClient
from .config import Settings
from .player_sources import load_sources
from .services.images import ImageUrlBuilder
from .services.metrics import MetricsRegistry
from .services.player import PlayerService
from .services.shapers.common import Links, ShapingContext


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        client = container.tmdb_client()
        ctx = container.shaping_context()

    En test, le client TMDB se remplace par un mock :
        container.tmdb_client.override(providers.Object(mock_client))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Compteurs de l'endpoint /status
    metrics = providers.Singleton(MetricsRegistry)

    # Client TMDB - Singleton, ferme a l'arret de l'application
    tmdb_client = providers.Singleton(
        TMDBClient,
        api_key=config.provided.tmdb_api_key,
        language=config.provided.tmdb_language,
        timeout=config.provided.tmdb_timeout,
        base_url=config.provided.tmdb_base_url,
        image_base_url=config.provided.tmdb_image_base_url,
    )

    # Images et liens : une seule instance partagee par tous les shapers
    image_urls = providers.Singleton(
        ImageUrlBuilder,
        mode=config.provided.image_mode,
        cdn_base_url=config.provided.tmdb_image_base_url,
        proxy_prefix=config.provided.api_prefix,
    )
    links = providers.Singleton(Links, prefix=config.provided.api_prefix)
    shaping_context = providers.Singleton(ShapingContext, images=image_urls, links=links)

    # Catalogue des lecteurs, verifie a la construction
    player_service = providers.Singleton(PlayerService, sources=providers.Callable(load_sources))
