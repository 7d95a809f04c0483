"""
Application FastAPI de Vyla.

Initialise l'application web avec le Container DI, configure CORS,
le middleware de comptage, les gestionnaires d'erreurs et monte les routes
sous le prefixe de l'API.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from loguru import logger
from starlette.middleware.cors import CORSMiddleware

from .. import __version__
from ..container import Container
from .errors import install_error_handlers
from .middleware import RequestMetricsMiddleware
from .routes import ROUTERS


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application.

    Args:
        container: Container DI (un nouveau par defaut). Les tests passent
            un container dont le client TMDB est surcharge.
    """
    container = container or Container()
    settings = container.config()
    # Construit le catalogue des lecteurs tout de suite : un modele invalide
    # empeche le demarrage
    container.player_service()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Ferme le client TMDB a l'arret."""
        if not settings.tmdb_enabled:
            logger.warning("VYLA_TMDB_API_KEY non defini : les appels TMDB echoueront")
        logger.info(
            "Vyla demarre",
            environment=settings.environment,
            prefix=settings.api_prefix,
            image_mode=settings.image_mode,
        )
        yield
        await container.tmdb_client().close()
        logger.info("Vyla arrete")

    app = FastAPI(
        title="Vyla Media API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        allow_credentials=True,
    )
    app.add_middleware(RequestMetricsMiddleware, metrics=container.metrics())
    install_error_handlers(app)

    # Fichiers statiques
    if settings.static_dir is not None:
        app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")

    # Routes
    for router in ROUTERS:
        app.include_router(router, prefix=settings.api_prefix)

    return app
