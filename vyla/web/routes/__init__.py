"""
Routers de l'API, montes sous le prefixe configure.
"""

from .details import router as details_router
from .episodes import router as episodes_router
from .genres import router as genres_router
from .home import router as home_router
from .image import router as image_router
from .player import router as player_router
from .search import router as search_router

ROUTERS = (
    home_router,
    search_router,
    details_router,
    player_router,
    genres_router,
    episodes_router,
    image_router,
)

__all__ = ["ROUTERS"]
