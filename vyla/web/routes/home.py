"""
Routes d'accueil et de supervision.

- GET /home : flux d'accueil (12 sections chargees en parallele)
- GET /health : liveness
- GET /status : compteurs du processus
- GET / : index des endpoints
"""

from fastapi import APIRouter, Depends

from ... import __version__
from ...adapters.api.tmdb_client import TMDBClient
from ...config import Settings
from ...services.fanout import gather_settled, or_default
from ...services.metrics import MetricsRegistry, format_uptime
from ...services.shapers import ShapingContext, shape_home
from ...utils.constants import HOME_GENRES, HOME_SECTIONS
from ...utils.helpers import utc_timestamp
from ..deps import get_metrics, get_settings, get_shaping_context, get_tmdb_client

router = APIRouter()


@router.get("/home")
async def home(
    client: TMDBClient = Depends(get_tmdb_client),
    ctx: ShapingContext = Depends(get_shaping_context),
):
    """Flux d'accueil ; une section en echec devient une section vide."""
    results = await gather_settled(
        client.get_trending("all", "day"),
        client.get_trending("movie", "week"),
        client.get_top_rated("movie"),
        client.get_top_rated("tv"),
        client.get_netflix_originals(),
        client.get_movies_by_genre(HOME_GENRES["action"]),
        client.get_movies_by_genre(HOME_GENRES["comedy"]),
        client.get_movies_by_genre(HOME_GENRES["horror"]),
        client.get_movies_by_genre(HOME_GENRES["romance"]),
        client.get_movies_by_genre(HOME_GENRES["documentary"]),
        client.get_movies_by_genre(HOME_GENRES["animation"]),
        client.get_movies_by_genre(HOME_GENRES["science_fiction"]),
        labels=tuple(title for title, _, _ in HOME_SECTIONS),
    )
    payloads = [or_default(result, {"results": []}) for result in results]
    return shape_home(ctx, payloads, __version__, utc_timestamp())


@router.get("/health")
async def health(
    settings: Settings = Depends(get_settings),
    metrics: MetricsRegistry = Depends(get_metrics),
):
    uptime = metrics.uptime_seconds
    return {
        "success": True,
        "status": "ok",
        "timestamp": utc_timestamp(),
        "uptime": {"seconds": int(uptime), "formatted": format_uptime(uptime)},
        "environment": settings.environment,
    }


@router.get("/status")
async def status(
    settings: Settings = Depends(get_settings),
    metrics: MetricsRegistry = Depends(get_metrics),
):
    return {
        "success": True,
        "status": "active",
        "version": __version__,
        "environment": settings.environment,
        "tmdb_configured": settings.tmdb_enabled,
        "image_mode": settings.image_mode,
        "metrics": metrics.snapshot(),
        "timestamp": utc_timestamp(),
    }


@router.get("/")
async def index(settings: Settings = Depends(get_settings)):
    """Document d'index : endpoints, parametres et exemples."""
    p = settings.api_prefix
    return {
        "success": True,
        "name": "Vyla Media API",
        "version": __version__,
        "status": "active",
        "endpoints": {
            "home": {"path": f"{p}/home", "method": "GET", "description": "Curated home feed"},
            "search": {
                "path": f"{p}/search",
                "method": "GET",
                "description": "Search movies and TV shows",
                "parameters": {
                    "q": "Search query, at least 2 characters (required)",
                    "page": "Page number (optional, default: 1)",
                },
            },
            "details": {
                "path": f"{p}/details/:type/:id",
                "method": "GET",
                "description": "Media details, top 20 cast, top 10 recommendations, trailer",
                "parameters": {"type": "movie or tv", "id": "TMDB id"},
            },
            "cast": {
                "path": f"{p}/cast/:id",
                "method": "GET",
                "description": "Person details and top 20 movies / shows",
                "parameters": {"id": "TMDB person id"},
            },
            "player": {
                "path": f"{p}/player/:type/:id",
                "method": "GET",
                "description": "Streaming sources",
                "parameters": {
                    "type": "movie or tv",
                    "id": "TMDB id",
                    "s": "Season number >= 1 (required for tv)",
                    "e": "Episode number >= 1 (required for tv)",
                },
            },
            "genres": {
                "path": f"{p}/genres/:type",
                "method": "GET",
                "description": "Genre list",
            },
            "genre_browse": {
                "path": f"{p}/genres/:type/:genreId",
                "method": "GET",
                "description": "Browse by genre",
                "parameters": {"page": "Page number", "sort_by": "TMDB sort key"},
            },
            "season": {
                "path": f"{p}/tv/:tvId/season/:seasonNumber",
                "method": "GET",
                "description": "Season and episode list (season 0 = specials)",
            },
            "episode": {
                "path": f"{p}/episodes/:tvId/:seasonNumber/:episodeNumber",
                "method": "GET",
                "description": "Episode details, top 10 guest stars",
            },
            "list": {
                "path": f"{p}/list",
                "method": "GET",
                "description": "Fetch a TMDB list endpoint",
                "parameters": {
                    "endpoint": "TMDB endpoint path (required)",
                    "params": "Additional parameters as a JSON object (optional)",
                    "page": "Page number (optional, default: 1)",
                },
            },
            "image": {
                "path": f"{p}/image/:size/:file",
                "method": "GET",
                "description": "Proxy TMDB images",
            },
            "health": {"path": f"{p}/health", "method": "GET", "description": "Liveness"},
            "status": {"path": f"{p}/status", "method": "GET", "description": "Counters"},
        },
        "examples": {
            "home": f"{p}/home",
            "search": f"{p}/search?q=avengers",
            "movie_details": f"{p}/details/movie/299534",
            "tv_details": f"{p}/details/tv/1668",
            "cast": f"{p}/cast/3223",
            "movie_player": f"{p}/player/movie/299534",
            "tv_player": f"{p}/player/tv/1668?s=1&e=1",
            "custom_list": f"{p}/list?endpoint=/movie/top_rated",
            "image": f"{p}/image/w500/poster.jpg",
        },
    }
