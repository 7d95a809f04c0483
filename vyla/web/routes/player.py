"""
Route des sources de lecture.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from ...core.value_objects import MediaType
from ...services.player import PlayerService
from ...services.shapers import ShapingContext
from ...utils.helpers import episode_identifier, utc_timestamp
from ..deps import get_player_service, get_shaping_context
from ..validation import parse_episode, parse_media_type, parse_positive_id, parse_season

router = APIRouter()

INSTRUCTIONS = {
    "usage": "Embed stream_url in an iframe for playback",
    "note": "Some sources may require additional configuration or may be region-restricted",
}


@router.get("/player/{media_type}/{media_id}")
async def player(
    media_type: str,
    media_id: str,
    s: Optional[str] = None,
    e: Optional[str] = None,
    service: PlayerService = Depends(get_player_service),
    ctx: ShapingContext = Depends(get_shaping_context),
):
    """
    Une URL de lecture par source du catalogue.

    Pour une serie, s (>= 1) et e (>= 1) sont obligatoires.
    Aucun appel amont.
    """
    kind = parse_media_type(media_type)
    tmdb_id = parse_positive_id(media_id)

    meta = {
        "content_id": tmdb_id,
        "type": kind,
        "back_path": ctx.links.details(kind, tmdb_id),
        "timestamp": utc_timestamp(),
    }
    season = episode = None
    if kind == MediaType.TV.value:
        season = parse_season(s, minimum=1, name="s")
        episode = parse_episode(e, name="e")
        meta["season"] = season
        meta["episode"] = episode
        meta["episode_identifier"] = episode_identifier(season, episode)

    return {
        "success": True,
        "meta": meta,
        "sources": service.generate(kind, tmdb_id, season, episode),
        "instructions": INSTRUCTIONS,
    }
