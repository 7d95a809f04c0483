"""
Routes des saisons et episodes d'une serie.

Saison 0 = episodes speciaux.
"""

from fastapi import APIRouter, Depends

from ...adapters.api.tmdb_client import TMDBClient
from ...services.fanout import gather_settled, or_default, require_primary
from ...services.shapers import ShapingContext, shape_episode, shape_season
from ...utils.helpers import episode_identifier, utc_timestamp
from ..deps import get_shaping_context, get_tmdb_client
from ..validation import parse_episode, parse_positive_id, parse_season

router = APIRouter()


@router.get("/tv/{tv_id}/season/{season_number}")
async def season(
    tv_id: str,
    season_number: str,
    client: TMDBClient = Depends(get_tmdb_client),
    ctx: ShapingContext = Depends(get_shaping_context),
):
    """Saison et liste d'episodes ; le resume de la serie est secondaire."""
    show_id = parse_positive_id(tv_id, "tv_id")
    number = parse_season(season_number, name="season_number")

    season_result, show = await gather_settled(
        client.get_season(show_id, number),
        client.get_details("tv", show_id),
        labels=("season", "tv_show"),
    )
    data = require_primary(season_result, "Season", f"{show_id}/{number}")
    return shape_season(ctx, show_id, number, data, or_default(show, {}), utc_timestamp())


@router.get("/episodes/{tv_id}/{season_number}/{episode_number}")
async def episode(
    tv_id: str,
    season_number: str,
    episode_number: str,
    client: TMDBClient = Depends(get_tmdb_client),
    ctx: ShapingContext = Depends(get_shaping_context),
):
    show_id = parse_positive_id(tv_id, "tv_id")
    season_no = parse_season(season_number, name="season_number")
    episode_no = parse_episode(episode_number, name="episode_number")

    (result,) = await gather_settled(
        client.get_episode(show_id, season_no, episode_no),
        labels=("episode",),
    )
    data = require_primary(
        result, "Episode", f"{show_id} {episode_identifier(season_no, episode_no)}"
    )
    return shape_episode(ctx, show_id, season_no, episode_no, data, utc_timestamp())
