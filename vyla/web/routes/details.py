"""
Routes de detail : fiches film, serie et personne.
"""

from fastapi import APIRouter, Depends

from ...adapters.api.tmdb_client import TMDBClient
from ...core.value_objects import MediaType
from ...services.fanout import gather_settled, or_default, require_primary
from ...services.shapers import ShapingContext, shape_details, shape_person
from ...utils.helpers import utc_timestamp
from ..deps import get_shaping_context, get_tmdb_client
from ..validation import parse_media_type, parse_positive_id

router = APIRouter()


@router.get("/details/{media_type}/{media_id}")
async def details(
    media_type: str,
    media_id: str,
    client: TMDBClient = Depends(get_tmdb_client),
    ctx: ShapingContext = Depends(get_shaping_context),
):
    """
    Fiche detaillee.

    details est principal (404/5xx) ; credits, recommendations et videos
    sont secondaires (sections vides en cas d'echec).
    """
    kind = parse_media_type(media_type)
    tmdb_id = parse_positive_id(media_id)

    details_result, credits, recommendations, videos = await gather_settled(
        client.get_details(kind, tmdb_id),
        client.get_credits(kind, tmdb_id),
        client.get_recommendations(kind, tmdb_id),
        client.get_videos(kind, tmdb_id),
        labels=("details", "credits", "recommendations", "videos"),
    )
    resource = "Movie" if kind == MediaType.MOVIE.value else "TV show"
    data = require_primary(details_result, resource, tmdb_id)

    return shape_details(
        ctx,
        kind,
        data,
        or_default(credits, {}),
        or_default(recommendations, {"results": []}),
        or_default(videos, {"results": []}),
        utc_timestamp(),
    )


@router.get("/cast/{person_id}")
async def cast(
    person_id: str,
    client: TMDBClient = Depends(get_tmdb_client),
    ctx: ShapingContext = Depends(get_shaping_context),
):
    """Fiche personne ; la filmographie est secondaire."""
    tmdb_id = parse_positive_id(person_id, "person_id")

    person, credits = await gather_settled(
        client.get_person(tmdb_id),
        client.get_person_credits(tmdb_id),
        labels=("person", "combined_credits"),
    )
    data = require_primary(person, "Person", tmdb_id)
    return shape_person(ctx, data, or_default(credits, {}))
