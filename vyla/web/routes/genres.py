"""
Routes des genres : liste et navigation par genre.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from ...adapters.api.tmdb_client import TMDBClient
from ...services.shapers import ShapingContext, shape_genre_browse, shape_genre_list
from ...utils.helpers import utc_timestamp
from ..deps import get_shaping_context, get_tmdb_client
from ..validation import parse_media_type, parse_page, parse_positive_id, parse_sort

router = APIRouter()


@router.get("/genres/{media_type}")
async def genre_list(
    media_type: str,
    client: TMDBClient = Depends(get_tmdb_client),
):
    kind = parse_media_type(media_type)
    payload = await client.get_genres(kind)
    return shape_genre_list(kind, payload, utc_timestamp())


@router.get("/genres/{media_type}/{genre_id}")
async def genre_browse(
    media_type: str,
    genre_id: str,
    page: Optional[str] = None,
    sort_by: Optional[str] = None,
    client: TMDBClient = Depends(get_tmdb_client),
    ctx: ShapingContext = Depends(get_shaping_context),
):
    """Titres d'un genre via /discover, tries selon sort_by."""
    kind = parse_media_type(media_type)
    tmdb_genre = parse_positive_id(genre_id, "genre_id")
    page_number = parse_page(page)
    sort_key = parse_sort(sort_by)

    payload = await client.discover(
        kind, with_genres=tmdb_genre, page=page_number, sort_by=sort_key
    )
    return shape_genre_browse(
        ctx, kind, tmdb_genre, page_number, sort_key, payload, utc_timestamp()
    )
