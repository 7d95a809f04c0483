"""
Routes de recherche et de listes TMDB.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from ...adapters.api.tmdb_client import TMDBClient
from ...services.shapers import ShapingContext, shape_list, shape_search
from ..deps import get_shaping_context, get_tmdb_client
from ..validation import parse_list_endpoint, parse_list_params, parse_page, parse_query

router = APIRouter()


@router.get("/search")
async def search(
    q: Optional[str] = None,
    page: Optional[str] = None,
    client: TMDBClient = Depends(get_tmdb_client),
    ctx: ShapingContext = Depends(get_shaping_context),
):
    """Recherche multi-types ; un echec amont fait echouer la requete."""
    query = parse_query(q)
    page_number = parse_page(page)

    payload = await client.search_multi(query, page_number)
    return shape_search(ctx, query, page_number, payload)


@router.get("/list")
async def list_endpoint(
    endpoint: Optional[str] = None,
    params: Optional[str] = None,
    page: Optional[str] = None,
    client: TMDBClient = Depends(get_tmdb_client),
    ctx: ShapingContext = Depends(get_shaping_context),
):
    """Passe-plat vers un endpoint de liste TMDB (ex: /movie/top_rated)."""
    tmdb_endpoint = parse_list_endpoint(endpoint)
    extra = parse_list_params(params)
    page_number = parse_page(page)

    payload = await client.fetch(tmdb_endpoint, {**extra, "page": page_number})
    return shape_list(ctx, tmdb_endpoint, page_number, payload)
