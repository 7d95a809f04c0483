"""
Mise en forme des resultats de recherche multi-types.
"""

from typing import Any

from vyla.core.value_objects import MediaType
from vyla.services.shapers.common import (
    ShapingContext,
    normalize_item,
    results_of,
    shape_pagination,
)


def shape_search(
    ctx: ShapingContext,
    query: str,
    page: int,
    payload: dict[str, Any],
) -> dict[str, Any]:
    """
    Resultats films et series avec poster ; les personnes sont exclues.
    """
    results = [
        normalize_item(ctx, raw, poster_size="w500").to_dict()
        for raw in results_of(payload)
        if raw.get("media_type") in (MediaType.MOVIE.value, MediaType.TV.value)
        and raw.get("poster_path")
        and raw.get("id") is not None
    ]
    return {
        "success": True,
        "meta": {
            "query": query,
            **shape_pagination(payload, page),
            "back_path": ctx.links.home(),
        },
        "results": results,
    }
