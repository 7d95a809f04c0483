"""
Mise en forme d'une liste TMDB arbitraire (/list?endpoint=...).
"""

from typing import Any

from vyla.services.shapers.common import (
    ShapingContext,
    normalize_item,
    results_of,
    shape_pagination,
)


def shape_list(
    ctx: ShapingContext,
    endpoint: str,
    page: int,
    payload: dict[str, Any],
) -> dict[str, Any]:
    # Sans media_type ni first_air_date, une ligne avec title est un film
    results = []
    for raw in results_of(payload):
        if raw.get("id") is None:
            continue
        default_type = "movie" if raw.get("title") else "tv"
        results.append(normalize_item(ctx, raw, default_type, poster_size="w500").to_dict())
    return {
        "success": True,
        "meta": {
            "endpoint": endpoint,
            **shape_pagination(payload, page),
        },
        "results": results,
    }
