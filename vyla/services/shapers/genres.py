"""
Mise en forme des genres et de la navigation par genre.
"""

from typing import Any

from vyla.services.shapers.common import (
    ShapingContext,
    has_artwork,
    normalize_item,
    results_of,
    shape_pagination,
)


def shape_genre_list(media_type: str, payload: dict[str, Any], timestamp: str) -> dict[str, Any]:
    genres = [
        {"id": genre.get("id"), "name": genre.get("name")}
        for genre in payload.get("genres") or []
        if isinstance(genre, dict)
    ]
    return {
        "success": True,
        "type": media_type,
        "genres": genres,
        "meta": {
            "total_genres": len(genres),
            "timestamp": timestamp,
        },
    }


def shape_genre_browse(
    ctx: ShapingContext,
    media_type: str,
    genre_id: int,
    page: int,
    sort_by: str,
    payload: dict[str, Any],
    timestamp: str,
) -> dict[str, Any]:
    """Resultats /discover d'un genre, avec pagination."""
    results = []
    for raw in results_of(payload):
        if not has_artwork(raw):
            continue
        item = normalize_item(ctx, raw, media_type).to_dict()
        item["adult"] = bool(raw.get("adult"))
        results.append(item)
    return {
        "success": True,
        "meta": {
            "type": media_type,
            "genre_id": genre_id,
            **shape_pagination(payload, page),
            "sort_by": sort_by,
            "timestamp": timestamp,
        },
        "results": results,
    }
