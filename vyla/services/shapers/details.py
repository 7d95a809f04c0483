"""
Mise en forme de la fiche detaillee d'un film ou d'une serie.

Entrees : details (principal), credits, recommendations et videos
(secondaires, remplaces par des valeurs vides en cas d'echec).
"""

from typing import Any, Optional

from vyla.core.entities import Season
from vyla.core.value_objects import MediaType
from vyla.services.shapers.common import (
    ShapingContext,
    normalize_item,
    resolve_title,
    results_of,
    shape_cast_member,
    shape_crew,
)
from vyla.utils.constants import CAST_LIMIT, NO_OVERVIEW, RELATED_LIMIT, YOUTUBE_WATCH_URL
from vyla.utils.helpers import extract_year, first_date, round_rating


def find_trailer_url(videos: dict[str, Any]) -> Optional[str]:
    """Premiere bande-annonce YouTube."""
    for video in results_of(videos):
        if video.get("type") == "Trailer" and video.get("site") == "YouTube" and video.get("key"):
            return f"{YOUTUBE_WATCH_URL}{video['key']}"
    return None


def _runtime(details: dict[str, Any]) -> Optional[int]:
    if details.get("runtime"):
        return details["runtime"]
    episode_run_time = details.get("episode_run_time") or []
    return episode_run_time[0] if episode_run_time else None


def shape_info(
    ctx: ShapingContext,
    media_type: str,
    details: dict[str, Any],
    videos: dict[str, Any],
) -> dict[str, Any]:
    release_date = details.get("release_date")
    first_air_date = details.get("first_air_date")
    return {
        "id": details.get("id"),
        "type": media_type,
        "title": resolve_title(details),
        "tagline": details.get("tagline") or None,
        "overview": details.get("overview") or NO_OVERVIEW,
        "runtime": _runtime(details),
        "release_date": first_date(release_date, first_air_date),
        "year": extract_year(release_date, first_air_date),
        "rating": round_rating(details.get("vote_average")),
        "vote_count": details.get("vote_count") or 0,
        "popularity": details.get("popularity") or 0,
        "genres": [
            {"id": g.get("id"), "name": g.get("name")}
            for g in details.get("genres") or []
            if isinstance(g, dict)
        ],
        "backdrop": ctx.images.build_url(
            details.get("backdrop_path") or details.get("poster_path"), "original", "backdrop"
        ),
        "poster": ctx.images.build_url(details.get("poster_path"), "w780", "poster"),
        "poster_set": ctx.images.responsive_set(details.get("poster_path"), "poster"),
        "backdrop_set": ctx.images.responsive_set(details.get("backdrop_path"), "backdrop"),
        "trailer_url": find_trailer_url(videos),
        "homepage": details.get("homepage") or None,
        "status": details.get("status") or None,
        "original_language": details.get("original_language") or "en",
        "production_companies": [
            {
                "id": company.get("id"),
                "name": company.get("name"),
                "logo": ctx.images.build_url(company.get("logo_path"), "w185", "logo"),
                "origin_country": company.get("origin_country") or None,
            }
            for company in details.get("production_companies") or []
            if isinstance(company, dict)
        ],
    }


def shape_cast(ctx: ShapingContext, credits: dict[str, Any]) -> list[dict[str, Any]]:
    """Les CAST_LIMIT premiers acteurs par ordre de generique croissant."""
    cast = [raw for raw in credits.get("cast") or [] if isinstance(raw, dict)]
    cast.sort(key=lambda raw: raw.get("order") if raw.get("order") is not None else float("inf"))
    return [shape_cast_member(ctx, raw).to_dict() for raw in cast[:CAST_LIMIT]]


def shape_related(
    ctx: ShapingContext, media_type: str, recommendations: dict[str, Any]
) -> list[dict[str, Any]]:
    return [
        normalize_item(ctx, raw, media_type).to_dict()
        for raw in results_of(recommendations)[:RELATED_LIMIT]
        if raw.get("id") is not None
    ]


def shape_seasons(ctx: ShapingContext, details: dict[str, Any]) -> list[dict[str, Any]]:
    """Saisons numerotees (hors speciaux), triees ; poster de la serie en repli."""
    seasons = []
    for raw in details.get("seasons") or []:
        if not isinstance(raw, dict) or not isinstance(raw.get("season_number"), int):
            continue
        number = raw["season_number"]
        if number <= 0:
            continue
        seasons.append(Season(
            number=number,
            name=raw.get("name") or f"Season {number}",
            overview=raw.get("overview") or NO_OVERVIEW,
            episode_count=raw.get("episode_count") or 0,
            air_date=raw.get("air_date") or None,
            poster=ctx.images.build_url(
                raw.get("poster_path") or details.get("poster_path"), "w780", "poster"
            ),
        ))
    seasons.sort(key=lambda season: season.number)
    return [season.to_dict() for season in seasons]


def shape_details(
    ctx: ShapingContext,
    media_type: str,
    details: dict[str, Any],
    credits: dict[str, Any],
    recommendations: dict[str, Any],
    videos: dict[str, Any],
    timestamp: str,
) -> dict[str, Any]:
    """
    Assemble la fiche detaillee.

    Les champs propres aux series (seasons, number_of_seasons,
    number_of_episodes, created_by) ne sont ajoutes que pour le type tv.
    """
    media_id = details.get("id")
    response: dict[str, Any] = {
        "success": True,
        "meta": {
            "links": {
                "self": ctx.links.details(media_type, media_id),
                "canonical": f"/{media_type}/{media_id}",
            },
            "type": media_type,
            "title": resolve_title(details),
            "description": details.get("overview") or None,
            "image": ctx.images.build_url(
                details.get("backdrop_path") or details.get("poster_path"), "original", "backdrop"
            ),
            "timestamp": timestamp,
        },
        "info": shape_info(ctx, media_type, details, videos),
        "cast": shape_cast(ctx, credits),
        "crew": shape_crew(ctx, credits.get("crew")),
        "related": shape_related(ctx, media_type, recommendations),
        "player_link": ctx.links.player(media_type, media_id),
    }

    if media_type == MediaType.TV.value:
        response["seasons"] = shape_seasons(ctx, details)
        response["number_of_seasons"] = details.get("number_of_seasons") or 0
        response["number_of_episodes"] = details.get("number_of_episodes") or 0
        response["created_by"] = [
            {
                "id": creator.get("id"),
                "name": creator.get("name"),
                "profile": ctx.images.build_url(creator.get("profile_path"), "w185", "profile"),
            }
            for creator in details.get("created_by") or []
            if isinstance(creator, dict)
        ]

    return response
