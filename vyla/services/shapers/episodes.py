"""
Mise en forme des saisons et episodes d'une serie.

Hierarchie Serie -> Saison -> Episode, cle (tv_id, season_number, episode_number).
"""

from typing import Any

from vyla.core.entities import Episode
from vyla.services.shapers.common import ShapingContext, shape_cast_member, shape_crew
from vyla.utils.constants import GUEST_STARS_LIMIT, NO_OVERVIEW
from vyla.utils.helpers import episode_identifier, round_rating


def shape_episode_row(
    ctx: ShapingContext,
    tv_id: int,
    season_number: int,
    raw: dict[str, Any],
    still_size: str = "w300",
) -> Episode:
    number = raw.get("episode_number") or 0
    return Episode(
        id=raw.get("id"),
        episode_number=number,
        season_number=raw.get("season_number", season_number),
        name=raw.get("name") or f"Episode {number}",
        overview=raw.get("overview") or NO_OVERVIEW,
        air_date=raw.get("air_date") or None,
        runtime=raw.get("runtime"),
        still=ctx.images.build_url(raw.get("still_path"), still_size, "still"),
        rating=round_rating(raw.get("vote_average")),
        vote_count=raw.get("vote_count") or 0,
        episode_link=ctx.links.episode(tv_id, season_number, number),
        player_link=ctx.links.player("tv", tv_id, season_number, number),
    )


def shape_season(
    ctx: ShapingContext,
    tv_id: int,
    season_number: int,
    season: dict[str, Any],
    show: dict[str, Any],
    timestamp: str,
) -> dict[str, Any]:
    """
    Assemble une saison et ses episodes.

    Args:
        season: Reponse /tv/{id}/season/{n} (principale)
        show: Reponse /tv/{id} ({} si en echec, tv_show vaut alors None)
    """
    episodes = [
        shape_episode_row(ctx, tv_id, season_number, raw).to_dict()
        for raw in season.get("episodes") or []
        if isinstance(raw, dict)
    ]
    tv_show = None
    if show.get("id") is not None:
        tv_show = {
            "id": show["id"],
            "name": show.get("name") or show.get("original_name"),
            "poster": ctx.images.build_url(show.get("poster_path"), "w780", "poster"),
            "details_link": ctx.links.details("tv", tv_id),
        }
    return {
        "success": True,
        "data": {
            "id": season.get("id"),
            "season_number": season.get("season_number", season_number),
            "name": season.get("name") or f"Season {season_number}",
            "overview": season.get("overview") or NO_OVERVIEW,
            "air_date": season.get("air_date") or None,
            "poster": ctx.images.build_url(season.get("poster_path"), "w780", "poster"),
            "episode_count": len(episodes),
            "episodes": episodes,
            "tv_show": tv_show,
        },
        "meta": {
            "tv_id": tv_id,
            "season_number": season_number,
            "timestamp": timestamp,
        },
    }


def shape_episode(
    ctx: ShapingContext,
    tv_id: int,
    season_number: int,
    episode_number: int,
    episode: dict[str, Any],
    timestamp: str,
) -> dict[str, Any]:
    """Fiche d'un episode : equipe, invites (limites a GUEST_STARS_LIMIT)."""
    data = shape_episode_row(ctx, tv_id, season_number, episode, still_size="original").to_dict()
    data["crew"] = shape_crew(ctx, episode.get("crew"))
    data["guest_stars"] = [
        shape_cast_member(ctx, raw).to_dict()
        for raw in (episode.get("guest_stars") or [])[:GUEST_STARS_LIMIT]
        if isinstance(raw, dict)
    ]
    data["production_code"] = episode.get("production_code") or None
    return {
        "success": True,
        "data": data,
        "meta": {
            "tv_id": tv_id,
            "season_number": season_number,
            "episode_number": episode_number,
            "episode_identifier": episode_identifier(season_number, episode_number),
            "player_link": ctx.links.player("tv", tv_id, season_number, episode_number),
            "season_link": ctx.links.season(tv_id, season_number),
            "timestamp": timestamp,
        },
    }
