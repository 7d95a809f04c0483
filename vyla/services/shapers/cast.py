"""
Mise en forme de la fiche d'une personne (biographie + filmographie).
"""

from typing import Any

from vyla.core.value_objects import MediaType
from vyla.services.shapers.common import ShapingContext, normalize_item, sort_by_popularity
from vyla.utils.constants import KNOWN_FOR_LIMIT


def _known_for(ctx: ShapingContext, credits: dict[str, Any], media_type: str) -> list[dict[str, Any]]:
    """Credits d'un type, dedoublonnes par id, tries par popularite."""
    seen: set[Any] = set()
    items = []
    for raw in credits.get("cast") or []:
        if not isinstance(raw, dict) or raw.get("media_type") != media_type:
            continue
        if raw.get("id") is None or raw["id"] in seen:
            continue
        seen.add(raw["id"])
        item = normalize_item(ctx, raw, media_type).to_dict()
        item["character"] = raw.get("character") or None
        items.append(item)
    return sort_by_popularity(items)[:KNOWN_FOR_LIMIT]


def shape_person(
    ctx: ShapingContext,
    person: dict[str, Any],
    credits: dict[str, Any],
) -> dict[str, Any]:
    """
    Assemble la fiche personne.

    Args:
        ctx: Contexte de mise en forme
        person: Reponse /person/{id} (principale)
        credits: Reponse /person/{id}/combined_credits ({} si en echec)
    """
    return {
        "success": True,
        "data": {
            "id": person.get("id"),
            "name": person.get("name") or "",
            "biography": person.get("biography") or None,
            "birthday": person.get("birthday") or None,
            "deathday": person.get("deathday") or None,
            "place_of_birth": person.get("place_of_birth") or None,
            "known_for_department": person.get("known_for_department") or None,
            "popularity": person.get("popularity") or 0,
            "profile": ctx.images.build_url(person.get("profile_path"), "h632", "profile"),
            "known_for": {
                "movies": _known_for(ctx, credits, MediaType.MOVIE.value),
                "shows": _known_for(ctx, credits, MediaType.TV.value),
            },
        },
    }
