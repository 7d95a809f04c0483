"""
Mise en forme du flux d'accueil.
"""

from typing import Any, Optional

from vyla.services.shapers.common import (
    ShapingContext,
    has_artwork,
    normalize_item,
    results_of,
    sort_by_popularity,
)
from vyla.utils.constants import API_VERSION, HOME_SECTIONS


def shape_section_items(
    ctx: ShapingContext, payload: Any, default_type: Optional[str]
) -> list[dict[str, Any]]:
    """Lignes avec visuel, normalisees puis triees par popularite."""
    items = [
        normalize_item(ctx, raw, default_type).to_dict()
        for raw in results_of(payload)
        if has_artwork(raw)
    ]
    return sort_by_popularity(items)


def featured_image(ctx: ShapingContext, payloads: list[Any]) -> Optional[str]:
    """Backdrop du premier resultat de la premiere section qui en a un."""
    for payload in payloads:
        rows = results_of(payload)
        if rows and rows[0].get("backdrop_path"):
            return ctx.images.build_url(rows[0]["backdrop_path"], "original", "backdrop")
    return None


def shape_home(
    ctx: ShapingContext,
    payloads: list[Any],
    version: str,
    timestamp: str,
) -> dict[str, Any]:
    """
    Assemble le flux d'accueil.

    Args:
        ctx: Contexte de mise en forme
        payloads: Une reponse TMDB par section, dans l'ordre de HOME_SECTIONS
            (une section en echec est passee comme {"results": []})
        version: Version de l'application
        timestamp: Horodatage de la reponse

    Les sections vides sont omises.
    """
    sections = []
    for (title, default_type, layout), payload in zip(HOME_SECTIONS, payloads):
        items = shape_section_items(ctx, payload, default_type)
        if not items:
            continue
        sections.append({
            "title": title,
            "layout_type": layout,
            "item_count": len(items),
            "items": items,
        })

    return {
        "success": True,
        "data": sections,
        "meta": {
            "timestamp": timestamp,
            "version": version,
            "api_version": API_VERSION,
            "title": "Vyla - Home",
            "description": "Discover trending movies and TV shows",
            "canonical": "/",
            "type": "website",
            "image": featured_image(ctx, payloads),
        },
        "stats": {
            "total_sections": len(sections),
            "total_items": sum(section["item_count"] for section in sections),
        },
    }
