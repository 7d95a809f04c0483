"""
Fonctions utilitaires partagees dans le projet Vyla.

Ce module centralise les petites derivations reutilisees par les shapers :
- round_rating : note TMDB arrondie a une decimale
- extract_year : annee depuis une date TMDB (YYYY-MM-DD)
- episode_identifier : identifiant SxxEyy
- utc_timestamp : horodatage ISO-8601 des reponses
"""

from datetime import datetime, timezone
from typing import Any, Optional


def round_rating(value: Any) -> Optional[float]:
    """
    Arrondit une note TMDB a une decimale.

    Une note absente, non numerique ou nulle (TMDB renvoie 0 quand
    personne n'a vote) donne None.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not value:
        return None
    return round(float(value), 1)


def extract_year(*dates: Optional[str]) -> Optional[str]:
    """Retourne les 4 premiers caracteres de la premiere date renseignee."""
    for date in dates:
        if isinstance(date, str) and len(date) >= 4:
            return date[:4]
    return None


def first_date(*dates: Optional[str]) -> Optional[str]:
    """Premiere date non vide (release_date puis first_air_date)."""
    for date in dates:
        if date:
            return date
    return None


def episode_identifier(season: int, episode: int) -> str:
    """S01E05."""
    return f"S{season:02d}E{episode:02d}"


def utc_timestamp() -> str:
    """Horodatage UTC ISO-8601 (suffixe Z)."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
