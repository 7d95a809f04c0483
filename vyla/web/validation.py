"""
Validation des parametres de chemin et de requete.

Les parametres arrivent bruts (chaines) et sont valides avant tout appel
amont ; chaque echec leve une ValidationError (400) qui rappelle la valeur
recue. Les memes regles s'appliquent a tous les endpoints equivalents.
"""

import json
import re
from typing import Any, Optional

from vyla.core.errors import ValidationError
from vyla.utils.constants import (
    DEFAULT_SORT,
    DISCOVER_SORT_OPTIONS,
    MAX_PAGE,
    MEDIA_TYPES,
    MIN_QUERY_LENGTH,
    PROXY_IMAGE_SIZES,
)

_INTEGER_RE = re.compile(r"^\s*[+-]?\d+\s*$")
_ENDPOINT_RE = re.compile(r"^/[A-Za-z0-9_\-/]+$")
_FILENAME_RE = re.compile(r"^[A-Za-z0-9_\-.]+$")


def _parse_int(value: Any) -> Optional[int]:
    """Entier strict ("12"), None pour "", "1.5", "abc"."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER_RE.match(value):
        return int(value)
    return None


def parse_media_type(value: Any) -> str:
    if value not in MEDIA_TYPES:
        raise ValidationError(
            'Invalid media type. Must be either "movie" or "tv"',
            {"type": value},
        )
    return value


def parse_positive_id(value: Any, name: str = "id") -> int:
    """Identifiant TMDB : entier strictement positif."""
    number = _parse_int(value)
    if number is None or number <= 0:
        raise ValidationError(f"Invalid {name}. Must be a positive integer", {name: value})
    return number


def parse_season(value: Any, minimum: int = 0, name: str = "season") -> int:
    """
    Numero de saison.

    Args:
        minimum: 0 pour les endpoints saison/episode (saison 0 = speciaux),
            1 pour l'endpoint lecteur
    """
    number = _parse_int(value)
    if number is None or number < minimum:
        qualifier = "non-negative" if minimum == 0 else f"an integer >= {minimum}"
        raise ValidationError(f"Invalid season number. Must be {qualifier}", {name: value})
    return number


def parse_episode(value: Any, name: str = "episode") -> int:
    number = _parse_int(value)
    if number is None or number < 1:
        raise ValidationError("Invalid episode number. Must be a positive integer", {name: value})
    return number


def parse_page(value: Any) -> int:
    """Page optionnelle (1 par defaut), entre 1 et MAX_PAGE."""
    if value is None:
        return 1
    number = _parse_int(value)
    if number is None or number < 1 or number > MAX_PAGE:
        raise ValidationError(
            f"Page must be an integer between 1 and {MAX_PAGE}", {"page": value}
        )
    return number


def parse_query(value: Any) -> str:
    """Texte de recherche, espaces retires, au moins MIN_QUERY_LENGTH caracteres."""
    query = value.strip() if isinstance(value, str) else ""
    if not query:
        raise ValidationError("Query parameter 'q' is required", {"q": value})
    if len(query) < MIN_QUERY_LENGTH:
        raise ValidationError(
            f"Query must be at least {MIN_QUERY_LENGTH} characters", {"q": value}
        )
    return query


def parse_sort(value: Any) -> str:
    if value is None:
        return DEFAULT_SORT
    if value not in DISCOVER_SORT_OPTIONS:
        raise ValidationError("Invalid sort_by value", {"sort_by": value})
    return value


def parse_list_endpoint(value: Any) -> str:
    """Chemin TMDB relatif (ex: "/movie/top_rated"), sans schema ni requete."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Query parameter 'endpoint' is required", {"endpoint": value})
    endpoint = value.strip()
    if not _ENDPOINT_RE.match(endpoint) or ".." in endpoint or "//" in endpoint:
        raise ValidationError("Invalid endpoint", {"endpoint": value})
    return endpoint.rstrip("/")


def parse_list_params(value: Any) -> dict[str, Any]:
    """Parametres supplementaires encodes en objet JSON."""
    if value is None or value == "":
        return {}
    try:
        params = json.loads(value)
    except (TypeError, ValueError) as e:
        raise ValidationError("Parameter 'params' must be valid JSON", {"params": value}) from e
    if not isinstance(params, dict):
        raise ValidationError("Parameter 'params' must be a JSON object", {"params": value})
    return params


def parse_image_size(value: Any) -> str:
    if value not in PROXY_IMAGE_SIZES:
        raise ValidationError(
            f"Invalid size. Must be one of: {', '.join(sorted(PROXY_IMAGE_SIZES))}",
            {"size": value},
        )
    return value


def parse_image_filename(value: Any) -> str:
    """Nom de fichier TMDB ; alphanumeriques, "-", "_" et "." uniquement."""
    filename = value[1:] if isinstance(value, str) and value.startswith("/") else value
    if not isinstance(filename, str) or not _FILENAME_RE.match(filename) or filename in (".", ".."):
        raise ValidationError("Invalid file parameter", {"file": value})
    return filename
