"""
Objets valeur immutables du domaine.

- MediaType : type de média exposé par l'API (movie, tv)
- PaginationMeta : métadonnées de pagination dérivées d'une réponse TMDB
- PlayerSource : source de lecture embarquée, chargée une fois au démarrage
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class MediaType(str, Enum):
    """Les deux types de média exposés par TMDB et par l'API."""

    MOVIE = "movie"
    TV = "tv"


@dataclass(frozen=True)
class PaginationMeta:
    """
    Pagination d'une liste de résultats.

    Attributs :
        page : Page courante (>= 1)
        total_pages : Nombre total de pages annoncé par TMDB
        total_results : Nombre total de résultats annoncé par TMDB

    Propriétés :
        has_next : page < total_pages
        has_prev : page > 1
    """

    page: int
    total_pages: int = 0
    total_results: int = 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @classmethod
    def from_payload(cls, payload: dict[str, Any], requested_page: int = 1) -> "PaginationMeta":
        """Construit la pagination depuis une réponse TMDB (page, total_pages, total_results)."""
        return cls(
            page=int(payload.get("page") or requested_page),
            total_pages=int(payload.get("total_pages") or 0),
            total_results=int(payload.get("total_results") or 0),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "page": self.page,
            "total_pages": self.total_pages,
            "total_results": self.total_results,
            "has_next": self.has_next,
            "has_prev": self.has_prev,
        }


@dataclass(frozen=True)
class PlayerSource:
    """
    Source de lecture embarquée (iframe) configurée statiquement.

    Attributs :
        id : Identifiant stable de la source
        name : Libellé affiché
        movie_template : Modèle d'URL film, contient {id}
        tv_template : Modèle d'URL série, contient {id}, {season} et {episode}
        is_french : Source en langue française
        needs_sandbox : L'iframe doit être restreinte (attribut sandbox)
        supports_events : Le lecteur émet des événements postMessage
        event_origin : Origine attendue des événements postMessage
        start_time_param : Nom du paramètre de reprise de lecture
        time_format : Format du paramètre de reprise ("seconds" ou "hms")
    """

    id: str
    name: str
    movie_template: str
    tv_template: str
    is_french: bool = False
    needs_sandbox: bool = False
    supports_events: bool = False
    event_origin: Optional[str] = None
    start_time_param: Optional[str] = None
    time_format: Optional[str] = None
