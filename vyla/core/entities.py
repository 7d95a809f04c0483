"""
Media metadata entities.

Transient, request-scoped DTOs derived from TMDB payloads. Nothing is stored:
each entity is built by a shaper and serialised with to_dict().
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Optional


@dataclass
class _Serializable:
    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class MediaSummary(_Serializable):
    """
    Summary of a movie or TV show as it appears in lists.

    Attributes:
        id: TMDB numeric id
        type: "movie" or "tv"
        title: Resolved title (title, then name, then "Untitled")
        overview: Plot summary
        poster: Poster URL (direct or proxied)
        backdrop: Backdrop URL (direct or proxied)
        rating: vote_average rounded to one decimal, None when missing
        year: First four characters of the release/first air date
        release_date: Release date or first air date
        genre_ids: TMDB genre ids
        popularity: TMDB popularity score
        details_link: Path of the details endpoint for this item
    """

    id: int
    type: str
    title: str
    overview: Optional[str] = None
    poster: Optional[str] = None
    backdrop: Optional[str] = None
    rating: Optional[float] = None
    year: Optional[str] = None
    release_date: Optional[str] = None
    genre_ids: list[int] = field(default_factory=list)
    popularity: float = 0
    details_link: str = ""


@dataclass
class CastMember(_Serializable):
    """Actor credited on a movie, show or episode."""

    id: int
    name: str
    character: str
    profile: Optional[str] = None
    order: Optional[int] = None
    view_cast_link: str = ""


@dataclass
class CrewMember(_Serializable):
    """Crew member (director, writer) credited on a movie, show or episode."""

    id: int
    name: str
    job: str
    profile: Optional[str] = None


@dataclass
class Season(_Serializable):
    """Season of a TV show, keyed by (tv_id, number)."""

    number: int
    name: str
    overview: str
    episode_count: int = 0
    air_date: Optional[str] = None
    poster: Optional[str] = None


@dataclass
class Episode(_Serializable):
    """Episode of a season, keyed by (tv_id, season_number, episode_number)."""

    id: Optional[int]
    episode_number: int
    season_number: int
    name: str
    overview: str
    air_date: Optional[str] = None
    runtime: Optional[int] = None
    still: Optional[str] = None
    rating: Optional[float] = None
    vote_count: int = 0
    episode_link: str = ""
    player_link: str = ""
