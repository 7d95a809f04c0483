"""
Normalisation partagee par tous les shapers.

Une seule implementation des chaines de repli (titre, type, annee, note)
pour que chaque endpoint les applique dans le meme ordre.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from vyla.core.entities import CastMember, CrewMember, MediaSummary
from vyla.core.value_objects import MediaType, PaginationMeta
from vyla.services.images import ImageUrlBuilder
from vyla.utils.constants import DIRECTOR_JOBS, UNTITLED, WRITER_JOBS
from vyla.utils.helpers import extract_year, first_date, round_rating


@dataclass(frozen=True)
class Links:
    """Chemins de navigation internes, prefixes par le prefixe de l'API."""

    prefix: str = ""

    def details(self, media_type: str, media_id: Any) -> str:
        return f"{self.prefix}/details/{media_type}/{media_id}"

    def cast(self, person_id: Any) -> str:
        return f"{self.prefix}/cast/{person_id}"

    def player(
        self,
        media_type: str,
        media_id: Any,
        season: Optional[int] = None,
        episode: Optional[int] = None,
    ) -> str:
        link = f"{self.prefix}/player/{media_type}/{media_id}"
        if season is not None and episode is not None:
            link += f"?s={season}&e={episode}"
        return link

    def season(self, tv_id: Any, season: int) -> str:
        return f"{self.prefix}/tv/{tv_id}/season/{season}"

    def episode(self, tv_id: Any, season: int, episode: int) -> str:
        return f"{self.prefix}/episodes/{tv_id}/{season}/{episode}"

    def home(self) -> str:
        return f"{self.prefix}/home"


@dataclass(frozen=True)
class ShapingContext:
    """Dependances des shapers : fabrique d'images et liens (un par deploiement)."""

    images: ImageUrlBuilder
    links: Links


def resolve_title(raw: dict[str, Any]) -> str:
    """title (film), puis name (serie), puis "Untitled"."""
    return raw.get("title") or raw.get("name") or UNTITLED


def resolve_media_type(raw: dict[str, Any], default_type: Optional[str] = None) -> str:
    """media_type explicite, puis type par defaut, puis deduction via first_air_date."""
    media_type = raw.get("media_type")
    if media_type in (MediaType.MOVIE.value, MediaType.TV.value):
        return media_type
    if default_type:
        return default_type
    return MediaType.TV.value if raw.get("first_air_date") else MediaType.MOVIE.value


def normalize_item(
    ctx: ShapingContext,
    raw: dict[str, Any],
    default_type: Optional[str] = None,
    poster_size: str = "w342",
    backdrop_size: str = "w780",
) -> MediaSummary:
    """
    Convertit une ligne de resultat TMDB en MediaSummary.

    Args:
        ctx: Contexte de mise en forme
        raw: Ligne brute (film, serie ou resultat multi)
        default_type: Type a utiliser quand la ligne ne porte pas media_type
        poster_size: Taille du poster
        backdrop_size: Taille du backdrop
    """
    media_type = resolve_media_type(raw, default_type)
    release_date = raw.get("release_date")
    first_air_date = raw.get("first_air_date")
    return MediaSummary(
        id=raw.get("id"),
        type=media_type,
        title=resolve_title(raw),
        overview=raw.get("overview") or None,
        poster=ctx.images.build_url(raw.get("poster_path"), poster_size, "poster"),
        backdrop=ctx.images.build_url(raw.get("backdrop_path"), backdrop_size, "backdrop"),
        rating=round_rating(raw.get("vote_average")),
        year=extract_year(release_date, first_air_date),
        release_date=first_date(release_date, first_air_date),
        genre_ids=list(raw.get("genre_ids") or []),
        popularity=raw.get("popularity") or 0,
        details_link=ctx.links.details(media_type, raw.get("id")),
    )


def has_artwork(raw: Any) -> bool:
    """Ligne exploitable : un id et au moins un poster ou un backdrop."""
    return (
        isinstance(raw, dict)
        and raw.get("id") is not None
        and bool(raw.get("poster_path") or raw.get("backdrop_path"))
    )


def sort_by_popularity(items: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Tri stable par popularite decroissante."""
    return sorted(items, key=lambda item: item.get("popularity") or 0, reverse=True)


def results_of(payload: Any) -> list[dict[str, Any]]:
    """Liste "results" d'une reponse TMDB, vide si absente ou invalide."""
    if not isinstance(payload, dict):
        return []
    results = payload.get("results")
    if not isinstance(results, list):
        return []
    return [row for row in results if isinstance(row, dict)]


def shape_pagination(payload: dict[str, Any], requested_page: int = 1) -> dict[str, Any]:
    return PaginationMeta.from_payload(payload, requested_page).to_dict()


def shape_cast_member(ctx: ShapingContext, raw: dict[str, Any]) -> CastMember:
    return CastMember(
        id=raw.get("id"),
        name=raw.get("name") or "",
        character=raw.get("character") or "Unknown",
        profile=ctx.images.build_url(raw.get("profile_path"), "w185", "profile"),
        order=raw.get("order"),
        view_cast_link=ctx.links.cast(raw.get("id")),
    )


def shape_crew(ctx: ShapingContext, crew: Iterable[Any]) -> dict[str, list[dict[str, Any]]]:
    """Realisateurs et scenaristes d'une equipe technique."""
    directors, writers = [], []
    for raw in crew or []:
        if not isinstance(raw, dict):
            continue
        job = raw.get("job")
        if job in DIRECTOR_JOBS or job in WRITER_JOBS:
            member = CrewMember(
                id=raw.get("id"),
                name=raw.get("name") or "",
                job=job,
                profile=ctx.images.build_url(raw.get("profile_path"), "w185", "profile"),
            ).to_dict()
            (directors if job in DIRECTOR_JOBS else writers).append(member)
    return {"directors": directors, "writers": writers}
