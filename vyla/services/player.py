"""
Generation des URLs de lecture embarquees.

Substitution litterale de {id}, {season} et {episode} dans les modeles du
catalogue. Aucun echappement : les valeurs sont des entiers valides en amont.
"""

from typing import Any, Iterable, Optional

from loguru import logger

from vyla.core.value_objects import MediaType, PlayerSource

MOVIE_PLACEHOLDERS = ("{id}",)
TV_PLACEHOLDERS = ("{id}", "{season}", "{episode}")


class PlayerTemplateError(ValueError):
    """Un modele d'URL du catalogue ne contient pas un placeholder requis."""

    def __init__(self, source_id: str, media_type: str, missing: list[str]) -> None:
        self.source_id = source_id
        self.media_type = media_type
        self.missing = missing
        super().__init__(
            f"Source '{source_id}' ({media_type}): placeholder(s) manquant(s) {', '.join(missing)}"
        )


class PlayerUrlFormatter:
    """Remplace les placeholders d'un modele, apres en avoir verifie la presence."""

    @staticmethod
    def check(source: PlayerSource) -> None:
        """
        Verifie les deux modeles d'une source.

        Raises:
            PlayerTemplateError: Placeholder absent d'un modele
        """
        for media_type, template, required in (
            (MediaType.MOVIE.value, source.movie_template, MOVIE_PLACEHOLDERS),
            (MediaType.TV.value, source.tv_template, TV_PLACEHOLDERS),
        ):
            missing = [p for p in required if p not in template]
            if missing:
                raise PlayerTemplateError(source.id, media_type, missing)

    @staticmethod
    def format(template: str, media_id: int, season: int = 1, episode: int = 1) -> str:
        return (
            template
            .replace("{id}", str(media_id))
            .replace("{season}", str(season))
            .replace("{episode}", str(episode))
        )


class PlayerService:
    """
    Service de generation des sources de lecture.

    Le catalogue est verifie a la construction (au demarrage, via le
    container) puis reste immuable.
    """

    def __init__(self, sources: Iterable[PlayerSource]) -> None:
        self._sources = tuple(sources)
        for source in self._sources:
            PlayerUrlFormatter.check(source)
        logger.debug("Catalogue de lecteurs charge", count=len(self._sources))

    @property
    def sources(self) -> tuple[PlayerSource, ...]:
        return self._sources

    def stream_url(
        self,
        source: PlayerSource,
        media_type: str,
        media_id: int,
        season: Optional[int] = None,
        episode: Optional[int] = None,
    ) -> str:
        if media_type == MediaType.TV.value:
            # Valeurs par defaut : le handler exige deja saison et episode
            return PlayerUrlFormatter.format(
                source.tv_template, media_id, season or 1, episode or 1
            )
        return PlayerUrlFormatter.format(source.movie_template, media_id)

    def generate(
        self,
        media_type: str,
        media_id: int,
        season: Optional[int] = None,
        episode: Optional[int] = None,
    ) -> list[dict[str, Any]]:
        """
        Une entree par source configuree, dans l'ordre du catalogue.

        Args:
            media_type: "movie" ou "tv"
            media_id: ID TMDB
            season: Numero de saison (tv), 1 si absent
            episode: Numero d'episode (tv), 1 si absent
        """
        return [
            {
                "id": source.id,
                "name": source.name,
                "stream_url": self.stream_url(source, media_type, media_id, season, episode),
                "is_french": source.is_french,
                "needs_sandbox": source.needs_sandbox,
                "start_time_param": source.start_time_param,
                "time_format": source.time_format,
                "supports_events": source.supports_events,
                "event_origin": source.event_origin,
            }
            for source in self._sources
        ]
