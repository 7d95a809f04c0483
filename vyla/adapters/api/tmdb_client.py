"""
Client TMDB pour l'agrégation des métadonnées films et séries.

Implemente l'interface IMetadataClient pour TMDB (The Movie Database).
Chaque appel atteint TMDB : pas de cache, pas de retry, un timeout fixe.
Toute réponse non-2xx ou tout échec de transport lève une UpstreamError.

Usage:
    client = TMDBClient(api_key="your_key")
    details = await client.get_details("movie", 603)
    async for chunk in (await client.open_image("w500", "abc.jpg")).aiter_raw():
        ...
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from vyla.core.errors import UpstreamError
from vyla.core.ports.api_clients import IMetadataClient
from vyla.utils.constants import NETFLIX_NETWORK_ID


class TMDBClient(IMetadataClient):
    """
    Client API TMDB.

    Implemente IMetadataClient avec:
    - fetch() : appel générique, paramètres par défaut (api_key, language)
      fusionnés sous les paramètres de l'appelant
    - Opérations de confort (trending, discover, details, credits, ...)
    - open_image() : flux d'une image du CDN TMDB pour le proxy

    Attributes:
        TMDB_BASE_URL: URL de base de l'API TMDB v3
        TMDB_IMAGE_BASE_URL: URL de base du CDN d'images

    Example:
        client = TMDBClient(api_key="xxx")
        page = await client.search_multi("matrix", page=1)
        for row in page["results"]:
            print(row.get("title") or row.get("name"))
        await client.close()
    """

    TMDB_BASE_URL = "https://api.themoviedb.org/3"
    TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p"

    def __init__(
        self,
        api_key: Optional[str],
        language: str = "en-US",
        timeout: float = 10.0,
        base_url: str = TMDB_BASE_URL,
        image_base_url: str = TMDB_IMAGE_BASE_URL,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API TMDB (v3) ou Read Access Token (v4)
            language: Langue par défaut des réponses
            timeout: Timeout unique par requête, en secondes
            base_url: URL de base de l'API
            image_base_url: URL de base du CDN d'images
        """
        self._api_key = api_key or ""
        self._language = language
        self._timeout = timeout
        self._base_url = base_url.rstrip("/")
        self._image_base_url = image_base_url.rstrip("/")
        self._client: Optional[httpx.AsyncClient] = None
        self._image_client: Optional[httpx.AsyncClient] = None

    @property
    def _is_v4_token(self) -> bool:
        # v3 : 32 caracteres hex ; v4 : long JWT
        return len(self._api_key) > 40

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Supporte les deux modes d'authentification TMDB:
        - API Key v3 (32 caracteres hex) : passe en parametre api_key
        - Read Access Token v4 (long JWT) : passe en header Bearer

        Returns:
            httpx.AsyncClient configure pour l'API TMDB
        """
        if self._client is None or self._client.is_closed:
            headers = {"Accept": "application/json"}
            if self._is_v4_token:
                headers["Authorization"] = f"Bearer {self._api_key}"

            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=headers,
                timeout=self._timeout,
            )
        return self._client

    def _get_image_client(self) -> httpx.AsyncClient:
        """Client HTTP dedie au CDN d'images (lazy init)."""
        if self._image_client is None or self._image_client.is_closed:
            self._image_client = httpx.AsyncClient(
                base_url=self._image_base_url,
                headers={"Accept": "image/*"},
                timeout=self._timeout,
            )
        return self._image_client

    def default_params(self) -> dict[str, Any]:
        """Parametres attaches a chaque appel (surchargeables par l'appelant)."""
        params: dict[str, Any] = {"language": self._language}
        if self._api_key and not self._is_v4_token:
            params["api_key"] = self._api_key
        return params

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "tmdb"

    async def fetch(
        self,
        path: str,
        params: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """
        Appelle un endpoint TMDB et retourne le JSON decode.

        Args:
            path: Chemin relatif (ex: "/movie/603")
            params: Parametres de requete, fusionnes par-dessus les defauts

        Returns:
            Corps JSON de la reponse

        Raises:
            UpstreamError: Statut non-2xx (upstream_status renseigne) ou
                echec de transport / timeout (upstream_status None)
        """
        query = {**self.default_params(), **(params or {})}
        # Un parametre a None n'est pas transmis
        query = {k: v for k, v in query.items() if v is not None}

        client = self._get_client()
        try:
            response = await client.get(path, params=query)
        except httpx.TimeoutException as e:
            logger.warning("Timeout TMDB", path=path)
            raise UpstreamError(f"TMDB request timed out: {path}") from e
        except httpx.HTTPError as e:
            logger.warning("Echec transport TMDB", path=path, error=str(e))
            raise UpstreamError(f"TMDB request failed: {e}") from e

        if not response.is_success:
            message = _status_message(response) or f"TMDB returned {response.status_code}"
            logger.warning(
                "Erreur TMDB", path=path, status=response.status_code, message=message
            )
            raise UpstreamError(message, upstream_status=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError(f"Invalid JSON from TMDB: {path}") from e

        logger.debug("Appel TMDB", path=path, status=response.status_code)
        return data

    async def open_image(self, size: str, filename: str) -> httpx.Response:
        """
        Ouvre un flux vers une image du CDN TMDB.

        L'appelant doit fermer la reponse (aclose) une fois le flux consomme.

        Args:
            size: Taille TMDB (ex: "w500", "original")
            filename: Nom de fichier sans slash (ex: "abc.jpg")

        Returns:
            httpx.Response ouverte en mode streaming

        Raises:
            UpstreamError: Statut non-2xx ou echec de transport
        """
        client = self._get_image_client()
        request = client.build_request("GET", f"/{size}/{filename}")
        try:
            response = await client.send(request, stream=True)
        except httpx.HTTPError as e:
            raise UpstreamError(f"Image request failed: {e}") from e

        if not response.is_success:
            await response.aclose()
            raise UpstreamError(
                f"Image CDN returned {response.status_code}",
                upstream_status=response.status_code,
            )
        return response

    # --- Operations de confort ------------------------------------------------

    async def get_trending(self, media_type: str = "all", window: str = "day") -> dict[str, Any]:
        return await self.fetch(f"/trending/{media_type}/{window}")

    async def get_top_rated(self, media_type: str) -> dict[str, Any]:
        return await self.fetch(f"/{media_type}/top_rated")

    async def get_netflix_originals(self) -> dict[str, Any]:
        return await self.discover("tv", with_networks=NETFLIX_NETWORK_ID)

    async def get_movies_by_genre(self, genre_id: int) -> dict[str, Any]:
        return await self.discover("movie", with_genres=genre_id)

    async def discover(self, media_type: str, **params: Any) -> dict[str, Any]:
        """Recherche par criteres (/discover/movie ou /discover/tv)."""
        return await self.fetch(f"/discover/{media_type}", params)

    async def search_multi(self, query: str, page: int = 1) -> dict[str, Any]:
        """Recherche multi-types (films, series, personnes)."""
        return await self.fetch(
            "/search/multi",
            {"query": query, "page": page, "include_adult": "false"},
        )

    async def get_details(self, media_type: str, media_id: int) -> dict[str, Any]:
        return await self.fetch(f"/{media_type}/{media_id}")

    async def get_credits(self, media_type: str, media_id: int) -> dict[str, Any]:
        return await self.fetch(f"/{media_type}/{media_id}/credits")

    async def get_recommendations(self, media_type: str, media_id: int) -> dict[str, Any]:
        return await self.fetch(f"/{media_type}/{media_id}/recommendations")

    async def get_videos(self, media_type: str, media_id: int) -> dict[str, Any]:
        return await self.fetch(f"/{media_type}/{media_id}/videos")

    async def get_person(self, person_id: int) -> dict[str, Any]:
        return await self.fetch(f"/person/{person_id}")

    async def get_person_credits(self, person_id: int) -> dict[str, Any]:
        return await self.fetch(f"/person/{person_id}/combined_credits")

    async def get_season(self, tv_id: int, season_number: int) -> dict[str, Any]:
        return await self.fetch(f"/tv/{tv_id}/season/{season_number}")

    async def get_episode(
        self, tv_id: int, season_number: int, episode_number: int
    ) -> dict[str, Any]:
        return await self.fetch(
            f"/tv/{tv_id}/season/{season_number}/episode/{episode_number}"
        )

    async def get_genres(self, media_type: str) -> dict[str, Any]:
        return await self.fetch(f"/genre/{media_type}/list")

    async def close(self) -> None:
        """
        Ferme les clients HTTP.

        Doit etre appele a l'arret de l'application pour liberer
        les ressources reseau.
        """
        for client in (self._client, self._image_client):
            if client is not None and not client.is_closed:
                await client.aclose()
        self._client = None
        self._image_client = None


def _status_message(response: httpx.Response) -> Optional[str]:
    """Extrait status_message d'un corps d'erreur TMDB, si present."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        return body.get("status_message")
    return None
