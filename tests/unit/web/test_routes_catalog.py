"""Tests des routes accueil, recherche, fiches, personnes et listes."""

from unittest.mock import AsyncMock

from fastapi.testclient import TestClient

from vyla.core.errors import UpstreamError
from tests.fixtures.tmdb_responses import (
    TMDB_DISCOVER_RESPONSE,
    TMDB_MOVIE_CREDITS_RESPONSE,
    TMDB_MOVIE_DETAILS_RESPONSE,
    TMDB_MOVIE_RECOMMENDATIONS_RESPONSE,
    TMDB_MOVIE_VIDEOS_RESPONSE,
    TMDB_PERSON_CREDITS_RESPONSE,
    TMDB_PERSON_RESPONSE,
    TMDB_SEARCH_MULTI_RESPONSE,
    TMDB_TRENDING_RESPONSE,
    TMDB_TV_DETAILS_RESPONSE,
)


def _mock_movie(mock_tmdb: AsyncMock) -> None:
    mock_tmdb.get_details.return_value = TMDB_MOVIE_DETAILS_RESPONSE
    mock_tmdb.get_credits.return_value = TMDB_MOVIE_CREDITS_RESPONSE
    mock_tmdb.get_recommendations.return_value = TMDB_MOVIE_RECOMMENDATIONS_RESPONSE
    mock_tmdb.get_videos.return_value = TMDB_MOVIE_VIDEOS_RESPONSE


def _without_timestamp(body: dict) -> dict:
    meta = {key: value for key, value in body["meta"].items() if key != "timestamp"}
    return {**body, "meta": meta}


class TestHomeRoute:
    def test_all_sections(self, client: TestClient, mock_tmdb: AsyncMock):
        mock_tmdb.get_trending.return_value = TMDB_TRENDING_RESPONSE
        mock_tmdb.get_top_rated.return_value = TMDB_DISCOVER_RESPONSE
        mock_tmdb.get_netflix_originals.return_value = TMDB_TRENDING_RESPONSE
        mock_tmdb.get_movies_by_genre.return_value = TMDB_DISCOVER_RESPONSE

        resp = client.get("/api/home")

        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["stats"]["total_sections"] == 12
        assert body["data"][0]["title"] == "Trending Now"
        assert mock_tmdb.get_movies_by_genre.await_count == 7
        assert sorted(call.args[0] for call in mock_tmdb.get_movies_by_genre.await_args_list) == [
            16, 27, 28, 35, 99, 878, 10749
        ]

    def test_repeated_calls_are_identical(self, client: TestClient, mock_tmdb: AsyncMock):
        mock_tmdb.get_trending.return_value = TMDB_TRENDING_RESPONSE
        mock_tmdb.get_top_rated.return_value = TMDB_DISCOVER_RESPONSE
        mock_tmdb.get_netflix_originals.return_value = TMDB_TRENDING_RESPONSE
        mock_tmdb.get_movies_by_genre.return_value = TMDB_DISCOVER_RESPONSE

        first = client.get("/api/home").json()
        second = client.get("/api/home").json()

        assert _without_timestamp(first) == _without_timestamp(second)

    def test_failed_sections_are_omitted(self, client: TestClient, mock_tmdb: AsyncMock):
        mock_tmdb.get_trending.side_effect = UpstreamError("down", upstream_status=503)
        mock_tmdb.get_top_rated.side_effect = UpstreamError("timeout")
        mock_tmdb.get_netflix_originals.side_effect = UpstreamError("down", upstream_status=503)
        mock_tmdb.get_movies_by_genre.return_value = TMDB_DISCOVER_RESPONSE

        resp = client.get("/api/home")

        assert resp.status_code == 200
        titles = [section["title"] for section in resp.json()["data"]]
        assert "Trending Now" not in titles
        assert titles[0] == "Action Movies"
        assert len(titles) == 7

    def test_every_section_failed_still_200(self, client: TestClient, mock_tmdb: AsyncMock):
        for name in ("get_trending", "get_top_rated", "get_netflix_originals", "get_movies_by_genre"):
            getattr(mock_tmdb, name).side_effect = UpstreamError("down", upstream_status=500)

        resp = client.get("/api/home")

        assert resp.status_code == 200
        assert resp.json()["data"] == []


class TestSearchRoute:
    def test_single_character_rejected_before_upstream(self, client: TestClient, mock_tmdb: AsyncMock):
        resp = client.get("/api/search", params={"q": "a"})

        assert resp.status_code == 400
        body = resp.json()
        assert body["success"] is False
        assert body["request"] == {"q": "a"}
        assert "timestamp" in body
        mock_tmdb.search_multi.assert_not_called()

    def test_missing_query(self, client: TestClient):
        assert client.get("/api/search").status_code == 400

    def test_two_characters_forwarded(self, client: TestClient, mock_tmdb: AsyncMock):
        mock_tmdb.search_multi.return_value = TMDB_SEARCH_MULTI_RESPONSE

        resp = client.get("/api/search", params={"q": " ab ", "page": "2"})

        assert resp.status_code == 200
        mock_tmdb.search_multi.assert_awaited_once_with("ab", 2)
        assert resp.json()["meta"]["query"] == "ab"

    def test_invalid_page(self, client: TestClient, mock_tmdb: AsyncMock):
        assert client.get("/api/search", params={"q": "matrix", "page": "0"}).status_code == 400
        mock_tmdb.search_multi.assert_not_called()

    def test_upstream_failure_fails_request(self, client: TestClient, mock_tmdb: AsyncMock):
        mock_tmdb.search_multi.side_effect = UpstreamError("Invalid API key", upstream_status=401)

        resp = client.get("/api/search", params={"q": "matrix"})

        assert resp.status_code == 401
        assert resp.json()["error"] == "Invalid API key"


class TestDetailsRoute:
    def test_movie(self, client: TestClient, mock_tmdb: AsyncMock):
        _mock_movie(mock_tmdb)

        resp = client.get("/api/details/movie/603")

        assert resp.status_code == 200
        body = resp.json()
        assert body["info"]["id"] == 603
        assert body["info"]["type"] == "movie"
        assert body["info"]["poster_set"][-1]["url"] == "/api/image/w780/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg"
        assert len(body["cast"]) == 3
        mock_tmdb.get_details.assert_awaited_once_with("movie", 603)

    def test_repeated_calls_are_identical(self, client: TestClient, mock_tmdb: AsyncMock):
        _mock_movie(mock_tmdb)

        first = client.get("/api/details/movie/603").json()
        second = client.get("/api/details/movie/603").json()

        assert first["meta"]["timestamp"]
        assert _without_timestamp(first) == _without_timestamp(second)

    def test_tv(self, client: TestClient, mock_tmdb: AsyncMock):
        mock_tmdb.get_details.return_value = TMDB_TV_DETAILS_RESPONSE
        mock_tmdb.get_credits.return_value = {}
        mock_tmdb.get_recommendations.return_value = {"results": []}
        mock_tmdb.get_videos.return_value = {"results": []}

        body = client.get("/api/details/tv/1399").json()

        assert body["info"]["type"] == "tv"
        assert [season["number"] for season in body["seasons"]] == [1, 2]

    def test_invalid_type_rejected_before_upstream(self, client: TestClient, mock_tmdb: AsyncMock):
        resp = client.get("/api/details/person/603")

        assert resp.status_code == 400
        assert resp.json()["request"] == {"type": "person"}
        mock_tmdb.get_details.assert_not_called()

    def test_invalid_id(self, client: TestClient, mock_tmdb: AsyncMock):
        assert client.get("/api/details/movie/abc").status_code == 400
        assert client.get("/api/details/movie/-4").status_code == 400
        mock_tmdb.get_details.assert_not_called()

    def test_primary_404(self, client: TestClient, mock_tmdb: AsyncMock):
        _mock_movie(mock_tmdb)
        mock_tmdb.get_details.side_effect = UpstreamError("not found", upstream_status=404)

        resp = client.get("/api/details/movie/999999999")

        assert resp.status_code == 404
        assert resp.json()["error"] == "Movie not found: 999999999"

    def test_primary_transport_failure_is_500(self, client: TestClient, mock_tmdb: AsyncMock):
        _mock_movie(mock_tmdb)
        mock_tmdb.get_details.side_effect = UpstreamError("TMDB request failed: refused")

        resp = client.get("/api/details/movie/603")

        assert resp.status_code == 500
        assert resp.json()["success"] is False

    def test_secondary_failures_degrade(self, client: TestClient, mock_tmdb: AsyncMock):
        _mock_movie(mock_tmdb)
        mock_tmdb.get_credits.side_effect = UpstreamError("down", upstream_status=503)
        mock_tmdb.get_videos.side_effect = UpstreamError("down", upstream_status=503)

        resp = client.get("/api/details/movie/603")

        assert resp.status_code == 200
        body = resp.json()
        assert body["cast"] == []
        assert body["info"]["trailer_url"] is None
        assert len(body["related"]) == 2


class TestCastRoute:
    def test_person(self, client: TestClient, mock_tmdb: AsyncMock):
        mock_tmdb.get_person.return_value = TMDB_PERSON_RESPONSE
        mock_tmdb.get_person_credits.return_value = TMDB_PERSON_CREDITS_RESPONSE

        resp = client.get("/api/cast/6384")

        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["name"] == "Keanu Reeves"
        assert len(data["known_for"]["movies"]) == 2

    def test_credits_failure_degrades(self, client: TestClient, mock_tmdb: AsyncMock):
        mock_tmdb.get_person.return_value = TMDB_PERSON_RESPONSE
        mock_tmdb.get_person_credits.side_effect = UpstreamError("down", upstream_status=502)

        resp = client.get("/api/cast/6384")

        assert resp.status_code == 200
        assert resp.json()["data"]["known_for"] == {"movies": [], "shows": []}

    def test_unknown_person(self, client: TestClient, mock_tmdb: AsyncMock):
        mock_tmdb.get_person.side_effect = UpstreamError("not found", upstream_status=404)
        mock_tmdb.get_person_credits.side_effect = UpstreamError("not found", upstream_status=404)

        resp = client.get("/api/cast/1")

        assert resp.status_code == 404
        assert resp.json()["error"] == "Person not found: 1"

    def test_invalid_id(self, client: TestClient, mock_tmdb: AsyncMock):
        assert client.get("/api/cast/zero").status_code == 400
        mock_tmdb.get_person.assert_not_called()


class TestListRoute:
    def test_forwards_endpoint_params_and_page(self, client: TestClient, mock_tmdb: AsyncMock):
        mock_tmdb.fetch.return_value = TMDB_DISCOVER_RESPONSE

        resp = client.get(
            "/api/list",
            params={"endpoint": "/discover/movie", "params": '{"with_genres": 28}', "page": "2"},
        )

        assert resp.status_code == 200
        mock_tmdb.fetch.assert_awaited_once_with("/discover/movie", {"with_genres": 28, "page": 2})
        assert resp.json()["meta"]["endpoint"] == "/discover/movie"

    def test_missing_endpoint(self, client: TestClient, mock_tmdb: AsyncMock):
        assert client.get("/api/list").status_code == 400
        mock_tmdb.fetch.assert_not_called()

    def test_invalid_params_json(self, client: TestClient, mock_tmdb: AsyncMock):
        resp = client.get("/api/list", params={"endpoint": "/movie/popular", "params": "{oops"})

        assert resp.status_code == 400
        mock_tmdb.fetch.assert_not_called()

    def test_absolute_url_rejected(self, client: TestClient, mock_tmdb: AsyncMock):
        resp = client.get("/api/list", params={"endpoint": "https://evil.example/x"})

        assert resp.status_code == 400
        mock_tmdb.fetch.assert_not_called()
