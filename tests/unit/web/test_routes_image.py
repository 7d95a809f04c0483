"""Tests du proxy d'images."""

import gzip
from unittest.mock import AsyncMock

import httpx
from fastapi.testclient import TestClient

from vyla.core.errors import UpstreamError
from vyla.utils.constants import FALLBACK_IMAGE


class ChunkStream(httpx.AsyncByteStream):
    """Corps amont non lu, comme une reponse ouverte avec stream=True."""

    def __init__(self, *chunks: bytes) -> None:
        self.chunks = chunks

    async def __aiter__(self):
        for chunk in self.chunks:
            yield chunk


def _upstream(*chunks: bytes, **headers: str) -> httpx.Response:
    return httpx.Response(
        200,
        headers={name.replace("_", "-"): value for name, value in headers.items()},
        stream=ChunkStream(*chunks),
    )


class TestImageProxy:
    def test_streams_upstream_bytes(self, client: TestClient, mock_tmdb: AsyncMock):
        upstream = _upstream(b"\x89PNG", b"data", content_type="image/png")
        mock_tmdb.open_image.return_value = upstream

        resp = client.get("/api/image/w500/abc.png")

        assert resp.status_code == 200
        assert resp.content == b"\x89PNGdata"
        assert resp.headers["content-type"] == "image/png"
        assert resp.headers["cache-control"] == "public, max-age=31536000, immutable"
        assert resp.headers["x-image-source"] == "TMDB"
        assert resp.headers["x-image-size"] == "w500"
        assert upstream.is_closed
        mock_tmdb.open_image.assert_awaited_once_with("w500", "abc.png")

    def test_default_content_type(self, client: TestClient, mock_tmdb: AsyncMock):
        mock_tmdb.open_image.return_value = _upstream(b"\xff\xd8jpeg")

        resp = client.get("/api/image/w500/abc.jpg")

        assert resp.headers["content-type"] == "image/jpeg"

    def test_encoded_body_relayed_unchanged(self, client: TestClient, mock_tmdb: AsyncMock):
        raw = gzip.compress(b"\xff\xd8jpeg")
        mock_tmdb.open_image.return_value = _upstream(
            raw,
            content_type="image/jpeg",
            content_encoding="gzip",
            content_length=str(len(raw)),
        )

        with client.stream("GET", "/api/image/original/abc.jpg") as resp:
            received = b"".join(resp.iter_raw())

        assert resp.status_code == 200
        assert received == raw
        assert resp.headers["content-encoding"] == "gzip"
        assert resp.headers["content-length"] == str(len(raw))

    def test_fallback_on_upstream_failure(self, client: TestClient, mock_tmdb: AsyncMock):
        mock_tmdb.open_image.side_effect = UpstreamError("Image CDN returned 404", upstream_status=404)

        resp = client.get("/api/image/w342/missing.jpg")

        assert resp.status_code == 404
        assert resp.content == FALLBACK_IMAGE
        assert resp.headers["content-type"] == "image/png"
        assert resp.headers["cache-control"] == "public, max-age=3600"
        assert resp.headers["x-image-source"] == "Fallback"
        assert "content-encoding" not in resp.headers

    def test_invalid_size(self, client: TestClient, mock_tmdb: AsyncMock):
        resp = client.get("/api/image/w9999/abc.jpg")

        assert resp.status_code == 400
        mock_tmdb.open_image.assert_not_called()

    def test_invalid_filename(self, client: TestClient, mock_tmdb: AsyncMock):
        assert client.get("/api/image/w500/a%20b.jpg").status_code == 400
        assert client.get("/api/image/w500/dir/abc.jpg").status_code == 400
        mock_tmdb.open_image.assert_not_called()
