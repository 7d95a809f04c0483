"""
Proxy d'images TMDB.

Les octets du CDN sont relayes tels quels (streaming) avec un cache long ;
en cas d'echec amont, un PNG transparent 1x1 est servi en 404.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response, StreamingResponse
from loguru import logger
from starlette.background import BackgroundTask

from ...adapters.api.tmdb_client import TMDBClient
from ...core.errors import UpstreamError
from ...utils.constants import FALLBACK_CACHE_SECONDS, FALLBACK_IMAGE, IMAGE_CACHE_SECONDS
from ..deps import get_tmdb_client
from ..validation import parse_image_filename, parse_image_size

router = APIRouter()

RELAYED_HEADERS = ("content-length", "content-encoding")


def fallback_response() -> Response:
    return Response(
        content=FALLBACK_IMAGE,
        status_code=404,
        media_type="image/png",
        headers={
            "Cache-Control": f"public, max-age={FALLBACK_CACHE_SECONDS}",
            "X-Image-Source": "Fallback",
        },
    )


@router.get("/image/{size}/{filename:path}")
async def proxy_image(
    size: str,
    filename: str,
    client: TMDBClient = Depends(get_tmdb_client),
):
    image_size = parse_image_size(size)
    image_file = parse_image_filename(filename)

    try:
        upstream = await client.open_image(image_size, image_file)
    except UpstreamError as e:
        logger.warning("Image indisponible", size=image_size, file=image_file, error=e.message)
        return fallback_response()

    headers = {
        "Cache-Control": f"public, max-age={IMAGE_CACHE_SECONDS}, immutable",
        "X-Image-Source": "TMDB",
        "X-Image-Size": image_size,
    }
    # Octets bruts : l'encodage amont est relaye, pas decode
    for name in RELAYED_HEADERS:
        if name in upstream.headers:
            headers[name] = upstream.headers[name]

    return StreamingResponse(
        upstream.aiter_raw(),
        media_type=upstream.headers.get("content-type", "image/jpeg"),
        headers=headers,
        background=BackgroundTask(upstream.aclose),
    )
