"""
Gestionnaires d'erreurs globaux.

Toute erreur est rendue avec le meme corps JSON :
    {"success": false, "error": "...", "request": {...}?, "timestamp": "...", "debug": {...}?}
"debug" n'apparait qu'en environnement de developpement.
"""

import traceback
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from vyla.core.errors import ApiError, InternalError, UpstreamError, ValidationError
from vyla.utils.helpers import utc_timestamp


def error_body(
    message: str,
    request_info: Optional[dict[str, Any]] = None,
    debug: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    body: dict[str, Any] = {"success": False, "error": message}
    if request_info:
        body["request"] = request_info
    body["timestamp"] = utc_timestamp()
    if debug:
        body["debug"] = debug
    return body


def _debug_info(request: Request, exc: BaseException) -> Optional[dict[str, Any]]:
    if not request.app.state.settings.debug:
        return None
    return {
        "type": type(exc).__name__,
        "message": str(exc),
        "traceback": traceback.format_exception(type(exc), exc, exc.__traceback__),
    }


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """ValidationError, NotFoundError, UpstreamError, InternalError."""
    request_info = exc.received if isinstance(exc, ValidationError) else None
    if isinstance(exc, UpstreamError):
        logger.warning(
            "Erreur amont",
            path=request.url.path,
            status=exc.status_code,
            upstream_status=exc.upstream_status,
            error=exc.message,
        )
    else:
        logger.info("Requete rejetee", path=request.url.path, status=exc.status_code, error=exc.message)

    debug = _debug_info(request, exc) if exc.status_code >= 500 else None
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message, request_info, debug),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Erreurs de validation FastAPI converties au format commun (400)."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = f"Invalid parameter {location}: {first.get('msg', 'invalid value')}".strip()
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(message),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """404 sur les chemins inconnus, 405, etc."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = f"Route not found: {request.method} {request.url.path}"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(message),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Erreur inattendue : 500, message masque hors developpement."""
    logger.exception("Erreur non geree", path=request.url.path)
    settings = request.app.state.settings
    error = InternalError(f"Internal server error: {exc}" if settings.debug else "Internal server error")
    return JSONResponse(
        status_code=error.status_code,
        content=error_body(error.message, debug=_debug_info(request, exc)),
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
