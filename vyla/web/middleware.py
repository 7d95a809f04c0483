"""
Middleware ASGI de journalisation et de comptage des requetes.

- Incremente request_count pour chaque requete HTTP
- Incremente error_count pour les reponses >= 400 et les exceptions non gerees
- Journalise methode, chemin, statut et duree
"""

import time

from loguru import logger
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from vyla.services.metrics import MetricsRegistry


class RequestMetricsMiddleware:
    """Middleware ASGI pur ; le registre est injecte a l'installation."""

    def __init__(self, app: ASGIApp, metrics: MetricsRegistry) -> None:
        self.app = app
        self.metrics = metrics

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        self.metrics.record_request()
        started = time.perf_counter()
        status_code = 500

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception:
            self.metrics.record_error()
            raise
        else:
            if status_code >= 400:
                self.metrics.record_error()
        finally:
            duration_ms = round((time.perf_counter() - started) * 1000, 1)
            logger.info(
                "{method} {path} -> {status} ({duration} ms)",
                method=scope.get("method"),
                path=scope.get("path"),
                status=status_code,
                duration=duration_ms,
            )
