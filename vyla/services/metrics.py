"""
Compteurs de l'endpoint /status.

Un seul MetricsRegistry est construit par le container au demarrage et
transmis au middleware de journalisation des requetes.
"""

import threading
import time
from datetime import datetime, timezone
from typing import Any


class MetricsRegistry:
    """
    Compteurs de requetes et d'erreurs du processus.

    Increments proteges par un verrou (serveur multi-thread possible).
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._request_count = 0
        self._error_count = 0
        self._started_monotonic = time.monotonic()
        self.started_at = datetime.now(timezone.utc)

    def record_request(self) -> None:
        with self._lock:
            self._request_count += 1

    def record_error(self) -> None:
        with self._lock:
            self._error_count += 1

    @property
    def request_count(self) -> int:
        return self._request_count

    @property
    def error_count(self) -> int:
        return self._error_count

    @property
    def uptime_seconds(self) -> float:
        return time.monotonic() - self._started_monotonic

    def snapshot(self) -> dict[str, Any]:
        """Etat courant des compteurs."""
        with self._lock:
            requests, errors = self._request_count, self._error_count
        return {
            "request_count": requests,
            "error_count": errors,
            "error_rate": round(errors / requests, 4) if requests else 0.0,
            "started_at": self.started_at.isoformat(),
            "uptime_seconds": int(self.uptime_seconds),
        }


def format_uptime(seconds: float) -> str:
    """3725 -> "1h 2m 5s"."""
    seconds = int(seconds)
    return f"{seconds // 3600}h {(seconds % 3600) // 60}m {seconds % 60}s"
