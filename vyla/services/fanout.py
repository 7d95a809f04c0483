"""
Appels amont paralleles.

Un handler assemble sa reponse a partir d'une liste fixe d'appels
independants, lances ensemble avec asyncio.gather. Chaque appel est
soit principal (son echec fait echouer la requete), soit secondaire
(son echec est journalise et remplace par une valeur par defaut).
"""

import asyncio
from typing import Any, Awaitable

from loguru import logger

from vyla.core.errors import NotFoundError, UpstreamError


async def gather_settled(
    *calls: Awaitable[dict[str, Any]],
    labels: tuple[str, ...] = (),
) -> list[dict[str, Any] | UpstreamError]:
    """
    Attend tous les appels ; les UpstreamError sont retournees, pas levees.

    Toute autre exception (bug) est propagee.
    """
    results = await asyncio.gather(*calls, return_exceptions=True)
    settled: list[dict[str, Any] | UpstreamError] = []
    for index, result in enumerate(results):
        if isinstance(result, UpstreamError):
            label = labels[index] if index < len(labels) else str(index)
            logger.warning("Appel amont en echec", call=label, error=result.message)
        elif isinstance(result, BaseException):
            raise result
        settled.append(result)
    return settled


def or_default(result: dict[str, Any] | UpstreamError, default: dict[str, Any]) -> dict[str, Any]:
    """Valeur d'un appel secondaire, ou la valeur par defaut s'il a echoue."""
    if isinstance(result, UpstreamError) or not isinstance(result, dict):
        return default
    return result


def require_primary(
    result: dict[str, Any] | UpstreamError,
    resource: str,
    resource_id: Any = None,
) -> dict[str, Any]:
    """
    Valeur d'un appel principal.

    Raises:
        NotFoundError: TMDB repond 404 ou la charge utile n'a pas d'id
        UpstreamError: Tout autre echec amont
    """
    if isinstance(result, UpstreamError):
        if result.is_not_found:
            raise NotFoundError(resource, resource_id) from result
        raise result
    if not isinstance(result, dict) or result.get("id") is None:
        raise NotFoundError(resource, resource_id)
    return result
