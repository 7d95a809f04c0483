"""
Exceptions du domaine Vyla.

Chaque exception porte le code HTTP sous lequel elle est rendue par la couche web :
- ValidationError : paramètres invalides ou manquants (400)
- NotFoundError : ressource absente chez le fournisseur (404)
- UpstreamError : réponse non-2xx ou échec de transport TMDB (statut amont ou 500)
- InternalError : erreur inattendue (500)
"""

from typing import Any, Optional


class ApiError(Exception):
    """
    Base des erreurs rendues en JSON par le gestionnaire global.

    Attributes:
        message: Message lisible renvoyé dans le champ "error"
        status_code: Code HTTP de la réponse
    """

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(ApiError):
    """
    Paramètre de requête invalide, détecté avant tout appel amont.

    Attributes:
        received: Valeurs reçues, renvoyées dans le champ "request" de l'erreur
    """

    status_code = 400

    def __init__(self, message: str, received: Optional[dict[str, Any]] = None) -> None:
        self.received = received
        super().__init__(message)


class NotFoundError(ApiError):
    """Le fournisseur confirme l'absence de la ressource principale."""

    status_code = 404

    def __init__(self, resource: str, resource_id: Optional[Any] = None) -> None:
        message = f"{resource} not found"
        if resource_id is not None:
            message += f": {resource_id}"
        super().__init__(message)


class UpstreamError(ApiError):
    """
    Echec d'un appel au fournisseur de métadonnées.

    Attributes:
        upstream_status: Code HTTP renvoyé par TMDB, None pour un échec de transport
            (connexion, timeout, corps illisible)
    """

    def __init__(self, message: str, upstream_status: Optional[int] = None) -> None:
        self.upstream_status = upstream_status
        status = upstream_status if upstream_status and 400 <= upstream_status < 600 else 500
        super().__init__(message, status)

    @property
    def is_not_found(self) -> bool:
        return self.upstream_status == 404


class InternalError(ApiError):
    """Erreur inattendue, message masqué en production."""

    status_code = 500
