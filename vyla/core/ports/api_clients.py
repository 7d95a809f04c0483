"""
Interfaces ports pour le client du fournisseur de métadonnées.

Le port définit le contrat minimal (fetch) ; l'adaptateur TMDB fournit
les opérations de confort construites par-dessus.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class IMetadataClient(ABC):
    """
    Interface de base pour l'API de métadonnées films/séries.

    Discipline d'erreur : toute réponse non-2xx ou tout échec de transport
    lève une UpstreamError portant le statut amont (None pour le transport).
    """

    @abstractmethod
    async def fetch(
        self,
        path: str,
        params: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """
        Appelle un endpoint relatif du fournisseur.

        Args :
            path : Chemin relatif (ex: "/movie/603")
            params : Paramètres de requête fusionnés par-dessus les défauts

        Retourne :
            Le corps JSON décodé

        Lève :
            UpstreamError : réponse non-2xx, timeout ou erreur réseau
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Libère les connexions HTTP."""
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant du fournisseur (ex: 'tmdb')."""
        ...
