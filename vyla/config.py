"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe VYLA_,
et peut optionnellement être fournie via un fichier .env.

La clé API TMDB est optionnelle au démarrage : sans elle, chaque appel amont
échoue avec une UpstreamError (401 renvoyé par TMDB).
"""

import json
from pathlib import Path
from typing import Annotated, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de vyla/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe VYLA_.
    Exemple : VYLA_ENVIRONMENT=development

    Les listes (origines CORS) acceptent une chaîne séparée par des virgules
    ou une liste JSON.
    """

    model_config = SettingsConfigDict(
        env_prefix="VYLA_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # TMDB
    tmdb_api_key: Optional[str] = Field(default=None)
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3")
    tmdb_image_base_url: str = Field(default="https://image.tmdb.org/t/p")
    tmdb_language: str = Field(default="en-US")
    tmdb_timeout: float = Field(default=10.0, gt=0)

    # Serveur HTTP
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001, ge=1, le=65535)
    api_prefix: str = Field(default="/api")
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default=["http://localhost:3000", "http://localhost:3001"]
    )
    environment: Literal["production", "development", "test"] = Field(default="production")
    static_dir: Optional[Path] = Field(default=None)

    # Images : URL directe vers le CDN TMDB ou chemin du proxy interne
    image_mode: Literal["proxy", "direct"] = Field(default="proxy")

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Optional[Path] = Field(default=Path("logs/vyla.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v: str | list[str]) -> list[str]:
        """Accepte "a,b", '["a", "b"]' ou une liste."""
        if not isinstance(v, str):
            return v
        raw = v.strip()
        if raw.startswith("["):
            try:
                origins = json.loads(raw)
            except json.JSONDecodeError as e:
                raise ValueError(f"Liste JSON d'origines invalide: {e.msg}") from e
            if not isinstance(origins, list) or not all(isinstance(o, str) for o in origins):
                raise ValueError("Les origines CORS doivent être une liste de chaînes")
            return [origin.strip() for origin in origins if origin.strip()]
        return [origin.strip() for origin in raw.split(",") if origin.strip()]

    @field_validator("api_prefix")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        """Préfixe sans slash final, vide autorisé ("/api/" -> "/api")."""
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = f"/{v}"
        return v

    @field_validator("static_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path | None) -> Path | None:
        """Étend ~ vers le répertoire home dans les chemins."""
        if v is None or v == "":
            return None
        return Path(v).expanduser()

    @property
    def debug(self) -> bool:
        """Les traces d'erreur ne sont exposées qu'en développement."""
        return self.environment == "development"

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si l'API TMDB est configurée."""
        return bool(self.tmdb_api_key)
