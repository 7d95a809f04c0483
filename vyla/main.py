"""
Point d'entrée CLI de Vyla.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="vyla",
    help="API de catalogue films et series (TMDB)",
)
container = Container()
console = Console()


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()

    table = Table(title="Configuration Vyla")
    table.add_column("Parametre", style="cyan")
    table.add_column("Valeur")

    table.add_row("Environnement", config.environment)
    table.add_row("Ecoute", f"{config.host}:{config.port}")
    table.add_row("Prefixe API", config.api_prefix or "/")
    table.add_row("Origines CORS", ", ".join(config.cors_origins))
    table.add_row("API TMDB", "[green]activee[/green]" if config.tmdb_enabled else "[red]desactivee[/red]")
    table.add_row("Base TMDB", config.tmdb_base_url)
    table.add_row("Langue TMDB", config.tmdb_language)
    table.add_row("Images", config.image_mode)
    table.add_row("Fichiers statiques", str(config.static_dir) if config.static_dir else "-")
    table.add_row("Niveau de log", config.log_level)
    table.add_row("Fichier de log", str(config.log_file) if config.log_file else "-")

    console.print(table)


@app.command()
def sources() -> None:
    """Liste le catalogue des sources de lecture."""
    catalogue = container.player_service().sources

    table = Table(title=f"Sources de lecture ({len(catalogue)})")
    table.add_column("ID", style="cyan")
    table.add_column("Nom")
    table.add_column("FR", justify="center")
    table.add_column("Sandbox", justify="center")
    table.add_column("Evenements", justify="center")
    table.add_column("Reprise", style="dim")

    for source in catalogue:
        table.add_row(
            source.id,
            source.name,
            "x" if source.is_french else "",
            "x" if source.needs_sandbox else "",
            "x" if source.supports_events else "",
            f"{source.start_time_param} ({source.time_format})" if source.start_time_param else "",
        )

    console.print(table)


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Vyla v{__version__}")


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Adresse d'écoute")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'écoute")] = None,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur HTTP."""
    import uvicorn

    config = get_config()
    host = host or config.host
    port = port or config.port

    typer.echo(f"Démarrage du serveur sur {host}:{port}{config.api_prefix}")
    uvicorn.run(
        "vyla.web.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_config=None,
    )


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.debug("Démarrage de Vyla", version=__version__)

    app()


if __name__ == "__main__":
    main()
