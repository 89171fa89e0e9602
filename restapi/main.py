"""
Point d'entrée CLI de RestAPI.

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
    name="restapi",
    help="Backend de gestion des employés et des entreprises",
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
    table = Table(title="Configuration RestAPI")
    table.add_column("Paramètre", style="cyan")
    table.add_column("Valeur")
    table.add_row("Base de données", config.database_url)
    table.add_row("Serveur", f"{config.host}:{config.port}")
    table.add_row("Niveau de log", config.log_level)
    table.add_row("Fichier de log", str(config.log_file))
    console.print(table)


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"RestAPI v{__version__}")


@app.command(name="init-db")
def init_db() -> None:
    """Crée les tables de la base de données si nécessaire."""
    container.database.init()
    typer.echo(f"Base de données initialisée : {get_config().database_url}")


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Adresse d'écoute")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'écoute")] = None,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web RestAPI."""
    import uvicorn

    config = get_config()
    host = host or config.host
    port = port or config.port
    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    # log_config=None : uvicorn garde les handlers poses par configure_logging
    uvicorn.run("restapi.web.app:app", host=host, port=port, reload=reload, log_config=None)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(settings)

    # Initialise la base de données (crée les tables si nécessaire)
    container.database.init()

    logger.info("Démarrage de RestAPI", version=__version__)

    app()


if __name__ == "__main__":
    main()
