"""
Configuration de la base de donnees pour RestAPI.

Ce module fournit :
- Engine SQLAlchemy cree a la demande depuis la configuration
- Session factory
- Fonction d'initialisation des tables

La base de donnees est configuree via RESTAPI_DATABASE_URL (defaut: sqlite:///restapi.db).
"""

from collections.abc import Generator
from pathlib import Path
from typing import Optional

from loguru import logger
from sqlalchemy import Engine, make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

# Engine global - initialise lors du premier appel a get_engine()
_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """
    Retourne l'engine, en le creant si necessaire.

    Utilise la configuration de l'application pour l'URL de la BDD.
    """
    global _engine
    if _engine is None:
        from restapi.config import Settings
        settings = Settings()

        db_url = settings.database_url
        kwargs = {}
        if settings.is_sqlite:
            kwargs["connect_args"] = {"check_same_thread": False}
            database = make_url(db_url).database
            if database in (None, "", ":memory:"):
                # Une seule connexion partagee, sinon chaque session voit une base vide
                kwargs["poolclass"] = StaticPool
            else:
                Path(database).parent.mkdir(exist_ok=True, parents=True)

        _engine = create_engine(db_url, echo=settings.database_echo, **kwargs)
        logger.debug(f"Engine cree: {db_url}")
    return _engine


def dispose_engine() -> None:
    """Ferme les connexions et oublie l'engine global."""
    global _engine
    if _engine is not None:
        _engine.dispose()
        _engine = None


def get_session() -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Utilisation avec next() :
        session = next(get_session())

    Yields:
        Session SQLModel connectee a l'engine
    """
    with Session(get_engine()) as session:
        yield session


def init_db() -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Doit etre appelee une fois au demarrage de l'application.
    """
    # Import des modeles pour enregistrer leurs metadonnees
    from restapi.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(get_engine())
