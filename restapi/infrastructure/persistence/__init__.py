"""
Module de persistance pour RestAPI.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Configuration de l'engine, session factory, initialisation
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Implementations des ports IEmployeeRepository et ICompanyRepository

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.

Usage:
    from restapi.infrastructure.persistence import init_db, get_session

    init_db()  # Cree les tables si necessaire
    session = next(get_session())
"""

from restapi.infrastructure.persistence.database import (
    dispose_engine,
    get_engine,
    get_session,
    init_db,
)
from restapi.infrastructure.persistence.models import CompanyModel, EmployeeModel

__all__ = [
    "dispose_engine",
    "get_engine",
    "get_session",
    "init_db",
    "CompanyModel",
    "EmployeeModel",
]
