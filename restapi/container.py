"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
Inclut les repositories SQLModel et les services metier.
"""

from dependency_injector import containers, providers

from .config import Settings
from .infrastructure.persistence.database import get_session, init_db
from .infrastructure.persistence.repositories import (
    SQLModelCompanyRepository,
    SQLModelEmployeeRepository,
)
from .services.company_service import CompanyService
from .services.employee_service import EmployeeService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        employee_service = container.employee_service()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(lambda: next(get_session()))

    # Repositories - Factory pour nouvelle instance avec session fraiche
    employee_repository = providers.Factory(
        SQLModelEmployeeRepository,
        session=session,
    )
    company_repository = providers.Factory(
        SQLModelCompanyRepository,
        session=session,
    )

    # Services - Factory car dependent de repositories (sessions fraiches)
    employee_service = providers.Factory(
        EmployeeService,
        employee_repo=employee_repository,
    )
    company_service = providers.Factory(
        CompanyService,
        company_repo=company_repository,
        employee_repo=employee_repository,
    )
