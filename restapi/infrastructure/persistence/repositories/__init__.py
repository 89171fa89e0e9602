"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans restapi/core/ports/repositories.py, utilisant SQLModel pour
la persistance.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from restapi.infrastructure.persistence.repositories.company_repository import (
    SQLModelCompanyRepository,
)
from restapi.infrastructure.persistence.repositories.employee_repository import (
    SQLModelEmployeeRepository,
)

__all__ = [
    "SQLModelEmployeeRepository",
    "SQLModelCompanyRepository",
]
