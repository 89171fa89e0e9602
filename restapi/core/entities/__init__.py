"""
Entites metier representant les concepts du domaine.

Les entites sont des objets mutables dotes d'une identite persistante.
Elles portent les regles metier qui leur sont propres.

Exports :
- Employee : Un employe, eventuellement rattache a une entreprise
- EmployeeStatus : Etat du cycle de vie (unset, active, inactive)
- Company : Une entreprise referencee par les employes
"""

from restapi.core.entities.employee import (
    MAX_VALID_AGE,
    MIN_VALID_AGE,
    Employee,
    EmployeeStatus,
)
from restapi.core.entities.company import Company

__all__ = [
    "Employee",
    "EmployeeStatus",
    "MIN_VALID_AGE",
    "MAX_VALID_AGE",
    "Company",
]
