"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des données
- IEmployeeRepository : Stockage des employés
- ICompanyRepository : Stockage des entreprises
"""

from restapi.core.ports.repositories import (
    ICompanyRepository,
    IEmployeeRepository,
)

__all__ = [
    "IEmployeeRepository",
    "ICompanyRepository",
]
