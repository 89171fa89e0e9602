"""
Couche application : services orchestrant les regles metier.

Services :
- EmployeeService : cycle de vie des employes
- CompanyService : cycle de vie des entreprises et liste de leurs employes
"""

from restapi.services.company_service import CompanyService
from restapi.services.employee_service import EmployeeService

__all__ = [
    "EmployeeService",
    "CompanyService",
]
