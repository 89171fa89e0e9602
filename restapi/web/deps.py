"""
Dépendances partagées de l'application web.

Les services sont créés à chaque requête depuis le Container DI stocké
dans app.state par le lifespan de l'application.
"""

from typing import Optional

from fastapi import HTTPException, Request, status

from ..container import Container
from ..services.company_service import CompanyService
from ..services.employee_service import EmployeeService


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_employee_service(request: Request) -> EmployeeService:
    return get_container(request).employee_service()


def get_company_service(request: Request) -> CompanyService:
    return get_container(request).company_service()


def paging_requested(page_number: Optional[int], page_size: Optional[int]) -> bool:
    """
    Indique si la requête demande une page.

    Raises:
        HTTPException: 400 si un seul des deux paramètres est fourni
    """
    if (page_number is None) != (page_size is None):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="pageNumber and pageSize must be provided together",
        )
    return page_number is not None
