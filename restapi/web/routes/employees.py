"""
Routes des employés.

GET /employees accepte soit ?gender=, soit ?pageNumber=&pageSize=, soit
aucun filtre (liste complète).
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...services.employee_service import EmployeeService
from ..deps import get_employee_service, paging_requested
from ..schemas import EmployeeCreateRequest, EmployeeResponse, EmployeeUpdateRequest

router = APIRouter(prefix="/employees", tags=["employees"])


def _to_response(employees) -> list[EmployeeResponse]:
    return [EmployeeResponse.model_validate(employee) for employee in employees]


@router.get("", response_model=list[EmployeeResponse])
def list_employees(
    gender: Optional[str] = None,
    page_number: Optional[int] = Query(None, alias="pageNumber"),
    page_size: Optional[int] = Query(None, alias="pageSize"),
    service: EmployeeService = Depends(get_employee_service),
):
    """Liste les employés, filtrés par genre ou paginés (pas les deux)."""
    if paging_requested(page_number, page_size):
        if gender is not None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="gender cannot be combined with pageNumber/pageSize",
            )
        return _to_response(service.find_by_page(page_number, page_size))
    if gender is not None:
        return _to_response(service.find_all_by_gender(gender))
    return _to_response(service.find_all())


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
):
    return EmployeeResponse.model_validate(service.find_by_id(employee_id))


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
def create_employee(
    body: EmployeeCreateRequest,
    service: EmployeeService = Depends(get_employee_service),
):
    return EmployeeResponse.model_validate(service.create(body.to_entity()))


@router.put("/{employee_id}", response_model=EmployeeResponse)
def update_employee(
    employee_id: int,
    body: EmployeeUpdateRequest,
    service: EmployeeService = Depends(get_employee_service),
):
    """Met à jour l'âge et/ou le salaire d'un employé actif."""
    return EmployeeResponse.model_validate(service.update(employee_id, body.to_patch()))


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> None:
    service.delete(employee_id)
