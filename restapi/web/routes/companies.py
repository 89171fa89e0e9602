"""
Routes des entreprises.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from ...services.company_service import CompanyService
from ..deps import get_company_service, paging_requested
from ..schemas import CompanyRequest, CompanyResponse, EmployeeResponse

router = APIRouter(prefix="/companies", tags=["companies"])


@router.get("", response_model=list[CompanyResponse])
def list_companies(
    page_number: Optional[int] = Query(None, alias="pageNumber"),
    page_size: Optional[int] = Query(None, alias="pageSize"),
    service: CompanyService = Depends(get_company_service),
):
    """Liste les entreprises, paginées si pageNumber et pageSize sont fournis."""
    if paging_requested(page_number, page_size):
        companies = service.find_by_page(page_number, page_size)
    else:
        companies = service.find_all()
    return [CompanyResponse.model_validate(company) for company in companies]


@router.get("/{company_id}", response_model=CompanyResponse)
def get_company(
    company_id: int,
    service: CompanyService = Depends(get_company_service),
):
    return CompanyResponse.model_validate(service.find_by_id(company_id))


@router.get("/{company_id}/employees", response_model=list[EmployeeResponse])
def list_company_employees(
    company_id: int,
    service: CompanyService = Depends(get_company_service),
):
    employees = service.find_employees_by_company_id(company_id)
    return [EmployeeResponse.model_validate(employee) for employee in employees]


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def create_company(
    body: CompanyRequest,
    service: CompanyService = Depends(get_company_service),
):
    return CompanyResponse.model_validate(service.create(body.to_entity()))


@router.put("/{company_id}", response_model=CompanyResponse)
def update_company(
    company_id: int,
    body: CompanyRequest,
    service: CompanyService = Depends(get_company_service),
):
    return CompanyResponse.model_validate(service.update(company_id, body.to_patch()))


@router.delete("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_company(
    company_id: int,
    service: CompanyService = Depends(get_company_service),
) -> None:
    service.delete(company_id)
