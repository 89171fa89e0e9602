"""
Schémas Pydantic des corps de requête et de réponse.

Les champs sont exposés en camelCase (companyId, ...) et acceptés
indifféremment en camelCase ou snake_case.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..core.entities import Company, Employee
from ..core.value_objects import CompanyPatch, EmployeePatch


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class EmployeeCreateRequest(_CamelModel):
    """Corps de POST /employees."""

    name: str
    age: int
    gender: str
    salary: int
    company_id: Optional[int] = None

    def to_entity(self) -> Employee:
        return Employee(
            name=self.name,
            age=self.age,
            gender=self.gender,
            salary=self.salary,
            company_id=self.company_id,
        )


class EmployeeUpdateRequest(_CamelModel):
    """Corps de PUT /employees/{id} : champs absents ou null ignorés."""

    age: Optional[int] = None
    salary: Optional[int] = None

    def to_patch(self) -> EmployeePatch:
        return EmployeePatch(age=self.age, salary=self.salary)


class EmployeeResponse(_CamelModel):
    id: Optional[int] = None
    name: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    salary: Optional[int] = None
    company_id: Optional[int] = None
    active: Optional[bool] = None


class CompanyRequest(_CamelModel):
    """Corps de POST /companies et PUT /companies/{id}."""

    name: str

    def to_entity(self) -> Company:
        return Company(name=self.name)

    def to_patch(self) -> CompanyPatch:
        return CompanyPatch(name=self.name)


class CompanyResponse(_CamelModel):
    id: Optional[int] = None
    name: Optional[str] = None
