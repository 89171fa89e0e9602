"""
Implementation SQLModel du repository Employee.

Implemente l'interface IEmployeeRepository pour la persistance des employes
via SQLModel.
"""

from typing import Optional

from sqlmodel import Session, select

from restapi.core.entities import Employee, EmployeeStatus
from restapi.core.ports.repositories import IEmployeeRepository
from restapi.infrastructure.persistence.models import EmployeeModel


class SQLModelEmployeeRepository(IEmployeeRepository):
    """
    Repository SQLModel pour les employes.

    Implemente IEmployeeRepository avec conversion bidirectionnelle
    entre l'entite Employee (domaine) et EmployeeModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: EmployeeModel) -> Employee:
        """Convertit un modele DB en entite domaine."""
        return Employee(
            id=model.id,
            name=model.name,
            age=model.age,
            gender=model.gender,
            salary=model.salary,
            company_id=model.company_id,
            status=EmployeeStatus.from_flag(model.active),
        )

    def _to_model(self, entity: Employee) -> EmployeeModel:
        """Convertit une entite domaine en modele DB."""
        model = EmployeeModel(
            name=entity.name,
            age=entity.age,
            gender=entity.gender,
            salary=entity.salary,
            company_id=entity.company_id,
            active=entity.active,
        )
        if entity.id is not None:
            model.id = entity.id
        return model

    def find_all(self) -> list[Employee]:
        """Liste tous les employes, par ID croissant."""
        statement = select(EmployeeModel).order_by(EmployeeModel.id)
        models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        """Recupere un employe par son ID."""
        model = self._session.get(EmployeeModel, employee_id)
        if model:
            return self._to_entity(model)
        return None

    def find_all_by_gender(self, gender: str) -> list[Employee]:
        """Liste les employes dont le genre est exactement celui donne."""
        statement = (
            select(EmployeeModel)
            .where(EmployeeModel.gender == gender)
            .order_by(EmployeeModel.id)
        )
        models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]

    def find_by_company_id(self, company_id: int) -> list[Employee]:
        """Liste les employes rattaches a une entreprise."""
        statement = (
            select(EmployeeModel)
            .where(EmployeeModel.company_id == company_id)
            .order_by(EmployeeModel.id)
        )
        models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]

    def find_page(self, page_index: int, page_size: int) -> list[Employee]:
        """Recupere une page d'employes (index de page a partir de 0)."""
        statement = (
            select(EmployeeModel)
            .order_by(EmployeeModel.id)
            .offset(page_index * page_size)
            .limit(page_size)
        )
        models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]

    def save(self, employee: Employee) -> Employee:
        """Sauvegarde un employe (insertion ou mise a jour)."""
        existing = None
        if employee.id is not None:
            existing = self._session.get(EmployeeModel, employee.id)

        if existing:
            # Mise a jour
            existing.name = employee.name
            existing.age = employee.age
            existing.gender = employee.gender
            existing.salary = employee.salary
            existing.company_id = employee.company_id
            existing.active = employee.active
            self._session.add(existing)
            self._session.commit()
            self._session.refresh(existing)
            return self._to_entity(existing)
        else:
            # Insertion
            model = self._to_model(employee)
            self._session.add(model)
            self._session.commit()
            self._session.refresh(model)
            return self._to_entity(model)

    def delete_by_id(self, employee_id: int) -> bool:
        """Supprime un employe par ID. Retourne True si supprime."""
        model = self._session.get(EmployeeModel, employee_id)
        if model:
            self._session.delete(model)
            self._session.commit()
            return True
        return False
