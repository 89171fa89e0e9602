"""
Implementation SQLModel du repository Company.
"""

from typing import Optional

from sqlmodel import Session, select

from restapi.core.entities import Company
from restapi.core.ports.repositories import ICompanyRepository
from restapi.infrastructure.persistence.models import CompanyModel


class SQLModelCompanyRepository(ICompanyRepository):
    """
    Repository SQLModel pour les entreprises.

    La suppression d'une entreprise ne touche pas aux employes qui la
    referencent.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, model: CompanyModel) -> Company:
        return Company(id=model.id, name=model.name)

    def _to_model(self, entity: Company) -> CompanyModel:
        model = CompanyModel(name=entity.name)
        if entity.id is not None:
            model.id = entity.id
        return model

    def find_all(self) -> list[Company]:
        """Liste toutes les entreprises, par ID croissant."""
        statement = select(CompanyModel).order_by(CompanyModel.id)
        models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]

    def find_by_id(self, company_id: int) -> Optional[Company]:
        model = self._session.get(CompanyModel, company_id)
        if model:
            return self._to_entity(model)
        return None

    def find_page(self, page_index: int, page_size: int) -> list[Company]:
        statement = (
            select(CompanyModel)
            .order_by(CompanyModel.id)
            .offset(page_index * page_size)
            .limit(page_size)
        )
        models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]

    def save(self, company: Company) -> Company:
        """Sauvegarde une entreprise (insertion ou mise a jour)."""
        existing = None
        if company.id is not None:
            existing = self._session.get(CompanyModel, company.id)

        if existing:
            existing.name = company.name
            self._session.add(existing)
            self._session.commit()
            self._session.refresh(existing)
            return self._to_entity(existing)

        model = self._to_model(company)
        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        return self._to_entity(model)

    def delete_by_id(self, company_id: int) -> bool:
        """Supprime une entreprise par ID. Retourne True si supprimee."""
        model = self._session.get(CompanyModel, company_id)
        if model:
            self._session.delete(model)
            self._session.commit()
            return True
        return False
