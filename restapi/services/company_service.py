"""
Service de gestion des entreprises.

Contrairement aux employes, une entreprise n'a ni validation a la creation
ni notion d'activite : la mise a jour remplace toujours le nom.
"""

from loguru import logger

from restapi.core.entities import Company, Employee
from restapi.core.exceptions import CompanyNotFoundError
from restapi.core.ports.repositories import ICompanyRepository, IEmployeeRepository
from restapi.core.value_objects import CompanyPatch
from restapi.services.pagination import to_page_index


class CompanyService:
    """
    Service metier des entreprises.

    Utilise le repository des employes uniquement pour lister les employes
    rattaches a une entreprise.
    """

    def __init__(
        self,
        company_repo: ICompanyRepository,
        employee_repo: IEmployeeRepository,
    ) -> None:
        """
        Initialise le service.

        Args:
            company_repo: Repository de persistance des entreprises
            employee_repo: Repository des employes (recherche par entreprise)
        """
        self._company_repo = company_repo
        self._employee_repo = employee_repo

    def find_all(self) -> list[Company]:
        return self._company_repo.find_all()

    def find_by_page(self, page_number: int, page_size: int) -> list[Company]:
        """Recupere la page demandee (numerotee a partir de 1)."""
        page_index = to_page_index(page_number, page_size)
        return self._company_repo.find_page(page_index, page_size)

    def find_by_id(self, company_id: int) -> Company:
        """
        Recupere une entreprise par son ID.

        Raises:
            CompanyNotFoundError: Si aucune entreprise ne porte cet ID
        """
        company = self._company_repo.find_by_id(company_id)
        if company is None:
            raise CompanyNotFoundError()
        return company

    def create(self, company: Company) -> Company:
        saved = self._company_repo.save(company)
        logger.info(f"Entreprise creee: id={saved.id}")
        return saved

    def update(self, company_id: int, patch: CompanyPatch) -> Company:
        """
        Remplace le nom d'une entreprise existante.

        Returns:
            L'entreprise courante, modifiee et sauvegardee

        Raises:
            CompanyNotFoundError: Si l'entreprise n'existe pas
        """
        company = self.find_by_id(company_id)
        patch.apply_to(company)
        self._company_repo.save(company)
        logger.info(f"Entreprise mise a jour: id={company_id}")
        return company

    def find_employees_by_company_id(self, company_id: int) -> list[Employee]:
        """Liste les employes d'une entreprise, sans verifier qu'elle existe."""
        return self._employee_repo.find_by_company_id(company_id)

    def delete(self, company_id: int) -> None:
        """Supprime une entreprise par ID ; les employes rattaches sont conserves."""
        deleted = self._company_repo.delete_by_id(company_id)
        if deleted:
            logger.info(f"Entreprise supprimee: id={company_id}")
        else:
            logger.debug(f"Suppression sans effet, entreprise absente: id={company_id}")
