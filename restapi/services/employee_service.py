"""
Service de gestion des employes.

Responsabilites:
- Lecture (tous, par ID, par genre, par page)
- Creation avec verification de l'age (18 a 65 ans) et activation
- Mise a jour partielle (age, salaire) refusee si l'employe est inactif
- Suppression par ID, sans verification prealable

Chaque appel est une unite de travail autonome sur le repository ;
aucun verrou ni transaction ne couvre une sequence lecture puis ecriture.
"""

from loguru import logger

from restapi.core.entities import Employee, EmployeeStatus
from restapi.core.exceptions import (
    EmployeeCreateError,
    EmployeeNotFoundError,
    EmployeeUpdateError,
)
from restapi.core.ports.repositories import IEmployeeRepository
from restapi.core.value_objects import EmployeePatch
from restapi.services.pagination import to_page_index


class EmployeeService:
    """
    Service metier des employes.

    Example:
        service = EmployeeService(employee_repo=repo)
        alice = service.create(Employee(name="Alice", age=20, gender="Female", salary=3000))
        service.update(alice.id, EmployeePatch(salary=4000))
    """

    def __init__(self, employee_repo: IEmployeeRepository) -> None:
        """
        Initialise le service.

        Args:
            employee_repo: Repository de persistance des employes
        """
        self._employee_repo = employee_repo

    def find_all(self) -> list[Employee]:
        return self._employee_repo.find_all()

    def find_by_id(self, employee_id: int) -> Employee:
        """
        Recupere un employe par son ID.

        Raises:
            EmployeeNotFoundError: Si aucun employe ne porte cet ID
        """
        employee = self._employee_repo.find_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError()
        return employee

    def find_all_by_gender(self, gender: str) -> list[Employee]:
        """Liste les employes d'un genre donne (correspondance exacte)."""
        return self._employee_repo.find_all_by_gender(gender)

    def find_by_page(self, page_number: int, page_size: int) -> list[Employee]:
        """
        Recupere la page demandee (numerotee a partir de 1).

        Raises:
            InvalidPageRequestError: Si page_number ou page_size est inferieur a 1
        """
        page_index = to_page_index(page_number, page_size)
        return self._employee_repo.find_page(page_index, page_size)

    def create(self, employee: Employee) -> Employee:
        """
        Cree un employe apres verification de son age.

        L'employe est force a l'etat actif avant la sauvegarde.

        Returns:
            L'employe tel que sauvegarde (avec son ID)

        Raises:
            EmployeeCreateError: Si l'age est hors de [18, 65] ; rien n'est ecrit
        """
        if employee.has_invalid_age():
            logger.warning(f"Creation refusee, age invalide: {employee.age}")
            raise EmployeeCreateError()
        employee.status = EmployeeStatus.ACTIVE
        saved = self._employee_repo.save(employee)
        logger.info(f"Employe cree: id={saved.id}")
        return saved

    def update(self, employee_id: int, patch: EmployeePatch) -> Employee:
        """
        Met a jour partiellement un employe actif.

        Seuls les champs presents du patch (age, salaire) sont appliques.

        Returns:
            L'employe courant, modifie et sauvegarde

        Raises:
            EmployeeNotFoundError: Si l'employe n'existe pas
            EmployeeUpdateError: Si l'employe est inactif ; rien n'est ecrit
        """
        employee = self.find_by_id(employee_id)
        if employee.is_inactive():
            logger.warning(f"Mise a jour refusee, employe inactif: id={employee_id}")
            raise EmployeeUpdateError()
        patch.apply_to(employee)
        self._employee_repo.save(employee)
        logger.info(f"Employe mis a jour: id={employee_id}")
        return employee

    def delete(self, employee_id: int) -> None:
        """Supprime un employe par ID, sans lecture prealable."""
        deleted = self._employee_repo.delete_by_id(employee_id)
        if deleted:
            logger.info(f"Employe supprime: id={employee_id}")
        else:
            logger.debug(f"Suppression sans effet, employe absent: id={employee_id}")
