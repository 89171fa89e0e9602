"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Les implémentations (adaptateurs) fournissent les mécanismes de stockage concrets
(SQLite via SQLModel, mocks pour les tests, etc.).

L'atomicité et la durabilité de chaque appel relèvent de l'implémentation ;
aucune transaction ne couvre plusieurs appels.
"""

from abc import ABC, abstractmethod
from typing import Optional

from restapi.core.entities import Company, Employee


class IEmployeeRepository(ABC):
    """
    Interface de stockage des employés.

    Définit les opérations pour persister et récupérer les entités Employee.
    """

    @abstractmethod
    def find_all(self) -> list[Employee]:
        """Liste tous les employés, dans l'ordre du stockage."""
        ...

    @abstractmethod
    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        """Récupère un employé par son ID."""
        ...

    @abstractmethod
    def find_all_by_gender(self, gender: str) -> list[Employee]:
        """Liste les employés dont le genre est exactement celui donné."""
        ...

    @abstractmethod
    def find_by_company_id(self, company_id: int) -> list[Employee]:
        """Liste les employés rattachés à une entreprise."""
        ...

    @abstractmethod
    def find_page(self, page_index: int, page_size: int) -> list[Employee]:
        """
        Récupère une page d'employés.

        Args :
            page_index : Index de page (à partir de 0)
            page_size : Nombre maximum d'employés par page

        Retourne :
            Au plus page_size employés, dans l'ordre du stockage
        """
        ...

    @abstractmethod
    def save(self, employee: Employee) -> Employee:
        """Sauvegarde un employé (insertion ou mise à jour)."""
        ...

    @abstractmethod
    def delete_by_id(self, employee_id: int) -> bool:
        """Supprime un employé par ID. Retourne True si supprimé."""
        ...


class ICompanyRepository(ABC):
    """
    Interface de stockage des entreprises.

    Définit les opérations pour persister et récupérer les entités Company.
    """

    @abstractmethod
    def find_all(self) -> list[Company]:
        """Liste toutes les entreprises, dans l'ordre du stockage."""
        ...

    @abstractmethod
    def find_by_id(self, company_id: int) -> Optional[Company]:
        """Récupère une entreprise par son ID."""
        ...

    @abstractmethod
    def find_page(self, page_index: int, page_size: int) -> list[Company]:
        """Récupère une page d'entreprises (index de page à partir de 0)."""
        ...

    @abstractmethod
    def save(self, company: Company) -> Company:
        """Sauvegarde une entreprise (insertion ou mise à jour)."""
        ...

    @abstractmethod
    def delete_by_id(self, company_id: int) -> bool:
        """Supprime une entreprise par ID. Retourne True si supprimée."""
        ...
