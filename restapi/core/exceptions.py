"""
Exceptions metier.

Toutes les violations de regles metier derivent de DomainError afin que
la couche web puisse les intercepter uniformement. Les erreurs provenant
du stockage (SQLAlchemy) ne sont pas encapsulees et se propagent telles quelles.
"""


class DomainError(Exception):
    """Classe de base des erreurs metier."""

    message = "Domain error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class EntityNotFoundError(DomainError):
    """L'entite demandee n'existe pas dans le stockage."""

    message = "Entity not found"


class EmployeeNotFoundError(EntityNotFoundError):
    message = "Employee id not found"


class CompanyNotFoundError(EntityNotFoundError):
    message = "Company id not found"


class EmployeeCreateError(DomainError):
    """Creation refusee : age hors de l'intervalle [18, 65]."""

    message = "Employee must be 18~65 years old"


class EmployeeUpdateError(DomainError):
    """Mise a jour refusee : l'employe est inactif."""

    message = "Employee is inactive"


class InvalidPageRequestError(DomainError):
    """Numero ou taille de page inferieur a 1, ou decalage hors limites."""

    def __init__(self, page_number: int, page_size: int) -> None:
        self.page_number = page_number
        self.page_size = page_size
        super().__init__(
            f"Invalid page request: pageNumber={page_number}, pageSize={page_size}"
            " (both must be >= 1 and the offset must fit in 64 bits)"
        )
