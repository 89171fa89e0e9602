"""
Entite employe.

Porte les deux predicats metier utilises par les services : validite de
l'age a la creation et blocage des mises a jour d'un employe inactif.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


MIN_VALID_AGE = 18
MAX_VALID_AGE = 65


class EmployeeStatus(Enum):
    """Etat du cycle de vie d'un employe."""

    UNSET = "unset"  # Jamais active, traite comme actif
    ACTIVE = "active"
    INACTIVE = "inactive"

    @classmethod
    def from_flag(cls, active: Optional[bool]) -> "EmployeeStatus":
        """Convertit un drapeau nullable (stockage) en statut."""
        if active is None:
            return cls.UNSET
        return cls.ACTIVE if active else cls.INACTIVE

    def to_flag(self) -> Optional[bool]:
        """Convertit le statut en drapeau nullable (stockage)."""
        if self is EmployeeStatus.UNSET:
            return None
        return self is EmployeeStatus.ACTIVE


@dataclass
class Employee:
    """
    Un employe.

    Attributs :
        id : ID en base, attribue par le stockage a la creation
        name : Nom complet
        age : Age en annees, entre 18 et 65 a la creation
        gender : Genre libre, filtre par egalite exacte
        salary : Salaire, modifiable par un patch
        company_id : Reference vers une Company (existence non verifiee)
        status : Etat du cycle de vie ; UNSET compte comme actif
    """

    id: Optional[int] = None
    name: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    salary: Optional[int] = None
    company_id: Optional[int] = None
    status: EmployeeStatus = EmployeeStatus.UNSET

    @property
    def active(self) -> Optional[bool]:
        """True si actif, False si inactif, None si jamais defini."""
        return self.status.to_flag()

    @active.setter
    def active(self, value: Optional[bool]) -> None:
        self.status = EmployeeStatus.from_flag(value)

    def has_invalid_age(self) -> bool:
        """Vrai si l'age est absent ou hors de [18, 65]."""
        if self.age is None:
            return True
        return self.age < MIN_VALID_AGE or self.age > MAX_VALID_AGE

    def is_inactive(self) -> bool:
        """Vrai uniquement si l'employe a ete explicitement desactive."""
        return self.status is EmployeeStatus.INACTIVE
