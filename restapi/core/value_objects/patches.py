"""
Objets patch pour les mises a jour partielles.

Un patch decrit les champs a modifier sur une entite existante. Un champ
a None est considere comme absent et ne remplace jamais la valeur courante.
"""

from dataclasses import dataclass
from typing import Optional

from restapi.core.entities import Company, Employee


@dataclass(frozen=True)
class EmployeePatch:
    """
    Mise a jour partielle d'un employe.

    Seuls l'age et le salaire sont modifiables ; le nom, le genre,
    l'entreprise et le statut ne sont jamais touches par un patch.

    Attributs :
        age : Nouvel age, ou None pour conserver l'actuel
        salary : Nouveau salaire, ou None pour conserver l'actuel
    """

    age: Optional[int] = None
    salary: Optional[int] = None

    def apply_to(self, employee: Employee) -> Employee:
        """
        Applique les champs presents sur l'employe (modification en place).

        Retourne :
            Le meme objet Employee, modifie
        """
        if self.salary is not None:
            employee.salary = self.salary
        if self.age is not None:
            employee.age = self.age
        return employee


@dataclass(frozen=True)
class CompanyPatch:
    """Mise a jour d'une entreprise : le nom est toujours remplace."""

    name: Optional[str] = None

    def apply_to(self, company: Company) -> Company:
        company.name = self.name
        return company
