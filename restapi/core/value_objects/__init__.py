"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- EmployeePatch : Mise a jour partielle d'un employe (age, salaire)
- CompanyPatch : Mise a jour d'une entreprise (nom)
"""

from restapi.core.value_objects.patches import CompanyPatch, EmployeePatch

__all__ = [
    "EmployeePatch",
    "CompanyPatch",
]
