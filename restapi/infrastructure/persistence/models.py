"""
Modeles SQLModel pour la base de donnees RestAPI.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- company: Entreprises
- employee: Employes, rattaches optionnellement a une entreprise
"""

from __future__ import annotations

from sqlmodel import Field, SQLModel


class CompanyModel(SQLModel, table=True):
    """Modele representant une entreprise."""

    __tablename__ = "company"

    id: int | None = Field(default=None, primary_key=True)
    name: str | None = None


class EmployeeModel(SQLModel, table=True):
    """
    Modele representant un employe.

    La colonne active est nullable : NULL signifie que le statut n'a
    jamais ete defini (traite comme actif par le domaine).
    """

    __tablename__ = "employee"

    id: int | None = Field(default=None, primary_key=True)
    name: str | None = None
    age: int | None = None
    gender: str | None = Field(default=None, index=True)
    salary: int | None = None
    company_id: int | None = Field(default=None, foreign_key="company.id", index=True)
    active: bool | None = None
