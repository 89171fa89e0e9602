"""
RestAPI - Backend de gestion des employes et des entreprises.

Ce package expose les operations CRUD et paginees sur les entites Employee
et Company, avec les regles metier associees (age valide a la creation,
employe inactif non modifiable, mise a jour partielle).

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur, exceptions)
- services/ : Couche application (cas d'utilisation, orchestration)
- infrastructure/ : Persistance SQLModel
- web/ : API HTTP FastAPI
"""

__version__ = "0.1.0"
