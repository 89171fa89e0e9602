"""
Entite entreprise.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Company:
    """
    Une entreprise.

    Les employes la referencent par leur company_id ; elle ne les possede
    pas et sa suppression n'est pas propagee.

    Attributs :
        id : ID en base, attribue par le stockage a la creation
        name : Nom, seul champ modifiable
    """

    id: Optional[int] = None
    name: Optional[str] = None
