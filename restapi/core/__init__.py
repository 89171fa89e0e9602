"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), objets valeur
et exceptions métier.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (BDD, web, frameworks).

Sous-packages :
- entities/ : Entités métier (Employee, Company)
- ports/ : Interfaces abstraites des repositories
- value_objects/ : Objets valeur immutables (EmployeePatch, CompanyPatch)
"""
