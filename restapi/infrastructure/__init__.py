"""
Couche infrastructure : adaptateurs concrets des ports du domaine.

- persistence/ : Stockage relationnel via SQLModel
"""
