"""
Interface HTTP (FastAPI) de RestAPI.

Couche mince au-dessus des services : conversion JSON <-> entites et
traduction des erreurs metier en codes HTTP.
"""
