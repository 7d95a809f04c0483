"""
Couche web : application FastAPI, routes, validation et gestion des erreurs.
"""
