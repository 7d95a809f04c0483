"""
Vyla - API de catalogue films et series adossee a TMDB.

Ce package expose une API REST en lecture seule : accueil, recherche,
fiches detaillees, distribution, saisons et episodes, genres, sources
de lecture embarquees et proxy d'images.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur, erreurs)
- services/ : Couche application (shapers, lecteurs, images, compteurs)
- adapters/ : Couche infrastructure (client TMDB)
- web/ : Application FastAPI et routes
"""

__version__ = "1.0.0"
