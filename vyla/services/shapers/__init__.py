"""
Shapers : fonctions pures qui transforment les reponses TMDB brutes
en reponses publiques de l'API.

Exports :
- ShapingContext, Links : dependances communes (images, liens)
- normalize_item : normalisation partagee d'une ligne de resultat
- shape_* : un shaper par ressource
"""

from vyla.services.shapers.cast import shape_person
from vyla.services.shapers.common import Links, ShapingContext, normalize_item
from vyla.services.shapers.details import shape_details
from vyla.services.shapers.episodes import shape_episode, shape_season
from vyla.services.shapers.genres import shape_genre_browse, shape_genre_list
from vyla.services.shapers.home import shape_home
from vyla.services.shapers.listing import shape_list
from vyla.services.shapers.search import shape_search

__all__ = [
    "Links",
    "ShapingContext",
    "normalize_item",
    "shape_details",
    "shape_episode",
    "shape_genre_browse",
    "shape_genre_list",
    "shape_home",
    "shape_list",
    "shape_person",
    "shape_search",
    "shape_season",
]
