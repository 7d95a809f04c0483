"""
Constantes globales pour Vyla.

Ce module contient les constantes utilisees dans l'application:
- Tailles d'images TMDB valides par classe d'image, et tailles par defaut
- Sections du flux d'accueil
- Limites de troncature des listes (cast, recommandations, ...)
- Cles de tri acceptees par /discover
- Image de substitution du proxy et durees de cache
"""

import base64

# Tailles d'images TMDB par classe
# Source: https://api.themoviedb.org/3/configuration
IMAGE_SIZES = {
    "poster": ("w92", "w154", "w185", "w342", "w500", "w780", "original"),
    "backdrop": ("w300", "w780", "w1280", "original"),
    "profile": ("w45", "w185", "h632", "original"),
    "logo": ("w45", "w92", "w154", "w185", "w300", "w500", "original"),
    "still": ("w92", "w185", "w300", "original"),
}

DEFAULT_IMAGE_SIZES = {
    "poster": "w500",
    "backdrop": "w780",
    "profile": "w185",
    "logo": "w185",
    "still": "w300",
}

# Tailles acceptees par le proxy d'images (union de toutes les classes)
PROXY_IMAGE_SIZES = frozenset(size for sizes in IMAGE_SIZES.values() for size in sizes)

MEDIA_TYPES = ("movie", "tv")

# Reseau TMDB de Netflix (/discover/tv?with_networks=213)
NETFLIX_NETWORK_ID = 213

# Sections du flux d'accueil : (titre, type par defaut, mise en page)
# L'ordre est celui des appels paralleles dans le handler /home
HOME_SECTIONS = (
    ("Trending Now", None, "carousel"),
    ("Trending Movies", "movie", "row"),
    ("Top Rated Movies", "movie", "row"),
    ("Top Rated TV Shows", "tv", "row"),
    ("Netflix Originals", "tv", "row"),
    ("Action Movies", "movie", "row"),
    ("Comedy Movies", "movie", "row"),
    ("Horror Movies", "movie", "row"),
    ("Romance Movies", "movie", "row"),
    ("Documentaries", "movie", "row"),
    ("Animation", "movie", "row"),
    ("Science Fiction", "movie", "row"),
)

# Genres films des sections du flux d'accueil
HOME_GENRES = {
    "action": 28,
    "comedy": 35,
    "horror": 27,
    "romance": 10749,
    "documentary": 99,
    "animation": 16,
    "science_fiction": 878,
}

# Limites de troncature (stables, documentees dans l'index de l'API)
CAST_LIMIT = 20
RELATED_LIMIT = 10
KNOWN_FOR_LIMIT = 20
GUEST_STARS_LIMIT = 10

# Metiers retenus pour l'equipe technique
DIRECTOR_JOBS = frozenset({"Director"})
WRITER_JOBS = frozenset({"Writer", "Screenplay", "Story"})

# Cles de tri acceptees par /discover
DISCOVER_SORT_OPTIONS = frozenset({
    "popularity.asc",
    "popularity.desc",
    "vote_average.asc",
    "vote_average.desc",
    "vote_count.asc",
    "vote_count.desc",
    "primary_release_date.asc",
    "primary_release_date.desc",
    "first_air_date.asc",
    "first_air_date.desc",
    "revenue.asc",
    "revenue.desc",
    "original_title.asc",
    "original_title.desc",
})
DEFAULT_SORT = "popularity.desc"

# TMDB refuse les pages au-dela de 500
MAX_PAGE = 500

MIN_QUERY_LENGTH = 2

NO_OVERVIEW = "No overview available."
UNTITLED = "Untitled"

YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v="

# Proxy d'images
IMAGE_CACHE_SECONDS = 31536000  # un an
FALLBACK_CACHE_SECONDS = 3600
FALLBACK_IMAGE = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)

API_VERSION = "v1"
