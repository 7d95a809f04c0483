from vyla.adapters.api.tmdb_client import TMDBClient

__all__ = ["TMDBClient"]
