"""In-memory movie catalog, loaded once at startup"""
import json
import logging

from .models import Movie, MIN_RATING, MAX_RATING
from .search import all_genres

logger = logging.getLogger(__name__)


class CatalogDataError(Exception):
    """The movie data file is unreadable or breaks a catalog invariant"""


class MovieCatalog:
    """Read-only ordered collection of movies"""

    def __init__(self, movies):
        movies = tuple(movies)
        by_id = {}

        for movie in movies:
            if movie.id <= 0:
                raise CatalogDataError(f"Movie id must be positive: {movie.id}")
            if movie.id in by_id:
                raise CatalogDataError(f"Duplicate movie id: {movie.id}")
            if not movie.movie_name.strip():
                raise CatalogDataError(f"Movie {movie.id} has an empty name")
            if not MIN_RATING <= movie.imdb_rating <= MAX_RATING:
                raise CatalogDataError(
                    f"Movie {movie.id} rating {movie.imdb_rating} is outside {MIN_RATING}-{MAX_RATING}"
                )
            by_id[movie.id] = movie

        self._movies = movies
        self._by_id = by_id
        self._genres = tuple(all_genres(movies))

    @classmethod
    def from_json_file(cls, path):
        """
        Load the catalog from a JSON array of movie objects

        Raises:
            CatalogDataError: file missing, malformed, or invalid records
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                records = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogDataError(f"Cannot read movie data from {path}: {e}") from e

        if not isinstance(records, list):
            raise CatalogDataError(f"Movie data in {path} must be a JSON array")

        try:
            movies = [Movie.from_dict(record) for record in records]
        except (KeyError, TypeError, ValueError) as e:
            raise CatalogDataError(f"Invalid movie record in {path}: {e}") from e

        catalog = cls(movies)
        logger.info(f"Loaded {len(catalog)} movies from {path}")
        return catalog

    @property
    def movies(self):
        return self._movies

    @property
    def genres(self):
        return self._genres

    def get(self, movie_id):
        return self._by_id.get(movie_id)

    def __len__(self):
        return len(self._movies)

    def __iter__(self):
        return iter(self._movies)
