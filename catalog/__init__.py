from .models import Movie, Review
from .movie_catalog import MovieCatalog, CatalogDataError
from .movie_service import MovieService
from .reviews import ReviewService
from .search import search_movies, all_genres
from .validation import InvalidParameter

__all__ = [
    'Movie',
    'Review',
    'MovieCatalog',
    'CatalogDataError',
    'MovieService',
    'ReviewService',
    'search_movies',
    'all_genres',
    'InvalidParameter'
]
