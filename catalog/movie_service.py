"""Movie service backed by a MovieCatalog"""
from .search import search_movies


class MovieService:
    """
    Read operations used by the web layer

    Tests swap in a different service (a subclass, or this class
    over a small catalog) through create_app.
    """

    def __init__(self, catalog):
        self.catalog = catalog

    def get_all_movies(self):
        return list(self.catalog.movies)

    def get_movie_by_id(self, movie_id):
        """Movie with the given id, or None"""
        if movie_id is None or movie_id <= 0:
            return None
        return self.catalog.get(movie_id)

    def search_movies(self, name=None, movie_id=None, genre=None):
        return search_movies(self.catalog.movies, name, movie_id, genre)

    def get_all_genres(self):
        return list(self.catalog.genres)
