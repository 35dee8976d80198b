"""Search and genre index over an ordered sequence of movies"""


def normalize_text(value):
    """Strip and case-fold a text criterion; None when it is blank"""
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    return value.casefold()


def normalize_id(movie_id):
    """The id criterion, or None when it is missing or not positive"""
    if movie_id is None or movie_id <= 0:
        return None
    return movie_id


def search_movies(movies, name=None, movie_id=None, genre=None):
    """
    Filter movies by name, id and genre

    Each criterion narrows the result only when present:
    an id counts when it is positive, name and genre count when
    they are non-blank after trimming. Name and genre are matched
    as case-insensitive substrings.

    Args:
        movies: ordered sequence of Movie
        name: part of the movie name (optional)
        movie_id: exact movie id (optional)
        genre: part of the genre label (optional)

    Returns:
        list: matching movies, in catalog order
    """
    results = list(movies)

    search_id = normalize_id(movie_id)
    if search_id is not None:
        results = [movie for movie in results if movie.id == search_id]

    search_name = normalize_text(name)
    if search_name is not None:
        results = [
            movie for movie in results
            if search_name in movie.movie_name.casefold()
        ]

    search_genre = normalize_text(genre)
    if search_genre is not None:
        results = [
            movie for movie in results
            if search_genre in movie.genre.casefold()
        ]

    return results


def all_genres(movies):
    """Distinct genre labels, sorted"""
    return sorted({movie.genre for movie in movies})
