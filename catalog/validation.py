"""Query parameter validation for the HTTP layer"""
import re

from .search import normalize_text, normalize_id

INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')


class InvalidParameter(ValueError):
    """A request parameter is malformed or out of range"""

    def __init__(self, param, value, message):
        super().__init__(message)
        self.param = param
        self.value = value


def parse_movie_id(raw):
    """
    Parse the `id` query parameter

    Returns:
        int or None: None when the parameter is missing or empty

    Raises:
        InvalidParameter: the value is not an integer
    """
    if raw is None or not raw.strip():
        return None

    value = raw.strip()
    if not INTEGER_PATTERN.fullmatch(value):
        raise InvalidParameter('id', raw, f'Movie id must be an integer, got {raw!r}')

    return int(value)


def require_positive_id(movie_id):
    """Reject ids below 1; None passes through"""
    if movie_id is not None and movie_id <= 0:
        raise InvalidParameter('id', movie_id, f'Movie id must be positive, got {movie_id}')
    return movie_id


def is_search_requested(name, movie_id, genre):
    """True when at least one criterion would narrow the listing"""
    criteria = (normalize_text(name), normalize_id(movie_id), normalize_text(genre))
    return any(criterion is not None for criterion in criteria)
