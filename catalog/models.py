"""Catalog records"""
from dataclasses import dataclass

MIN_RATING = 1.0
MAX_RATING = 5.0


def _text(data, key, default=None):
    value = data[key] if default is None else data.get(key, default)
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _integer(data, key):
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"'{key}' must be an integer, got {type(value).__name__}")
    return value


def _number(data, key):
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"'{key}' must be a number, got {type(value).__name__}")
    return float(value)


@dataclass(frozen=True)
class Movie:
    id: int
    movie_name: str
    director: str
    year: int
    genre: str
    description: str
    duration: int
    imdb_rating: float

    @classmethod
    def from_dict(cls, data):
        """Build a Movie from its JSON form (camelCase keys)"""
        return cls(
            id=_integer(data, 'id'),
            movie_name=_text(data, 'movieName'),
            director=_text(data, 'director', ''),
            year=_integer(data, 'year'),
            genre=_text(data, 'genre', ''),
            description=_text(data, 'description', ''),
            duration=_integer(data, 'duration'),
            imdb_rating=_number(data, 'imdbRating')
        )

    def to_dict(self):
        return {
            'id': self.id,
            'movieName': self.movie_name,
            'director': self.director,
            'year': self.year,
            'genre': self.genre,
            'description': self.description,
            'duration': self.duration,
            'imdbRating': self.imdb_rating
        }


@dataclass(frozen=True)
class Review:
    movie_id: int
    user_name: str
    rating: float
    comment: str
    avatar: str = ''

    @classmethod
    def from_dict(cls, data):
        return cls(
            movie_id=_integer(data, 'movieId'),
            user_name=_text(data, 'userName'),
            rating=_number(data, 'rating'),
            comment=_text(data, 'comment', ''),
            avatar=_text(data, 'avatar', '')
        )
