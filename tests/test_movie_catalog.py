import json
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from catalog import Movie, MovieCatalog, CatalogDataError, MovieService, ReviewService
from catalog.icons import get_movie_icon, DEFAULT_ICON
from config import Config


def write_json(path, data):
    path.write_text(json.dumps(data), encoding='utf-8')
    return str(path)


def movie_record(movie_id, name='Some Movie'):
    return {
        'id': movie_id,
        'movieName': name,
        'director': 'Someone',
        'year': 2000,
        'genre': 'Drama',
        'description': '',
        'duration': 100,
        'imdbRating': 3.5
    }


@pytest.fixture(scope='module')
def service():
    return MovieService(MovieCatalog.from_json_file(Config.MOVIES_DATA_PATH))


def test_get_all_movies(service):
    movies = service.get_all_movies()

    assert len(movies) == 12
    assert [m.id for m in movies] == list(range(1, 13))


def test_get_all_movies_returns_copy(service):
    service.get_all_movies().clear()

    assert len(service.get_all_movies()) == 12


def test_get_movie_by_id(service):
    movie = service.get_movie_by_id(1)

    assert movie is not None
    assert movie.id == 1
    assert movie.movie_name == 'The Prison Escape'


@pytest.mark.parametrize('movie_id', [None, 0, -1, 999])
def test_get_movie_by_id_missing(service, movie_id):
    assert service.get_movie_by_id(movie_id) is None


def test_service_search_delegates(service):
    results = service.search_movies('the', None, 'drama')

    assert [m.movie_name for m in results] == ['The Prison Escape', 'The Family Boss']


def test_get_all_genres(service):
    genres = service.get_all_genres()

    assert genres == sorted(set(genres))
    assert len(genres) == 10


def test_movies_are_immutable(service):
    movie = service.get_movie_by_id(1)

    with pytest.raises(AttributeError):
        movie.movie_name = 'Changed'


def test_movie_json_form():
    movie = Movie.from_dict(movie_record(3, 'Other'))

    assert movie.to_dict() == movie_record(3, 'Other')


def test_duplicate_ids_rejected(tmp_path):
    path = write_json(tmp_path / 'movies.json', [movie_record(1), movie_record(1)])

    with pytest.raises(CatalogDataError, match='Duplicate'):
        MovieCatalog.from_json_file(path)


def test_non_positive_id_rejected(tmp_path):
    path = write_json(tmp_path / 'movies.json', [movie_record(0)])

    with pytest.raises(CatalogDataError, match='positive'):
        MovieCatalog.from_json_file(path)


def test_empty_name_rejected(tmp_path):
    path = write_json(tmp_path / 'movies.json', [movie_record(1, '  ')])

    with pytest.raises(CatalogDataError, match='empty name'):
        MovieCatalog.from_json_file(path)


def test_missing_field_rejected(tmp_path):
    record = movie_record(1)
    del record['movieName']
    path = write_json(tmp_path / 'movies.json', [record])

    with pytest.raises(CatalogDataError):
        MovieCatalog.from_json_file(path)


def test_missing_file_rejected(tmp_path):
    with pytest.raises(CatalogDataError):
        MovieCatalog.from_json_file(str(tmp_path / 'nope.json'))


def test_non_array_rejected(tmp_path):
    path = write_json(tmp_path / 'movies.json', {'movies': []})

    with pytest.raises(CatalogDataError, match='array'):
        MovieCatalog.from_json_file(path)


def test_null_genre_rejected(tmp_path):
    record = movie_record(1)
    record['genre'] = None
    path = write_json(tmp_path / 'movies.json', [record, movie_record(2)])

    with pytest.raises(CatalogDataError, match='genre'):
        MovieCatalog.from_json_file(path)


def test_non_string_name_rejected(tmp_path):
    record = movie_record(1)
    record['movieName'] = 42
    path = write_json(tmp_path / 'movies.json', [record])

    with pytest.raises(CatalogDataError, match='movieName'):
        MovieCatalog.from_json_file(path)


@pytest.mark.parametrize('rating', [0.5, 9.9])
def test_rating_out_of_range_rejected(tmp_path, rating):
    record = movie_record(1)
    record['imdbRating'] = rating
    path = write_json(tmp_path / 'movies.json', [record])

    with pytest.raises(CatalogDataError, match='rating'):
        MovieCatalog.from_json_file(path)


@pytest.mark.parametrize('field, value', [
    ('id', True),
    ('id', 2.9),
    ('id', '3'),
    ('year', '2000'),
    ('duration', 100.5),
    ('imdbRating', True),
    ('imdbRating', '4.0'),
])
def test_non_numeric_fields_rejected(tmp_path, field, value):
    record = movie_record(1)
    record[field] = value
    path = write_json(tmp_path / 'movies.json', [record])

    with pytest.raises(CatalogDataError, match=field):
        MovieCatalog.from_json_file(path)


def test_integer_rating_accepted(tmp_path):
    record = movie_record(1)
    record['imdbRating'] = 4
    path = write_json(tmp_path / 'movies.json', [record])

    catalog = MovieCatalog.from_json_file(path)

    assert catalog.get(1).imdb_rating == 4.0


def test_reviews_for_movie():
    reviews = ReviewService.from_json_file(Config.REVIEWS_DATA_PATH)

    first = reviews.get_reviews_for_movie(1)
    assert [r.user_name for r in first] == ['Alex M.', 'Priya S.']
    assert reviews.get_reviews_for_movie(999) == []


def test_reviews_missing_file(tmp_path):
    reviews = ReviewService.from_json_file(str(tmp_path / 'reviews.json'))

    assert reviews.get_reviews_for_movie(1) == []


def test_movie_icon():
    assert get_movie_icon('The Prison Escape') == '🔒'
    assert get_movie_icon('Untitled') == DEFAULT_ICON
    assert get_movie_icon('') == DEFAULT_ICON


def test_reviews_malformed_file(tmp_path):
    path = tmp_path / 'reviews.json'
    path.write_text('{not json', encoding='utf-8')

    with pytest.raises(CatalogDataError):
        ReviewService.from_json_file(str(path))


def test_reviews_non_array_rejected(tmp_path):
    path = write_json(tmp_path / 'reviews.json', {'reviews': []})

    with pytest.raises(CatalogDataError, match='array'):
        ReviewService.from_json_file(path)


def test_reviews_invalid_record_rejected(tmp_path):
    path = write_json(tmp_path / 'reviews.json', [{'movieId': 1, 'rating': 4.0}])

    with pytest.raises(CatalogDataError, match='userName'):
        ReviewService.from_json_file(path)


@pytest.mark.parametrize('rating', [0.5, 99.0])
def test_reviews_rating_out_of_range_rejected(tmp_path, rating):
    path = write_json(tmp_path / 'reviews.json', [
        {'movieId': 1, 'userName': 'Someone', 'rating': rating}
    ])

    with pytest.raises(CatalogDataError, match='rating'):
        ReviewService.from_json_file(path)


def test_reviews_non_integer_movie_id_rejected(tmp_path):
    path = write_json(tmp_path / 'reviews.json', [
        {'movieId': '1', 'userName': 'Someone', 'rating': 4.0}
    ])

    with pytest.raises(CatalogDataError, match='movieId'):
        ReviewService.from_json_file(path)
