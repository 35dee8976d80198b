from flask import Flask, Blueprint, current_app, jsonify, request, render_template
from config import Config
import logging
import sys

from catalog import MovieCatalog, MovieService, ReviewService, InvalidParameter
from catalog.icons import get_movie_icon
from catalog.validation import parse_movie_id, require_positive_id, is_search_requested
from services.catalog_check import check_catalog

from metrics import (
    metrics_endpoint, track_request,
    SEARCH_QUERY_COUNT, SEARCH_RESULTS_COUNT,
    INVALID_PARAMETER_COUNT, MOVIE_VIEWS
)

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


bp = Blueprint('movies', __name__)


def current_movie_service():
    return current_app.extensions['movie_service']


def current_review_service():
    return current_app.extensions['review_service']


@bp.route('/')
@track_request
def home():
    return render_template(
        'index.html',
        app_name=current_app.config['APP_NAME'],
        movies_count=len(current_movie_service().get_all_movies()),
        all_genres=current_movie_service().get_all_genres()
    )


@bp.route('/info')
def info():
    return jsonify({
        'app_name': current_app.config['APP_NAME'],
        'version': current_app.config['APP_VERSION'],
        'python_version': sys.version.split()[0]
    })


@bp.route('/health')
@track_request
def health():
    return jsonify({
        'status': 'healthy',
        'service': 'movie-catalog',
        'version': current_app.config['APP_VERSION']
    }), 200


@bp.route('/check/catalog')
def check_catalog_endpoint():
    result = check_catalog(current_movie_service(), current_review_service())
    status_code = 200 if result['status'] == 'healthy' else 503
    return jsonify(result), status_code


@bp.route('/movies')
@track_request
def movies_list():
    name = request.args.get('name')
    genre = request.args.get('genre')

    try:
        movie_id = parse_movie_id(request.args.get('id'))
    except InvalidParameter as e:
        logger.warning(f"Invalid movie id in listing request: {e.value!r}")
        INVALID_PARAMETER_COUNT.labels(param=e.param).inc()
        return render_template(
            'error.html',
            title='Invalid Search',
            message=str(e)
        ), 400

    logger.info(f"Fetching movies with search criteria - name: {name}, id: {movie_id}, genre: {genre}")

    context = {}
    if is_search_requested(name, movie_id, genre):
        movies = current_movie_service().search_movies(name, movie_id, genre)
        SEARCH_QUERY_COUNT.labels(source='html').inc()
        SEARCH_RESULTS_COUNT.observe(len(movies))
        context.update(
            search_performed=True,
            search_name=name,
            search_id=movie_id,
            search_genre=genre,
            result_count=len(movies)
        )
    else:
        movies = current_movie_service().get_all_movies()
        context['search_performed'] = False

    return render_template(
        'movies.html',
        movies=movies,
        all_genres=current_movie_service().get_all_genres(),
        **context
    )


@bp.route('/movies/search')
@track_request
def search():
    name = request.args.get('name')
    genre = request.args.get('genre')
    raw_id = request.args.get('id')

    logger.info(f"API search request - name: {name}, id: {raw_id}, genre: {genre}")

    try:
        movie_id = require_positive_id(parse_movie_id(raw_id))
    except InvalidParameter as e:
        logger.warning(f"Invalid movie ID provided: {e.value!r}")
        INVALID_PARAMETER_COUNT.labels(param=e.param).inc()
        return jsonify({'error': 'Invalid parameter', 'param': e.param, 'details': str(e)}), 400

    SEARCH_QUERY_COUNT.labels(source='api').inc()

    try:
        results = current_movie_service().search_movies(name, movie_id, genre)

        SEARCH_RESULTS_COUNT.observe(len(results))
        logger.info(f"API search returned {len(results)} results")

        return jsonify([movie.to_dict() for movie in results])
    except Exception:
        logger.exception("Error during movie search")
        return jsonify({'error': 'Search failed'}), 500


@bp.route('/movies/<int(signed=True):movie_id>/details')
@track_request
def movie_detail(movie_id):
    logger.info(f"Fetching details for movie ID: {movie_id}")

    movie = current_movie_service().get_movie_by_id(movie_id)

    if movie is None:
        logger.warning(f"Movie with ID {movie_id} not found")
        return render_template(
            'error.html',
            title='Movie Not Found',
            message=f'Movie with ID {movie_id} was not found.'
        ), 404

    MOVIE_VIEWS.labels(movie_id=movie_id).inc()

    return render_template(
        'movie-details.html',
        movie=movie,
        movie_icon=get_movie_icon(movie.movie_name),
        all_reviews=current_review_service().get_reviews_for_movie(movie.id)
    )


@bp.route('/metrics')
@track_request
def metrics():
    return metrics_endpoint()


def create_app(movie_service=None, review_service=None, config_overrides=None):
    """
    Build the Flask application

    The catalog and reviews are loaded here, once, unless services
    are passed in.
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    if movie_service is None:
        catalog = MovieCatalog.from_json_file(app.config['MOVIES_DATA_PATH'])
        movie_service = MovieService(catalog)
    if review_service is None:
        review_service = ReviewService.from_json_file(app.config['REVIEWS_DATA_PATH'])

    app.extensions['movie_service'] = movie_service
    app.extensions['review_service'] = review_service

    app.register_blueprint(bp)

    return app


app = create_app()


if __name__ == '__main__':
    app.run(
        host=Config.FLASK_HOST,
        port=Config.FLASK_PORT,
        debug=Config.FLASK_DEBUG
    )
