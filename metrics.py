from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from flask import Response
import time
import functools


REQUEST_COUNT = Counter(
    'movies_request_count',
    'Total Request Count',
    ['endpoint', 'http_status']
)

REQUEST_DURATION = Histogram(
    'movies_request_duration_seconds',
    'Request Duration',
    ['endpoint']
)


SEARCH_QUERY_COUNT = Counter(
    'movies_search_queries_total',
    'Total search queries',
    ['source']
)

SEARCH_RESULTS_COUNT = Histogram(
    'movies_search_results',
    'Number of search results returned',
    buckets=(0, 1, 2, 5, 10, 25, 50, 100)
)

INVALID_PARAMETER_COUNT = Counter(
    'movies_invalid_parameters_total',
    'Requests rejected for an invalid query parameter',
    ['param']
)


MOVIE_VIEWS = Counter(
    'movies_detail_views_total',
    'Total movie detail page views',
    ['movie_id']
)


def _status_code(response):
    if isinstance(response, tuple) and len(response) > 1:
        return response[1]
    return getattr(response, 'status_code', 200)


def track_request(f):
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        start_time = time.time()

        try:
            response = f(*args, **kwargs)

            REQUEST_COUNT.labels(
                endpoint=f.__name__,
                http_status=_status_code(response)
            ).inc()

            duration = time.time() - start_time
            REQUEST_DURATION.labels(endpoint=f.__name__).observe(duration)

            return response

        except Exception:
            REQUEST_COUNT.labels(
                endpoint=f.__name__,
                http_status=500
            ).inc()
            raise

    return wrapper


def metrics_endpoint():
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)
