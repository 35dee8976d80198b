"""Movie reviews, loaded once from a static JSON file"""
import json
import logging

from .models import Review, MIN_RATING, MAX_RATING
from .movie_catalog import CatalogDataError

logger = logging.getLogger(__name__)


class ReviewService:

    def __init__(self, reviews=()):
        self._by_movie = {}
        for review in reviews:
            if not MIN_RATING <= review.rating <= MAX_RATING:
                raise CatalogDataError(
                    f"Review by {review.user_name} for movie {review.movie_id} "
                    f"has rating {review.rating} outside {MIN_RATING}-{MAX_RATING}"
                )
            self._by_movie.setdefault(review.movie_id, []).append(review)

    @classmethod
    def from_json_file(cls, path):
        """
        Load reviews; a missing file yields an empty service

        Raises:
            CatalogDataError: file unreadable, malformed, or invalid records
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                records = json.load(f)
        except FileNotFoundError:
            logger.warning(f"Review data not found at {path}, no reviews will be shown")
            return cls()
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogDataError(f"Cannot read review data from {path}: {e}") from e

        if not isinstance(records, list):
            raise CatalogDataError(f"Review data in {path} must be a JSON array")

        try:
            reviews = [Review.from_dict(record) for record in records]
        except (KeyError, TypeError, ValueError) as e:
            raise CatalogDataError(f"Invalid review record in {path}: {e}") from e

        logger.info(f"Loaded {len(reviews)} reviews from {path}")
        return cls(reviews)

    def get_reviews_for_movie(self, movie_id):
        return list(self._by_movie.get(movie_id, []))
