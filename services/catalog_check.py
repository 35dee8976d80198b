def check_catalog(movie_service, review_service=None):
    try:
        movies = movie_service.get_all_movies()

        if not movies:
            return {
                'status': 'unhealthy',
                'service': 'catalog',
                'message': 'Movie catalog is empty'
            }

        genres = movie_service.get_all_genres()
        ratings = [movie.imdb_rating for movie in movies]
        years = [movie.year for movie in movies]

        reviews_count = 0
        if review_service is not None:
            reviews_count = sum(
                len(review_service.get_reviews_for_movie(movie.id)) for movie in movies
            )

        return {
            'status': 'healthy',
            'service': 'catalog',
            'message': f'Catalog loaded with {len(movies)} movies',
            'details': {
                'movies': {
                    'count': len(movies),
                    'first_id': movies[0].id,
                    'last_id': movies[-1].id
                },
                'genres': {
                    'count': len(genres),
                    'values': genres
                },
                'years': {
                    'oldest': min(years),
                    'newest': max(years)
                },
                'ratings': {
                    'min': min(ratings),
                    'max': max(ratings),
                    'average': round(sum(ratings) / len(ratings), 2)
                },
                'reviews': {
                    'count': reviews_count
                }
            }
        }

    except Exception as e:
        return {
            'status': 'unhealthy',
            'service': 'catalog',
            'message': f'Unexpected error: {str(e)}'
        }
