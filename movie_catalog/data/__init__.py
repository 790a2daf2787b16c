"""
Static datasets bundled with the movie catalog.
"""

from movie_catalog.data.fake_movies import FAKE_MOVIE_DATABASE

__all__ = ["FAKE_MOVIE_DATABASE"]
