"""
Pytest fixtures shared by the catalog tests.
"""

from unittest.mock import MagicMock, patch

import pytest

from catalog_app.models import Movie
from catalog_app.services.movie_store import MovieStore
from catalog_app.services.store_result import StoreResult


@pytest.fixture
def store(db):
    return MovieStore()


@pytest.fixture
def inception(db):
    """A fully populated movie, as imported from OMDb."""
    return Movie.objects.create(
        movie_id=42,
        title="Inception",
        year=2010,
        rated="PG-13",
        released="16 Jul 2010",
        runtime="148 min",
        genre="Action, Adventure, Sci-Fi",
        director="Christopher Nolan",
        actors="Leonardo DiCaprio, Joseph Gordon-Levitt, Elliot Page",
        plot="A thief who steals corporate secrets through dream-sharing technology.",
        ratings=[{"Source": "Internet Movie Database", "Value": "8.8/10"}],
        metascore="74",
        imdb_rating=8.8,
        imdb_votes="2,500,000",
        imdb_id="tt1375666",
        media_type="movie",
        response=True,
    )


@pytest.fixture
def failing_store():
    """Patch the views so every store call fails like a dropped connection."""
    failure = StoreResult.failed("connection refused")
    mock_store = MagicMock(spec=MovieStore)
    for name in (
        "create",
        "get_by_primary_key",
        "get_by_movie_id",
        "get_by_title_substring",
        "list_all",
        "update_by_primary_key",
        "update_by_movie_id",
        "delete_by_primary_key",
        "delete_by_movie_id",
    ):
        getattr(mock_store, name).return_value = failure

    with patch("catalog_app.views.get_movie_store", return_value=mock_store), \
         patch("catalog_app.api_views.get_movie_store", return_value=mock_store):
        yield mock_store
