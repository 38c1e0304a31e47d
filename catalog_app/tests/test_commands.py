"""
Tests for the catalog management commands.
"""

import json
from unittest.mock import MagicMock, patch

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.db import OperationalError

from catalog_app.management.commands.serve_catalog import Command as ServeCommand
from catalog_app.models import Movie
from catalog_app.services.movie_store import MovieStore


@pytest.mark.django_db
class TestLoadMovies:
    def test_creates_and_updates_by_movie_id(self, tmp_path, inception, capsys):
        seed_file = tmp_path / "movies.json"
        seed_file.write_text(
            json.dumps(
                [
                    {"Movie_ID": 42, "Title": "Inception", "Plot": "Updated plot"},
                    {"Movie_ID": 43, "Title": "Memento", "Year": "2000", "imdbRating": "8.4"},
                    {"Movie_ID": 44},
                ]
            )
        )

        call_command("load_movies", str(seed_file))

        inception.refresh_from_db()
        assert inception.plot == "Updated plot"
        assert Movie.objects.get(movie_id=43).imdb_rating == 8.4
        assert not Movie.objects.filter(movie_id=44).exists()
        captured = capsys.readouterr()
        assert "Created: 1, Updated: 1, Failed: 1" in captured.out

    def test_non_object_items_are_counted_as_failed(self, tmp_path, capsys):
        seed_file = tmp_path / "movies.json"
        seed_file.write_text(json.dumps(["oops", 5, {"Movie_ID": 43, "Title": "Memento"}, None]))

        call_command("load_movies", str(seed_file))

        assert Movie.objects.get(movie_id=43).title == "Memento"
        captured = capsys.readouterr()
        assert "Created: 1, Updated: 0, Failed: 3" in captured.out
        assert "item 0 is not a JSON object" in captured.err

    def test_missing_file(self, tmp_path):
        with pytest.raises(CommandError, match="Seed file not found"):
            call_command("load_movies", str(tmp_path / "nope.json"))

    def test_file_must_hold_an_array(self, tmp_path):
        seed_file = tmp_path / "movies.json"
        seed_file.write_text(json.dumps({"Movie_ID": 1}))

        with pytest.raises(CommandError, match="JSON array"):
            call_command("load_movies", str(seed_file))


@pytest.mark.django_db
class TestDeleteMovie:
    def test_force_delete_by_movie_id(self, inception):
        call_command("delete_movie", "--movie-id", "42", "--force")

        assert not Movie.objects.exists()

    def test_delete_by_primary_key_after_confirmation(self, inception):
        with patch("builtins.input", return_value="y"):
            call_command("delete_movie", str(inception.pk))

        assert not Movie.objects.exists()

    def test_declined_confirmation_keeps_movie(self, inception):
        with patch("builtins.input", return_value="n"):
            call_command("delete_movie", str(inception.pk))

        assert Movie.objects.filter(pk=inception.pk).exists()

    def test_missing_movie(self):
        with pytest.raises(CommandError, match="Movie_ID 7 not found"):
            call_command("delete_movie", "--movie-id", "7", "--force")

    def test_requires_exactly_one_key(self, inception):
        with pytest.raises(CommandError, match="exactly one"):
            call_command("delete_movie")
        with pytest.raises(CommandError, match="exactly one"):
            call_command("delete_movie", str(inception.pk), "--movie-id", "42")


class TestServeCatalog:
    def test_runs_server_on_configured_port_and_closes_store(self, settings):
        settings.PORT = 8123
        with patch.object(ServeCommand, "check_database", return_value=True), \
             patch.object(MovieStore, "close") as close, \
             patch("catalog_app.management.commands.serve_catalog.call_command") as run:
            call_command("serve_catalog", "--noreload")

        run.assert_called_once_with("runserver", "0.0.0.0:8123", use_reloader=False)
        close.assert_called_once()

    def test_starts_even_when_database_is_down(self):
        with patch.object(ServeCommand, "check_database", return_value=False), \
             patch.object(MovieStore, "close"), \
             patch("catalog_app.management.commands.serve_catalog.call_command") as run:
            call_command("serve_catalog", "--port", "9001")

        run.assert_called_once_with("runserver", "0.0.0.0:9001", use_reloader=True)

    def test_connection_failure_is_logged_not_raised(self, caplog):
        connections = MagicMock()
        connections.__getitem__.return_value.ensure_connection.side_effect = OperationalError("could not connect")

        with patch("catalog_app.management.commands.serve_catalog.connections", connections):
            assert ServeCommand.check_database("default") is False

        assert "Database connection error: could not connect" in caplog.text
