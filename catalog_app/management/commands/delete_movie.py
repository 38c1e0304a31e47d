"""
Delete Movie Command

Deletes a movie from the catalog.

Usage:
    python manage.py delete_movie <id>
    python manage.py delete_movie --movie-id <Movie_ID>

Examples:
    # Delete by primary key
    python manage.py delete_movie 6f1c2a8e-5d4b-4c0e-9a55-0b6d2f7e3c11

    # Delete by Movie_ID
    python manage.py delete_movie --movie-id 42

    # Skip confirmation prompt
    python manage.py delete_movie --movie-id 42 --force
"""

from django.core.management.base import BaseCommand, CommandError

from catalog_app.services.movie_store import get_movie_store
from catalog_app.services.store_result import StoreOutcome


class Command(BaseCommand):
    help = "Delete a movie by primary key or Movie_ID"

    def add_arguments(self, parser):
        parser.add_argument(
            "id",
            nargs="?",
            type=str,
            help="The primary key of the movie to delete",
        )
        parser.add_argument(
            "--movie-id",
            type=int,
            help="Delete movie by Movie_ID",
        )
        parser.add_argument(
            "--force",
            action="store_true",
            help="Skip confirmation prompt",
        )

    def handle(self, *args, **options):
        pk = options.get("id")
        movie_id = options.get("movie_id")

        if bool(pk) == (movie_id is not None):
            raise CommandError("Provide exactly one of: id or --movie-id")

        store = get_movie_store()
        result = store.get_by_primary_key(pk) if pk else store.get_by_movie_id(movie_id)
        if result.outcome is StoreOutcome.NOT_FOUND:
            if pk:
                raise CommandError(f"Movie with id {pk} not found")
            raise CommandError(f"Movie with Movie_ID {movie_id} not found")
        if not result.ok:
            raise CommandError(f"Error fetching movie: {result.error}")

        movie = result.movie
        self.stdout.write(f"\nMovie: {movie}")
        self.stdout.write(f"  ID: {movie.pk}")
        self.stdout.write(f"  Movie_ID: {movie.movie_id}")

        if not options["force"]:
            confirm = input("\nAre you sure you want to delete this movie? [y/N] ")
            if confirm.lower() != "y":
                self.stdout.write(self.style.WARNING("Aborted."))
                return

        result = store.delete_by_primary_key(movie.pk)
        if not result.ok:
            raise CommandError(f"Error deleting movie: {result.error}")

        self.stdout.write(self.style.SUCCESS(f"\nDeleted movie '{movie}'."))
