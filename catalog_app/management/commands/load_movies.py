"""
Load movies from a JSON file into the catalog.

Usage:
    python manage.py load_movies seed_data/movies.json

The file holds an array of OMDb-style documents ("Movie_ID", "Title", "Year",
"imdbRating", ...). Each document is upserted by Movie_ID: a movie with the
same Movie_ID is updated, otherwise a new one is created.
"""

import json
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from catalog_app.services.movie_store import get_movie_store
from catalog_app.services.store_result import StoreOutcome


class Command(BaseCommand):
    help = "Load movies from a JSON file (upsert by Movie_ID)"

    def add_arguments(self, parser):
        parser.add_argument(
            "path",
            type=str,
            help="Path to a JSON file containing an array of movie documents",
        )

    def handle(self, *args, **options):
        seed_file = Path(options["path"])
        if not seed_file.exists():
            raise CommandError(f"Seed file not found: {seed_file}")

        with open(seed_file, encoding="utf-8") as f:
            try:
                documents = json.load(f)
            except json.JSONDecodeError as e:
                raise CommandError(f"Invalid JSON in {seed_file}: {e}")

        if not isinstance(documents, list):
            raise CommandError("Seed file must contain a JSON array of movies")

        store = get_movie_store()
        created_count = 0
        updated_count = 0
        failed_count = 0

        for position, document in enumerate(documents):
            if not isinstance(document, dict):
                failed_count += 1
                self.stderr.write(self.style.ERROR(f"  Failed: item {position} is not a JSON object"))
                continue

            movie_id = document.get("Movie_ID")
            result = store.update_by_movie_id(movie_id, document)

            if result.outcome is StoreOutcome.NOT_FOUND:
                result = store.create(document)
                if result.ok:
                    created_count += 1
                    self.stdout.write(f"  Created: {result.movie}")
                    continue
            elif result.ok:
                updated_count += 1
                self.stdout.write(f"  Updated: {result.movie}")
                continue

            failed_count += 1
            title = document.get("Title", "<untitled>")
            self.stderr.write(self.style.ERROR(f"  Failed: {title} (Movie_ID={movie_id}): {result.error}"))

        self.stdout.write(
            self.style.SUCCESS(
                f"\nDone. Created: {created_count}, Updated: {updated_count}, Failed: {failed_count}"
            )
        )
