"""
Start the catalog web server.

Usage:
    python manage.py serve_catalog
    python manage.py serve_catalog --port 9000 --noreload

The database connection is checked first. A failed check is logged and the
server starts anyway; requests then fail at the store.
"""

import logging

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand
from django.db import DatabaseError, connections

from catalog_app.services.movie_store import get_movie_store

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Check the database connection and run the catalog web server"

    def add_arguments(self, parser):
        parser.add_argument(
            "--host",
            default="0.0.0.0",
            help="Interface to listen on",
        )
        parser.add_argument(
            "--port",
            type=int,
            default=None,
            help="Port to listen on (defaults to the PORT setting)",
        )
        parser.add_argument(
            "--noreload",
            action="store_true",
            help="Disable the auto-reloader",
        )

    def handle(self, *args, **options):
        port = options["port"] or settings.PORT
        store = get_movie_store()

        if self.check_database(store.using):
            logger.info(f"Database '{store.using}' connected")

        self.stdout.write(f"App listening on port : {port}")
        try:
            call_command(
                "runserver",
                f"{options['host']}:{port}",
                use_reloader=not options["noreload"],
            )
        finally:
            store.close()

    @staticmethod
    def check_database(using: str) -> bool:
        try:
            connections[using].ensure_connection()
        except DatabaseError as e:
            logger.error(f"Database connection error: {e}")
            return False
        return True
