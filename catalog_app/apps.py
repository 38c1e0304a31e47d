from django.apps import AppConfig
from django.db.backends.signals import connection_created


class CatalogAppConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "catalog_app"
    verbose_name = "Movie Catalog"

    def ready(self):
        from catalog_app.db_functions import register_sqlite_functions
        from catalog_app.services.movie_store import MovieStore

        connection_created.connect(register_sqlite_functions, dispatch_uid="catalog_app_sqlite_functions")
        self.movie_store = MovieStore.create_from_settings()
