from catalog_app.models.movie import DOCUMENT_FIELDS, Movie

__all__ = ["DOCUMENT_FIELDS", "Movie"]
