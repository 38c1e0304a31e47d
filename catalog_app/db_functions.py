"""
Database functions the catalog needs beyond Django's built-ins.

SQLite's LOWER() only folds ASCII letters, so "AMÉLIE" would never match
"Amélie". On SQLite connections a Python-backed CATALOG_LOWER is registered
and used instead; other backends keep their own LOWER().
"""

from django.db.models.functions import Lower

SQLITE_LOWER_FUNCTION = "CATALOG_LOWER"


def _lower(value):
    if value is None:
        return None
    return value.lower()


class UnicodeLower(Lower):
    def as_sqlite(self, compiler, connection, **extra_context):
        return super().as_sql(compiler, connection, function=SQLITE_LOWER_FUNCTION, **extra_context)


def register_sqlite_functions(sender, connection, **kwargs):
    """connection_created receiver: install CATALOG_LOWER on new SQLite connections."""
    if connection.vendor != "sqlite":
        return
    connection.connection.create_function(SQLITE_LOWER_FUNCTION, 1, _lower, deterministic=True)
