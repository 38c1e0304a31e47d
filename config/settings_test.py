"""
Settings for the catalog test suite.

The movie store runs on a throwaway SQLite file whatever DATABASE_URL says,
so a developer's .env pointing at a shared catalog is never written to.
"""

from config.settings import *  # noqa: F401, F403

SECRET_KEY = "catalog-test-secret-key"
DEBUG = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "test_catalog.sqlite3",  # noqa: F405
    }
}
CATALOG_DATABASE_ALIAS = "default"

ALLOWED_HOSTS = ["testserver", "localhost"]

# catalog_app records propagate to the root logger so caplog sees store
# failures; -o log_cli=true prints them live.
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "catalog": {
            "format": "{levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "stderr": {
            "class": "logging.StreamHandler",
            "formatter": "catalog",
        },
    },
    "root": {
        "handlers": ["stderr"],
        "level": "WARNING",
    },
    "loggers": {
        "catalog_app": {
            "level": "INFO",
            "propagate": True,
        },
    },
}
