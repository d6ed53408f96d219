"""
Test settings for campus_coffee project.

Used by pytest-django (see pyproject.toml). No debug toolbar, in-memory
database, and an OSM base URL that is never contacted.
"""

from .base import *  # noqa: F401, F403

DEBUG = False

ALLOWED_HOSTS = ["testserver", "localhost"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

OSM_API_BASE_URL = "https://osm.test/api/0.6"
OSM_API_TIMEOUT = 1.0
OSM_USER_AGENT = "campus-coffee-tests/0.1"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
            "level": "WARNING",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "pos": {
            "level": "DEBUG",
            "propagate": True,
        },
    },
}
