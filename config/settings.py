"""
Django settings for the club portal.

Values come from the environment (or a .env file next to pyproject.toml)
through django-environ.
"""
from pathlib import Path

import environ

BASE_DIR = Path(__file__).resolve().parent.parent

env = environ.Env(
    DEBUG=(bool, False),
)

env_file = BASE_DIR / ".env"
if env_file.exists():
    environ.Env.read_env(env_file)

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = env("DJANGO_SECRET_KEY", default="django-insecure-dev-key-change-in-production")

DEBUG = env("DEBUG")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",

    # Third party
    "rest_framework",

    # Local apps
    "clubs",
]

DATABASES = {
    "default": env.db("DATABASE_URL", default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}"),
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Clubs
# Dotted path of the KeyValueStorage class build_services() uses by default.
CLUBS_STORAGE_BACKEND = env(
    "CLUBS_STORAGE_BACKEND",
    default="clubs.stores.django_store.DjangoStorage",
)
CLUBS_DEFAULT_ADMIN_USERNAME = env("CLUBS_DEFAULT_ADMIN_USERNAME", default="admin")
CLUBS_DEFAULT_ADMIN_PASSWORD = env("CLUBS_DEFAULT_ADMIN_PASSWORD", default="admin123")
CLUBS_NEW_EVENT_WINDOW_HOURS = env.int("CLUBS_NEW_EVENT_WINDOW_HOURS", default=24)

# Logging
LOG_LEVEL = env("LOG_LEVEL", default="INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "clubs": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
    },
}
