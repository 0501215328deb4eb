"""
Django settings for eventsite.

Values are read from the environment where a deployment is expected to
override them.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-dev-key-change-me")
DEBUG = os.environ.get("DJANGO_DEBUG", "true").lower() == "true"
ALLOWED_HOSTS = [h for h in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost").split(",") if h]

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "django_tasks",
    "eventsite",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
]

ROOT_URLCONF = "eventsite.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("DATABASE_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"

TASKS = {
    "default": {
        "BACKEND": os.environ.get(
            "TASKS_BACKEND", "django_tasks.backends.immediate.ImmediateBackend"
        ),
        "ENQUEUE_ON_COMMIT": False,
    }
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "eventsite": {
            "handlers": ["console"],
            "level": os.environ.get("EVENTSITE_LOG_LEVEL", "INFO"),
        },
    },
}

# Content repository
CONTENT_LOCALE = os.environ.get("CONTENT_LOCALE", "en")
CONTENT_WEBSPACE = os.environ.get("CONTENT_WEBSPACE", "example")
CONTENT_ROOT_PATH = os.environ.get("CONTENT_ROOT_PATH", f"/cmf/{CONTENT_WEBSPACE}/contents")
CONTENT_DEFAULT_AUTHOR_ID = int(os.environ.get("CONTENT_DEFAULT_AUTHOR_ID", "1"))

# Extra or overridden structure templates: {"structure_type": ["property", ...]}
CONTENT_STRUCTURES = {}

# Demo data
FAKER_LOCALE = os.environ.get("FAKER_LOCALE", "en_US")
SEED_EVENT_COUNT = int(os.environ.get("SEED_EVENT_COUNT", "10"))
SEED_FIXTURES = [
    "eventsite.seeding.events.EventFixture",
    "eventsite.seeding.documents.DemoContentFixture",
]
