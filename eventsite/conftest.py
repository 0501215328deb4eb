"""Pytest configuration for eventsite."""

import pytest


@pytest.fixture(autouse=True)
def _use_immediate_task_backend(settings):
    """Use ImmediateBackend for tests so tasks run synchronously without a worker."""
    settings.TASKS = {
        "default": {
            "BACKEND": "django_tasks.backends.immediate.ImmediateBackend",
            "ENQUEUE_ON_COMMIT": False,
        }
    }


@pytest.fixture(autouse=True)
def _content_settings(settings):
    """Pin content settings so tests do not depend on the environment."""
    settings.CONTENT_LOCALE = "en"
    settings.CONTENT_ROOT_PATH = "/cmf/example/contents"
    settings.CONTENT_DEFAULT_AUTHOR_ID = 1
    settings.FAKER_LOCALE = "en_US"
    settings.SEED_EVENT_COUNT = 8
