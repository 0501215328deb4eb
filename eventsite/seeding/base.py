"""
Fixture loading for eventsite demo data.

Fixtures are listed in settings.SEED_FIXTURES as dotted paths. Model fixtures
write through the ORM and always run before document fixtures, which write
through a DocumentManager. Within each group fixtures run by ascending order.
"""

import logging
from typing import Any

from django.conf import settings
from django.utils.module_loading import import_string
from faker import Faker

from eventsite.models import ContentNode, Event
from eventsite.services.documents import DocumentManager
from eventsite.services.webspace import initialize_webspace

logger = logging.getLogger(__name__)


def make_faker(seed: int | None = None) -> Faker:
    """Create a Faker for settings.FAKER_LOCALE, seeded when seed is given."""
    faker = Faker(settings.FAKER_LOCALE)
    if seed is not None:
        faker.seed_instance(seed)
    return faker


class BaseFixture:
    """
    Abstract base class for demo data fixtures.

    Subclasses set ``order`` and implement load().
    """

    order: int = 0

    def __init__(self, seed: int | None = None):
        self.seed = seed

    @property
    def name(self) -> str:
        return type(self).__name__

    def get_order(self) -> int:
        return self.order


class ModelFixture(BaseFixture):
    """Fixture that writes ORM models."""

    def load(self) -> None:
        raise NotImplementedError("Subclasses must implement load()")

    def purge(self) -> None:
        """Remove the data this fixture creates. Default: nothing."""


class DocumentFixture(BaseFixture):
    """Fixture that writes content documents."""

    def load(self, document_manager: DocumentManager) -> None:
        raise NotImplementedError("Subclasses must implement load(document_manager)")


def get_fixtures(names: list[str] | None = None, **kwargs: Any) -> list[BaseFixture]:
    """
    Instantiate the configured fixtures, sorted by order.

    names restricts the result to fixtures with those class names. kwargs are
    passed to every fixture constructor.

    Raises:
        ValueError: If a requested name is not configured
    """
    fixture_classes = [import_string(path) for path in settings.SEED_FIXTURES]
    if names:
        available = {cls.__name__: cls for cls in fixture_classes}
        unknown = sorted(set(names) - set(available))
        if unknown:
            raise ValueError(f"Unknown fixture(s): {', '.join(unknown)}")
        fixture_classes = [cls for cls in fixture_classes if cls.__name__ in names]

    fixtures = [cls(**kwargs) for cls in fixture_classes]
    return sorted(fixtures, key=lambda fixture: fixture.get_order())


class FixtureExecutor:
    """Runs fixtures against the database and the content repository."""

    def __init__(self, document_manager: DocumentManager | None = None, locale: str | None = None):
        self.document_manager = document_manager or DocumentManager()
        self.locale = locale or settings.CONTENT_LOCALE

    def purge(self, fixtures: list[BaseFixture]) -> None:
        """Delete documents, then the ORM data owned by the model fixtures."""
        self.document_manager.purge()
        for fixture in reversed(fixtures):
            if isinstance(fixture, ModelFixture):
                fixture.purge()

    def execute(
        self, fixtures: list[BaseFixture], append: bool = False, initialize: bool = True
    ) -> dict[str, int]:
        """
        Load fixtures.

        Returns dict with fixtures_loaded, events, documents.
        """
        if not append:
            logger.info("Purging existing demo data")
            self.purge(fixtures)

        model_fixtures = [f for f in fixtures if isinstance(f, ModelFixture)]
        document_fixtures = [f for f in fixtures if isinstance(f, DocumentFixture)]

        loaded = 0
        for fixture in model_fixtures:
            logger.info("Loading model fixture %s (order %d)", fixture.name, fixture.get_order())
            fixture.load()
            loaded += 1

        if initialize:
            initialize_webspace(self.document_manager, self.locale)

        for fixture in document_fixtures:
            logger.info("Loading document fixture %s (order %d)", fixture.name, fixture.get_order())
            fixture.load(self.document_manager)
            loaded += 1

        stats = {
            "fixtures_loaded": loaded,
            "events": Event.objects.count(),
            "documents": ContentNode.objects.count(),
        }
        logger.info(
            "Loaded %d fixture(s): events=%d documents=%d",
            stats["fixtures_loaded"],
            stats["events"],
            stats["documents"],
        )
        return stats


def run_seed(
    names: list[str] | None = None,
    append: bool = False,
    initialize: bool = True,
    seed: int | None = None,
) -> dict[str, int]:
    """Load the configured fixtures. seed makes the generated content reproducible."""
    fixtures = get_fixtures(names, seed=seed)
    return FixtureExecutor().execute(fixtures, append=append, initialize=initialize)
