"""
Homepage population for the demo content.
"""

import logging
import random

from django.conf import settings
from django.db.models import QuerySet
from faker import Faker

from eventsite.models import ContentNode, Event
from eventsite.services.documents import DocumentManager
from eventsite.services.utils import paragraphs_html, strip_trailing_punctuation

logger = logging.getLogger(__name__)

EVENT_REFERENCE_COUNT = 3


class HomepagePopulator:
    """Fills the webspace home document with generated text and references."""

    def __init__(
        self,
        document_manager: DocumentManager,
        events: QuerySet | None = None,
        rng: random.Random | None = None,
        locale: str | None = None,
        root_path: str | None = None,
    ):
        self.document_manager = document_manager
        self.events = events if events is not None else Event.objects.all()
        self.rng = rng or random.Random()
        self.locale = locale or settings.CONTENT_LOCALE
        self.root_path = root_path or settings.CONTENT_ROOT_PATH

    def enabled_events(self) -> list[Event]:
        return list(self.events.filter(enabled=True))

    def pick_event_ids(self, events: list[Event]) -> list[int]:
        """
        Choose EVENT_REFERENCE_COUNT event ids independently; repeats are allowed.

        Raises:
            IndexError: If events is empty
        """
        return [self.rng.choice(events).id for _ in range(EVENT_REFERENCE_COUNT)]

    def populate(self, faker: Faker, event_overview_page: ContentNode) -> ContentNode:
        """Bind generated content onto the home document, then persist and publish it."""
        events = self.enabled_events()

        home = self.document_manager.find(self.root_path, self.locale)
        home.title = strip_trailing_punctuation(faker.sentence(nb_words=5))
        home.structure.bind(
            {
                "title": home.title,
                "url": "/",
                "article": paragraphs_html(faker.sentences()),
                "events": self.pick_event_ids(events),
                "eventOverviewPage": str(event_overview_page.uuid),
            }
        )

        self.document_manager.persist(home, self.locale)
        self.document_manager.publish(home, self.locale)
        logger.info("Populated homepage %s: %s", home.path, home.structure.to_dict())
        return home
