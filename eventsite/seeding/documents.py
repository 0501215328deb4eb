"""
Demo content documents: the pages and the homepage of the example webspace.
"""

import logging
import random
from typing import Any

from django.conf import settings
from django.db.models import QuerySet
from faker import Faker

from eventsite.models import ContentNode
from eventsite.seeding.base import DocumentFixture, make_faker
from eventsite.services.documents import DocumentManager
from eventsite.services.homepage import HomepagePopulator
from eventsite.services.pages import PageCreator
from eventsite.services.paths import PathCleanup
from eventsite.services.utils import paragraphs_html

logger = logging.getLogger(__name__)


class DemoContentFixture(DocumentFixture):
    """
    Creates the demo pages and points the homepage at them.

    Needs the webspace home document and at least one enabled event.
    """

    order = 10

    def __init__(
        self,
        seed: int | None = None,
        events: QuerySet | None = None,
        path_cleanup: PathCleanup | None = None,
        faker: Faker | None = None,
        rng: random.Random | None = None,
        locale: str | None = None,
        root_path: str | None = None,
        author_id: int | None = None,
    ):
        super().__init__(seed=seed)
        self.events = events
        self.path_cleanup = path_cleanup or PathCleanup()
        self.faker = faker or make_faker(seed)
        self.rng = rng or random.Random(seed)
        self.locale = locale or settings.CONTENT_LOCALE
        self.root_path = root_path or settings.CONTENT_ROOT_PATH
        self.author_id = author_id

    def load(self, document_manager: DocumentManager) -> None:
        pages = self.load_pages(document_manager)
        self.load_homepage(document_manager, pages["Events"])

        written = document_manager.flush()
        logger.info("Demo content loaded: %d page(s), %d document write(s)", len(pages), written)

    def page_data(self) -> list[dict[str, Any]]:
        return [
            {
                "title": "Events",
                "navigationContexts": ["main"],
                "structureType": "event_overview",
                "article": paragraphs_html(self.faker.sentences()),
            },
        ]

    def load_pages(self, document_manager: DocumentManager) -> dict[str, ContentNode]:
        creator = PageCreator(
            document_manager,
            path_cleanup=self.path_cleanup,
            locale=self.locale,
            root_path=self.root_path,
            author_id=self.author_id,
        )

        pages = {}
        for data in self.page_data():
            pages[data["title"]] = creator.create(data)
        return pages

    def load_homepage(
        self, document_manager: DocumentManager, event_overview_page: ContentNode
    ) -> ContentNode:
        populator = HomepagePopulator(
            document_manager,
            events=self.events,
            rng=self.rng,
            locale=self.locale,
            root_path=self.root_path,
        )
        return populator.populate(self.faker, event_overview_page)
