"""
Event demo data.
"""

import logging
from datetime import timedelta

from django.conf import settings
from django.utils import timezone

from eventsite.models import Event
from eventsite.seeding.base import ModelFixture, make_faker
from eventsite.services.utils import paragraphs_html, strip_trailing_punctuation

logger = logging.getLogger(__name__)


class EventFixture(ModelFixture):
    """Creates fake events; every fourth one is left disabled."""

    order = 0

    def __init__(self, seed: int | None = None, count: int | None = None):
        super().__init__(seed=seed)
        self.count = count if count is not None else settings.SEED_EVENT_COUNT

    def purge(self) -> None:
        Event.objects.all().delete()

    def load(self) -> None:
        faker = make_faker(self.seed)
        now = timezone.now()

        events = []
        for index in range(self.count):
            start_date = now + timedelta(days=faker.random_int(min=1, max=180))
            events.append(
                Event(
                    title=strip_trailing_punctuation(faker.sentence(nb_words=3)),
                    teaser=faker.sentence(nb_words=12),
                    description=paragraphs_html(faker.paragraphs(nb=3)),
                    location=faker.city(),
                    start_date=start_date,
                    end_date=start_date + timedelta(hours=faker.random_int(min=1, max=48)),
                    enabled=index % 4 != 3,
                )
            )
        Event.objects.bulk_create(events)
        logger.info("Created %d event(s)", len(events))
