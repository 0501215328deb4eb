"""
Background tasks for eventsite.

Uses Django Tasks for deferred execution.
"""

import logging

from django_tasks import task

from eventsite.seeding.base import run_seed

logger = logging.getLogger(__name__)


@task
def task_seed_demo_content(append: bool = False, seed: int | None = None) -> dict[str, int]:
    """Load all configured demo fixtures."""
    logger.info("Seeding demo content (append=%s, seed=%s)", append, seed)
    return run_seed(append=append, seed=seed)
