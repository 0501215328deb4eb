"""
Webspace initialization.

Creates the home document every webspace needs before pages can be added
below it.
"""

import logging

from django.conf import settings

from eventsite.models import WORKFLOW_STAGE_PUBLISHED, ContentNode
from eventsite.services.documents import DocumentManager, DocumentNotFound

logger = logging.getLogger(__name__)

HOME_TITLE = "Homepage"
HOME_STRUCTURE_TYPE = "homepage"


def initialize_webspace(
    document_manager: DocumentManager, locale: str | None = None
) -> tuple[ContentNode, bool]:
    """
    Ensure the home document exists at the root path.

    Documents queued on document_manager but not yet flushed count as existing.

    Returns (home document, created).
    """
    locale = locale or settings.CONTENT_LOCALE
    root_path = document_manager.root_path

    try:
        return document_manager.find(root_path, locale), False
    except DocumentNotFound:
        pass

    home = document_manager.create("home")
    home.path = root_path
    home.parent_path = root_path.rsplit("/", 1)[0]
    home.title = HOME_TITLE
    home.resource_segment = "/"
    home.structure_type = HOME_STRUCTURE_TYPE
    home.workflow_stage = WORKFLOW_STAGE_PUBLISHED
    home.structure.bind({"title": HOME_TITLE, "url": "/"})

    document_manager.persist(home, locale)
    document_manager.publish(home, locale)
    document_manager.flush()

    logger.info("Initialized webspace home document at %s (%s)", root_path, locale)
    return home, True
