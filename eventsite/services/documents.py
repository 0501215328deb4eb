"""
Document manager for the content repository.

Wraps ContentNode persistence behind a create/find/persist/publish/flush API.
Writes are queued by persist() and publish() and only hit the database on
flush(), which saves the whole queue in one transaction.
"""

import copy
import logging
import uuid
from typing import Any

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from eventsite.models import WORKFLOW_STAGE_PUBLISHED, ContentNode
from eventsite.services.paths import PathCleanup

logger = logging.getLogger(__name__)

DOCUMENT_KINDS = {"page", "home"}


class DocumentManagerError(Exception):
    """Raised when a document operation cannot be carried out."""


class DocumentNotFound(DocumentManagerError):
    """Raised when no document exists at a path."""

    def __init__(self, path: str, locale: str | None = None):
        self.path = path
        self.locale = locale
        super().__init__(f"Document not found at {path!r} (locale={locale})")


class DocumentManager:
    """Creates, persists and publishes content nodes."""

    def __init__(self, path_cleanup: PathCleanup | None = None, root_path: str | None = None):
        self.path_cleanup = path_cleanup or PathCleanup()
        self.root_path = root_path or settings.CONTENT_ROOT_PATH
        self._pending: dict[int, ContentNode] = {}

    @property
    def pending(self) -> list[ContentNode]:
        return list(self._pending.values())

    def create(self, kind: str) -> ContentNode:
        """Return a new, unsaved document of the given kind."""
        if kind not in DOCUMENT_KINDS:
            raise ValueError(f"Unknown document kind: {kind}")
        return ContentNode(kind=kind, content={}, extensions={}, navigation_contexts=[])

    def find(self, path: str, locale: str) -> ContentNode:
        """
        Load the document at path in locale.

        Queued documents are searched before the database.

        Raises:
            DocumentNotFound: If nothing exists at path
        """
        for document in self._pending.values():
            if document.path == path and document.locale == locale:
                return document
        try:
            return ContentNode.objects.get(path=path, locale=locale)
        except ContentNode.DoesNotExist:
            raise DocumentNotFound(path, locale) from None

    def exists(self, path: str, locale: str) -> bool:
        try:
            self.find(path, locale)
        except DocumentNotFound:
            return False
        return True

    def persist(
        self, document: ContentNode, locale: str, options: dict[str, Any] | None = None
    ) -> ContentNode:
        """
        Queue a document for writing.

        On first persist the document gets its uuid and, unless it already has a
        path, a node under options["parent_path"] (default: the webspace root)
        named after its title.

        Raises:
            DocumentNotFound: If the parent path does not exist
            DocumentManagerError: If another document in locale has the same resource segment
        """
        options = options or {}
        document.locale = locale

        if not document.path:
            parent_path = options.get("parent_path") or self.root_path
            if not self.exists(parent_path, locale):
                raise DocumentNotFound(parent_path, locale)
            document.parent_path = parent_path
            document.path = self._unique_child_path(parent_path, document.title, locale)

        if document.resource_segment and self.resource_segment_exists(
            document.resource_segment, locale, exclude=document
        ):
            raise DocumentManagerError(
                f"Resource segment {document.resource_segment!r} already exists (locale={locale})"
            )

        if document.uuid is None:
            document.uuid = uuid.uuid4()
            logger.debug("Assigned uuid %s to %s", document.uuid, document.path)

        self._pending[id(document)] = document
        return document

    def publish(self, document: ContentNode, locale: str) -> ContentNode:
        """Mark a persisted document as published and snapshot its content."""
        if document.uuid is None:
            raise DocumentManagerError(
                f"Cannot publish {document.title!r} before it has been persisted"
            )
        document.locale = locale
        document.workflow_stage = WORKFLOW_STAGE_PUBLISHED
        document.published_content = copy.deepcopy(document.content or {})
        document.published_at = timezone.now()
        self._pending[id(document)] = document
        return document

    def flush(self) -> int:
        """Write all queued documents in one transaction. Returns the number written."""
        documents = list(self._pending.values())
        with transaction.atomic():
            for document in documents:
                document.save()
        self._pending.clear()
        logger.info("Flushed %d document(s)", len(documents))
        return len(documents)

    def clear(self) -> None:
        """Discard queued writes."""
        self._pending.clear()

    def purge(self) -> int:
        """Delete every stored document."""
        self.clear()
        deleted, _ = ContentNode.objects.all().delete()
        logger.info("Purged %d document(s)", deleted)
        return deleted

    def resource_segment_exists(
        self, resource_segment: str, locale: str, exclude: ContentNode | None = None
    ) -> bool:
        """Check queued documents, then the database, for a document with resource_segment."""
        for document in self._pending.values():
            if document is exclude:
                continue
            if document.resource_segment == resource_segment and document.locale == locale:
                return True
        queryset = ContentNode.objects.filter(resource_segment=resource_segment, locale=locale)
        if exclude is not None and exclude.pk is not None:
            queryset = queryset.exclude(pk=exclude.pk)
        return queryset.exists()

    def unique_resource_segment(self, resource_segment: str, locale: str) -> str:
        """Return resource_segment, suffixed with -1, -2 ... until no document uses it."""
        candidate = resource_segment
        suffix = 0
        while self.resource_segment_exists(candidate, locale):
            suffix += 1
            candidate = f"{resource_segment}-{suffix}"
        return candidate

    def _unique_child_path(self, parent_path: str, title: str, locale: str) -> str:
        name = self.path_cleanup.cleanup(title, locale).strip("/") or "page"
        base_path = f"{parent_path.rstrip('/')}/{name}"
        candidate = base_path
        suffix = 0
        while self.exists(candidate, locale):
            suffix += 1
            candidate = f"{base_path}-{suffix}"
        return candidate
