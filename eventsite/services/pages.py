"""
Page creation service for eventsite.

Turns a PageSpec into a persisted, published page node. Creation is split in
two phases: create_draft() persists the node so it receives its uuid, and
finalize() writes any content that depends on that uuid before publishing.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from django.conf import settings

from eventsite.models import REDIRECT_TYPE_EXTERNAL, WORKFLOW_STAGE_PUBLISHED, ContentNode
from eventsite.services.documents import DocumentManager
from eventsite.services.paths import PathCleanup

logger = logging.getLogger(__name__)

# Placeholder for "the uuid of the page being created"
CURRENT_DOCUMENT = "__CURRENT__"

# Keys of the flat page mapping that are not structured content fields
_SPEC_KEYS = {
    "title",
    "navigationContexts",
    "structureType",
    "url",
    "parent_path",
    "seo",
    "excerpt",
    "redirect",
}


@dataclass
class PageSpec:
    """Description of a page to create."""

    title: str
    navigation_contexts: list[str] = field(default_factory=list)
    structure_type: str = "default"
    url: str | None = None
    parent_path: str | None = None
    seo: dict[str, Any] | None = None
    excerpt: dict[str, Any] | None = None
    redirect: str | None = None
    fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PageSpec":
        """
        Build a spec from the flat mapping form used by seed data.

        Unrecognised keys (article, pages, ...) become structured content fields.
        """
        return cls(
            title=data["title"],
            navigation_contexts=list(data.get("navigationContexts") or []),
            structure_type=data.get("structureType") or "default",
            url=data.get("url"),
            parent_path=data.get("parent_path"),
            seo=data.get("seo"),
            excerpt=data.get("excerpt"),
            redirect=data.get("redirect"),
            fields={key: value for key, value in data.items() if key not in _SPEC_KEYS},
        )

    def extension_data(self) -> dict[str, Any]:
        return {"seo": self.seo or {}, "excerpt": self.excerpt or {}}


@dataclass
class PageDraft:
    """A page that has been persisted once but not yet published."""

    spec: PageSpec
    document: ContentNode
    content: dict[str, Any]
    persist_options: dict[str, Any]


def resolve_self_references(value: Any, document_uuid: str) -> Any:
    """Replace every CURRENT_DOCUMENT placeholder nested in value with document_uuid."""
    if isinstance(value, dict):
        return {key: resolve_self_references(item, document_uuid) for key, item in value.items()}
    if isinstance(value, list):
        return [resolve_self_references(item, document_uuid) for item in value]
    if value == CURRENT_DOCUMENT:
        return document_uuid
    return value


class PageCreator:
    """Creates published pages in the content repository."""

    def __init__(
        self,
        document_manager: DocumentManager,
        path_cleanup: PathCleanup | None = None,
        locale: str | None = None,
        root_path: str | None = None,
        author_id: int | None = None,
    ):
        self.document_manager = document_manager
        self.path_cleanup = path_cleanup or PathCleanup()
        self.locale = locale or settings.CONTENT_LOCALE
        self.root_path = root_path or settings.CONTENT_ROOT_PATH
        self.author_id = author_id if author_id is not None else settings.CONTENT_DEFAULT_AUTHOR_ID

    def resolve_url(self, spec: PageSpec) -> str:
        """
        Return the page URL.

        Without an explicit url the title is cleaned into a slug and, for pages
        below another page, prefixed with the parent path minus the root path.
        A generated url already used by another document gets a -1, -2 ... suffix;
        an explicit url is kept as given.
        """
        if spec.url:
            return spec.url
        url = self.path_cleanup.cleanup("/" + spec.title, self.locale)
        if spec.parent_path:
            url = spec.parent_path[len(self.root_path) :] + url
        return self.document_manager.unique_resource_segment(url, self.locale)

    def create(self, spec: PageSpec | dict[str, Any]) -> ContentNode:
        """Create, persist and publish a page."""
        return self.finalize(self.create_draft(spec))

    def create_draft(self, spec: PageSpec | dict[str, Any]) -> PageDraft:
        """Populate a new page node from spec and persist it once."""
        if isinstance(spec, dict):
            spec = PageSpec.from_dict(spec)

        url = self.resolve_url(spec)
        content = {**spec.fields, "title": spec.title, "url": url}

        document = self.document_manager.create("page")
        document.navigation_contexts = list(spec.navigation_contexts)
        document.locale = self.locale
        document.title = spec.title
        document.resource_segment = url
        document.structure_type = spec.structure_type or "default"
        document.workflow_stage = WORKFLOW_STAGE_PUBLISHED
        document.structure.bind(content)
        document.author = self.author_id
        document.extensions = spec.extension_data()

        if spec.redirect:
            document.redirect_type = REDIRECT_TYPE_EXTERNAL
            document.redirect_external = spec.redirect

        persist_options = {"parent_path": spec.parent_path or self.root_path}
        self.document_manager.persist(document, self.locale, persist_options)
        logger.debug("Persisted page draft %s at %s", document.uuid, document.path)
        return PageDraft(
            spec=spec, document=document, content=content, persist_options=persist_options
        )

    def finalize(
        self,
        draft: PageDraft,
        resolver: Callable[[str], dict[str, Any]] | None = None,
    ) -> ContentNode:
        """
        Write uuid-dependent content, then publish.

        resolver receives the page's uuid and returns the field values to bind.
        By default every CURRENT_DOCUMENT placeholder in the draft content is
        replaced with the uuid. When anything changed the page is bound and
        persisted a second time before the publish.
        """
        document = draft.document
        document_uuid = str(document.uuid)

        if resolver is not None:
            updates = resolver(document_uuid)
        else:
            updates = {}
            for name, value in draft.content.items():
                resolved = resolve_self_references(value, document_uuid)
                if resolved != value:
                    updates[name] = resolved

        if updates:
            document.structure.bind(updates)
            self.document_manager.persist(document, self.locale, draft.persist_options)
            logger.debug("Resolved self references on %s: %s", document.path, sorted(updates))

        self.document_manager.publish(document, self.locale)
        logger.info("Created page %r at %s", document.title, document.resource_segment)
        return document
