"""
Tests for the document manager and structure binding.
"""

from django.test import TestCase, override_settings

from eventsite.models import WORKFLOW_STAGE_PUBLISHED, WORKFLOW_STAGE_TEST, ContentNode
from eventsite.services.documents import DocumentManager, DocumentManagerError, DocumentNotFound
from eventsite.services.structures import get_structure_properties
from eventsite.services.webspace import initialize_webspace

ROOT = "/cmf/example/contents"


class DocumentManagerTest(TestCase):
    """Test DocumentManager."""

    def setUp(self):
        """Set up test data."""
        self.manager = DocumentManager()
        self.home, _ = initialize_webspace(self.manager, "en")

    def _page(self, title="Events"):
        page = self.manager.create("page")
        page.title = title
        return page

    def test_create_unknown_kind(self):
        with self.assertRaises(ValueError):
            self.manager.create("article")

    def test_uuid_assigned_on_first_persist(self):
        page = self._page()
        self.assertIsNone(page.uuid)
        self.manager.persist(page, "en")
        self.assertIsNotNone(page.uuid)

        first_uuid = page.uuid
        self.manager.persist(page, "en")
        self.assertEqual(page.uuid, first_uuid)

    def test_persist_places_under_root_by_default(self):
        page = self._page("Our Events")
        self.manager.persist(page, "en")
        self.assertEqual(page.parent_path, ROOT)
        self.assertEqual(page.path, f"{ROOT}/our-events")
        self.assertEqual(page.locale, "en")

    def test_persist_under_parent_path(self):
        parent = self._page("Events")
        self.manager.persist(parent, "en")
        child = self._page("Archive")
        self.manager.persist(child, "en", {"parent_path": parent.path})
        self.assertEqual(child.path, f"{ROOT}/events/archive")

    def test_persist_missing_parent(self):
        page = self._page()
        with self.assertRaises(DocumentNotFound):
            self.manager.persist(page, "en", {"parent_path": f"{ROOT}/missing"})

    def test_persist_sibling_names_are_unique(self):
        first = self._page("Events")
        second = self._page("Events")
        self.manager.persist(first, "en")
        self.manager.persist(second, "en")
        self.assertEqual(first.path, f"{ROOT}/events")
        self.assertEqual(second.path, f"{ROOT}/events-1")

    def test_persist_duplicate_resource_segment(self):
        first = self._page("Events")
        first.resource_segment = "/events"
        self.manager.persist(first, "en")
        self.manager.flush()

        second = self._page("More Events")
        second.resource_segment = "/events"
        with self.assertRaises(DocumentManagerError):
            self.manager.persist(second, "en")
        self.assertIsNone(second.uuid)

    def test_persist_same_document_twice_keeps_resource_segment(self):
        page = self._page("Events")
        page.resource_segment = "/events"
        self.manager.persist(page, "en")
        self.manager.persist(page, "en")
        self.manager.flush()

        stored = self.manager.find(page.path, "en")
        self.manager.persist(stored, "en")
        self.assertEqual(stored.resource_segment, "/events")

    def test_resource_segment_per_locale(self):
        initialize_webspace(self.manager, "de")
        english = self._page("Events")
        english.resource_segment = "/events"
        self.manager.persist(english, "en")
        german = self._page("Events")
        german.resource_segment = "/events"
        self.manager.persist(german, "de")
        self.assertEqual(self.manager.flush(), 2)

    def test_unique_resource_segment(self):
        self.assertEqual(self.manager.unique_resource_segment("/events", "en"), "/events")
        for title in ["Events", "Events Again"]:
            page = self._page(title)
            page.resource_segment = self.manager.unique_resource_segment("/events", "en")
            self.manager.persist(page, "en")
        self.assertEqual(self.manager.unique_resource_segment("/events", "en"), "/events-2")

    def test_persist_does_not_write_until_flush(self):
        page = self._page()
        self.manager.persist(page, "en")
        self.assertFalse(ContentNode.objects.filter(path=page.path).exists())

        written = self.manager.flush()
        self.assertEqual(written, 1)
        self.assertTrue(ContentNode.objects.filter(path=page.path).exists())
        self.assertEqual(self.manager.pending, [])

    def test_find_returns_pending_document(self):
        page = self._page()
        self.manager.persist(page, "en")
        self.assertIs(self.manager.find(page.path, "en"), page)

    def test_find_loads_from_database(self):
        found = self.manager.find(ROOT, "en")
        self.assertEqual(found.pk, self.home.pk)
        self.assertEqual(found.kind, "home")

    def test_find_missing(self):
        with self.assertRaises(DocumentNotFound) as ctx:
            self.manager.find(ROOT, "de")
        self.assertEqual(ctx.exception.path, ROOT)
        self.assertEqual(ctx.exception.locale, "de")

    def test_publish_snapshots_content(self):
        page = self._page()
        page.structure.bind({"title": "Events", "article": "<p>One</p>"})
        self.manager.persist(page, "en")
        self.manager.publish(page, "en")

        page.structure.bind({"article": "<p>Two</p>"})
        self.assertEqual(page.workflow_stage, WORKFLOW_STAGE_PUBLISHED)
        self.assertEqual(page.published_content["article"], "<p>One</p>")
        self.assertEqual(page.content["article"], "<p>Two</p>")
        self.assertIsNotNone(page.published_at)

    def test_publish_requires_persist(self):
        page = self._page()
        self.assertEqual(page.workflow_stage, WORKFLOW_STAGE_TEST)
        with self.assertRaises(DocumentManagerError):
            self.manager.publish(page, "en")

    def test_clear_discards_pending(self):
        page = self._page()
        self.manager.persist(page, "en")
        self.manager.clear()
        self.assertEqual(self.manager.flush(), 0)
        self.assertFalse(ContentNode.objects.filter(path=page.path).exists())

    def test_purge(self):
        page = self._page()
        self.manager.persist(page, "en")
        self.manager.flush()
        self.manager.purge()
        self.assertEqual(ContentNode.objects.count(), 0)


class WebspaceInitializationTest(TestCase):
    """Test initialize_webspace."""

    def test_creates_home_once(self):
        manager = DocumentManager()
        home, created = initialize_webspace(manager, "en")
        self.assertTrue(created)
        self.assertEqual(home.path, ROOT)
        self.assertEqual(home.structure_type, "homepage")
        self.assertTrue(home.is_published)

        again, created = initialize_webspace(manager, "en")
        self.assertFalse(created)
        self.assertEqual(again.pk, home.pk)
        self.assertEqual(ContentNode.objects.filter(kind="home").count(), 1)

    def test_queued_home_counts_as_existing(self):
        manager = DocumentManager()
        home = manager.create("home")
        home.path = ROOT
        home.title = "Queued"
        manager.persist(home, "en")

        found, created = initialize_webspace(manager, "en")
        self.assertFalse(created)
        self.assertIs(found, home)
        self.assertEqual(manager.pending, [home])
        self.assertFalse(ContentNode.objects.exists())


class StructureTest(TestCase):
    """Test structure templates and binding."""

    def test_bind_ignores_unknown_properties(self):
        node = ContentNode(structure_type="default", content={})
        node.structure.bind({"title": "T", "url": "/t", "structureType": "default", "x": 1})
        self.assertEqual(node.content, {"title": "T", "url": "/t"})

    def test_bind_merges_by_default(self):
        node = ContentNode(structure_type="event_overview", content={"title": "T"})
        node.structure.bind({"pages": {"dataSource": "abc"}})
        self.assertEqual(node.content, {"title": "T", "pages": {"dataSource": "abc"}})

    def test_bind_clear_missing(self):
        node = ContentNode(structure_type="default", content={"title": "T", "article": "A"})
        node.structure.bind({"title": "New"}, clear_missing=True)
        self.assertEqual(node.content, {"title": "New", "url": None, "article": None})

    def test_to_dict_lists_every_template_property(self):
        node = ContentNode(structure_type="homepage", content={"title": "T", "events": [1, 2, 3]})
        self.assertEqual(
            node.structure.to_dict(),
            {
                "title": "T",
                "url": None,
                "article": None,
                "events": [1, 2, 3],
                "eventOverviewPage": None,
            },
        )

    def test_unknown_structure_type(self):
        node = ContentNode(structure_type="missing", content={})
        with self.assertRaises(ValueError):
            node.structure.bind({"title": "T"})

    @override_settings(CONTENT_STRUCTURES={"landing": ["title", "hero"]})
    def test_custom_structure_from_settings(self):
        self.assertEqual(get_structure_properties("landing"), ["title", "hero"])
        self.assertIn("article", get_structure_properties("default"))
