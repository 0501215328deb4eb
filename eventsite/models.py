"""
Django models for eventsite.
"""

from django.db import models

from eventsite.services.structures import Structure

WORKFLOW_STAGE_TEST = "test"
WORKFLOW_STAGE_PUBLISHED = "published"

REDIRECT_TYPE_NONE = "none"
REDIRECT_TYPE_INTERNAL = "internal"
REDIRECT_TYPE_EXTERNAL = "external"


class Event(models.Model):
    """An event listed on the site."""

    title = models.CharField(max_length=255)
    teaser = models.TextField(blank=True)
    description = models.TextField(blank=True)
    location = models.CharField(max_length=255, blank=True)
    start_date = models.DateTimeField(null=True, blank=True)
    end_date = models.DateTimeField(null=True, blank=True)
    enabled = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["start_date"]
        indexes = [
            models.Index(fields=["enabled", "start_date"], name="eventsite_event_enabled_idx"),
        ]

    def __str__(self):
        return self.title


class ContentNode(models.Model):
    """
    A document in the content repository.

    Nodes are addressed by path (unique per locale) and by uuid. The uuid stays
    empty until the document manager persists the node for the first time.
    Structured content lives in ``content``; ``published_content`` is the
    snapshot taken on the last publish.
    """

    KIND_CHOICES = [
        ("page", "Page"),
        ("home", "Home"),
    ]

    WORKFLOW_STAGE_CHOICES = [
        (WORKFLOW_STAGE_TEST, "Test"),
        (WORKFLOW_STAGE_PUBLISHED, "Published"),
    ]

    REDIRECT_TYPE_CHOICES = [
        (REDIRECT_TYPE_NONE, "No redirect"),
        (REDIRECT_TYPE_INTERNAL, "Internal"),
        (REDIRECT_TYPE_EXTERNAL, "External"),
    ]

    uuid = models.UUIDField(null=True, blank=True, db_index=True, editable=False)
    kind = models.CharField(max_length=20, choices=KIND_CHOICES, default="page")
    path = models.CharField(max_length=1000)
    parent_path = models.CharField(max_length=1000, blank=True)
    locale = models.CharField(max_length=10)
    title = models.CharField(max_length=500)
    resource_segment = models.CharField(max_length=1000, blank=True)
    structure_type = models.CharField(max_length=100, default="default")
    workflow_stage = models.CharField(
        max_length=20, choices=WORKFLOW_STAGE_CHOICES, default=WORKFLOW_STAGE_TEST
    )
    author = models.IntegerField(null=True, blank=True)  # Contact id, not a user FK
    navigation_contexts = models.JSONField(default=list, blank=True)
    extensions = models.JSONField(default=dict, blank=True)  # seo, excerpt
    redirect_type = models.CharField(
        max_length=20, choices=REDIRECT_TYPE_CHOICES, default=REDIRECT_TYPE_NONE
    )
    redirect_external = models.CharField(max_length=2000, blank=True)
    content = models.JSONField(default=dict, blank=True)
    published_content = models.JSONField(default=dict, blank=True)
    published_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["path"]
        unique_together = [["path", "locale"]]
        indexes = [
            models.Index(fields=["parent_path", "locale"], name="eventsite_node_parent_idx"),
        ]

    def __str__(self):
        return f"{self.title} ({self.path})"

    @property
    def structure(self):
        """Structured content bound to this node's template."""
        return Structure(self)

    @property
    def is_published(self) -> bool:
        return self.workflow_stage == WORKFLOW_STAGE_PUBLISHED
