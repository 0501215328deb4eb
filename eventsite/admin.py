"""
Django admin configuration for eventsite.
"""

from django.contrib import admin
from django.utils.html import format_html

from eventsite.models import ContentNode, Event
from eventsite.services.documents import DocumentManager, DocumentManagerError


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    """Admin interface for Event model."""

    list_display = ["title", "location", "start_date", "end_date", "enabled"]
    list_filter = ["enabled", "start_date"]
    search_fields = ["title", "teaser", "location"]
    readonly_fields = ["created_at", "updated_at"]
    actions = ["enable_action", "disable_action"]

    @admin.action(description="Enable selected events")
    def enable_action(self, request, queryset):
        updated = queryset.update(enabled=True)
        self.message_user(request, f"Enabled {updated} event(s).", level="SUCCESS")

    @admin.action(description="Disable selected events")
    def disable_action(self, request, queryset):
        updated = queryset.update(enabled=False)
        self.message_user(request, f"Disabled {updated} event(s).", level="SUCCESS")


@admin.register(ContentNode)
class ContentNodeAdmin(admin.ModelAdmin):
    """Admin interface for ContentNode model."""

    list_display = [
        "title",
        "path",
        "locale",
        "structure_type",
        "workflow_stage_display",
        "published_at",
        "updated_at",
    ]
    list_filter = ["kind", "locale", "structure_type", "workflow_stage"]
    search_fields = ["title", "path", "resource_segment"]
    readonly_fields = ["uuid", "published_content", "published_at", "created_at", "updated_at"]
    actions = ["publish_action"]

    def workflow_stage_display(self, obj):
        """Display workflow stage with color coding."""
        color = "#10b981" if obj.is_published else "#f59e0b"
        return format_html(
            '<span style="color: {};">{}</span>', color, obj.get_workflow_stage_display()
        )

    workflow_stage_display.short_description = "Stage"
    workflow_stage_display.admin_order_field = "workflow_stage"

    @admin.action(description="Publish selected documents")
    def publish_action(self, request, queryset):
        """
        Publish selected documents through the document manager.

        Nodes that were never persisted (no uuid yet) are persisted first; nodes
        the document manager rejects are skipped and reported.
        """
        document_manager = DocumentManager()
        for node in queryset:
            try:
                if node.uuid is None:
                    document_manager.persist(node, node.locale)
                document_manager.publish(node, node.locale)
            except DocumentManagerError as e:
                self.message_user(
                    request, f"Skipped {node.title!r}: {str(e)}", level="WARNING"
                )
        published_count = document_manager.flush()
        self.message_user(
            request,
            f"Successfully published {published_count} document(s).",
            level="SUCCESS",
        )
