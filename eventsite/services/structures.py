"""
Structure templates for content nodes.

A structure template names the properties a document of a given structure
type carries. Binding data onto a node keeps only those properties.
"""

from typing import Any

from django.conf import settings

STRUCTURE_TEMPLATES = {
    "default": ["title", "url", "article"],
    "event_overview": ["title", "url", "article", "pages"],
    "homepage": ["title", "url", "article", "events", "eventOverviewPage"],
}


def get_structure_properties(structure_type: str) -> list[str]:
    """
    Get the property names for a structure type.

    Templates from ``settings.CONTENT_STRUCTURES`` take precedence over the
    built-in ones.

    Raises:
        ValueError: If no template is registered for structure_type
    """
    templates = {**STRUCTURE_TEMPLATES, **getattr(settings, "CONTENT_STRUCTURES", {})}
    properties = templates.get(structure_type)
    if properties is None:
        raise ValueError(f"Unknown structure type: {structure_type}")
    return list(properties)


class Structure:
    """Template-aware view over a node's structured content."""

    def __init__(self, node):
        self.node = node

    @property
    def properties(self) -> list[str]:
        return get_structure_properties(self.node.structure_type)

    def bind(self, data: dict[str, Any], clear_missing: bool = False) -> None:
        """
        Write values from data onto the node's content.

        Keys that are not properties of the structure template are ignored.
        With clear_missing, template properties absent from data are reset to None.
        """
        properties = self.properties
        content = dict(self.node.content or {})
        for name in properties:
            if name in data:
                content[name] = data[name]
            elif clear_missing:
                content[name] = None
        self.node.content = content

    def get(self, name: str, default=None):
        return (self.node.content or {}).get(name, default)

    def to_dict(self) -> dict[str, Any]:
        return {name: self.get(name) for name in self.properties}
