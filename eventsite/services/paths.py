"""
Path cleanup for content URLs and node names.
"""

import re

from django.utils.text import slugify

# Character replacements applied before slugifying, per language.
REPLACERS = {
    "default": {
        "+": "-",
        ".": "-",
        "_": "-",
    },
    "en": {
        "&": " and ",
    },
    "de": {
        "&": " und ",
        "ä": "ae",
        "ö": "oe",
        "ü": "ue",
        "Ä": "ae",
        "Ö": "oe",
        "Ü": "ue",
        "ß": "ss",
    },
    "fr": {
        "&": " et ",
    },
}

_MULTI_SLASH = re.compile(r"/{2,}")


class PathCleanup:
    """Normalizes raw paths into lowercase, dash-separated URL paths."""

    def __init__(self, replacers: dict[str, dict[str, str]] | None = None):
        self.replacers = replacers if replacers is not None else REPLACERS

    def _replacements(self, language_code: str | None) -> dict[str, str]:
        replacements = dict(self.replacers.get("default", {}))
        if language_code:
            language = language_code.split("_")[0].split("-")[0].lower()
            replacements.update(self.replacers.get(language, {}))
        return replacements

    def cleanup_segment(self, segment: str, language_code: str | None = None) -> str:
        for search, replace in self._replacements(language_code).items():
            segment = segment.replace(search, replace)
        return slugify(segment)

    def cleanup(self, raw_path: str, language_code: str | None = "en") -> str:
        """
        Clean a path segment by segment.

        "/Events & Dates/Summer 2024" -> "/events-and-dates/summer-2024"
        """
        segments = [
            self.cleanup_segment(segment, language_code) for segment in raw_path.split("/")
        ]
        path = "/".join(segments)
        path = _MULTI_SLASH.sub("/", path)
        if len(path) > 1:
            path = path.rstrip("/")
        return path
