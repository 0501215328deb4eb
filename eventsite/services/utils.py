"""
Utility functions for eventsite services.
"""

from collections.abc import Iterable

from django.utils.html import escape


def paragraphs_html(sentences: Iterable[str]) -> str:
    """Render each sentence as an HTML paragraph."""
    return "".join(f"<p>{escape(sentence)}</p>" for sentence in sentences)


def strip_trailing_punctuation(text: str) -> str:
    """Drop the final character of a generated sentence (its full stop)."""
    return text[:-1] if text else text
