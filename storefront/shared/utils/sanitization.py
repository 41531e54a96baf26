"""HTML sanitization for merchant-authored content (page-builder text blocks)."""

from html import escape
from typing import ClassVar

import nh3


class HtmlSanitizer:
    """Clean untrusted HTML with nh3.

    rich_text keeps basic formatting and links; plain_text strips every tag.
    Attribute values rendered by the block renderer go through attr() instead.
    """

    RICH_TEXT_TAGS: ClassVar[set[str]] = {
        "p", "br", "strong", "b", "em", "i", "u", "s", "a", "ul", "ol", "li",
        "h1", "h2", "h3", "h4", "h5", "h6", "blockquote", "span", "div",
    }
    RICH_TEXT_ATTRIBUTES: ClassVar[dict[str, set[str]]] = {
        "a": {"href", "title", "target"},
        "span": {"style"},
        "p": {"style"},
        "div": {"style"},
    }

    @classmethod
    def rich_text(cls, value: str) -> str:
        """Keep formatting tags, drop scripts, event handlers and unsafe URLs."""
        if not value:
            return value
        return nh3.clean(
            value,
            tags=cls.RICH_TEXT_TAGS,
            attributes=cls.RICH_TEXT_ATTRIBUTES,
            link_rel="noopener noreferrer",
        )

    @staticmethod
    def plain_text(value: str) -> str:
        """Strip all tags; entities stay escaped."""
        if not value:
            return value
        return nh3.clean(value, tags=set(), attributes={})

    @staticmethod
    def attr(value: str | int | float) -> str:
        """Escape a value for use inside a double-quoted HTML attribute."""
        return escape(str(value), quote=True)
