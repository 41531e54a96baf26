"""Shared utilities."""

from storefront.shared.utils.sanitization import HtmlSanitizer

__all__ = ["HtmlSanitizer"]
