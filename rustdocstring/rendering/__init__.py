"""Doc-comment template assembly."""

from .builder import DocBuilder, PlaceholderCounter

__all__ = ["DocBuilder", "PlaceholderCounter"]
