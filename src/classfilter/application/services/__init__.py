"""Application services."""

from classfilter.application.services.search import SearchService, default_filter

__all__ = ["SearchService", "default_filter"]
