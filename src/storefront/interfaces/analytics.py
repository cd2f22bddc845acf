"""Interface for page-view analytics."""

import abc

# pylint: disable=too-few-public-methods


class PageViewTracker(abc.ABC):
    """Contract for recording page views."""

    @abc.abstractmethod
    def track_page_view(self, path: str) -> None:
        """Record that the page at *path* was viewed."""
