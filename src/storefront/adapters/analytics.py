"""Page-view trackers."""

import logging

from storefront.interfaces.analytics import PageViewTracker

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class LoggingPageViewTracker(PageViewTracker):
    """Tracker that reports page views to the application log."""

    def track_page_view(self, path: str) -> None:
        logger.info("Page view: %s", path)


class InMemoryPageViewTracker(PageViewTracker):
    """Tracker that keeps every tracked path, in order."""

    def __init__(self) -> None:
        self.views: list[str] = []

    def track_page_view(self, path: str) -> None:
        self.views.append(path)
