"""
Exception types shared by the scraping, storage and export layers.
"""
from typing import Optional


class SowPlannerError(Exception):
    """Base class for all sowplanner errors."""


class ScrapingError(SowPlannerError):
    """A product page could not be turned into a plant record."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class BlockedPageError(ScrapingError):
    """The vendor served a bot-protection page instead of the product page."""

    def __init__(self, url: Optional[str] = None):
        super().__init__(
            "Access blocked by Cloudflare. Try again later or check if the URL is correct.",
            url=url,
        )


class FetchError(ScrapingError):
    """The HTTP request for a product page failed."""


class RecordStoreError(SowPlannerError):
    """The on-disk record store is unusable."""


class MalformedRecordError(RecordStoreError):
    """A stored record exists but cannot be read back."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class RosterError(SowPlannerError):
    """The input roster could not be read."""
