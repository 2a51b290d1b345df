"""
Seed Product Page Scraper

Fetches seed vendor product pages and turns them into PlantRecord instances.
"""
from typing import Optional

import requests

from config.settings import settings
from src.sowplanner.exceptions import FetchError
from src.sowplanner.models.plant import PlantRecord
from src.sowplanner.scrapers.plant_extractor import PlantRecordExtractor
from src.sowplanner.utils.logger import get_logger

logger = get_logger(__name__)


class SeedPageScraper:
    """
    Scraper for individual seed product pages.

    Sends browser-like headers on a shared session so batch runs reuse one
    connection pool.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        extractor: Optional[PlantRecordExtractor] = None,
    ):
        """
        Initialize the seed page scraper.

        Args:
            timeout: Request timeout in seconds (defaults to settings)
            extractor: Record extractor override (for testing)
        """
        self.timeout = timeout or settings.request_timeout_seconds
        self.extractor = extractor or PlantRecordExtractor()
        self.session = requests.Session()
        self.session.headers.update({
            "User-Agent": settings.seed_site_user_agent,
            "Accept": settings.seed_site_accept,
            "Accept-Language": settings.seed_site_accept_language,
            "Connection": "keep-alive",
        })
        logger.info("seed_page_scraper_initialized", timeout=self.timeout)

    def fetch_page(self, url: str) -> str:
        """
        Download a product page.

        Args:
            url: Product page URL

        Returns:
            Response body as text

        Raises:
            FetchError: On connection errors or timeouts
        """
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(
                "page_request_failed",
                url=url,
                error=str(e),
                error_type=type(e).__name__
            )
            raise FetchError(f"Failed to fetch {url}: {e}", url=url) from e

        if not response.ok:
            # Block pages arrive as 403s; let the extractor classify the body
            logger.warning("page_error_status", url=url, status_code=response.status_code)

        logger.info(
            "page_fetched",
            url=url,
            status_code=response.status_code,
            content_length=len(response.text)
        )
        return response.text

    def scrape(self, url: str) -> PlantRecord:
        """
        Fetch a product page and extract its plant record.

        Raises:
            FetchError: If the page could not be downloaded
            BlockedPageError: If the vendor served a block page
        """
        html = self.fetch_page(url)
        return self.extractor.extract(html, url)
