"""
Single page scrape, used for checking one product URL by hand.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from src.sowplanner.models.plant import PlantRecord
from src.sowplanner.scrapers.seed_page_scraper import SeedPageScraper
from src.sowplanner.storage.record_store import write_record
from src.sowplanner.utils.logger import get_logger

logger = get_logger(__name__)


def scrape_single(
    url: str,
    output: Union[str, Path, None] = None,
    scraper: Optional[SeedPageScraper] = None,
) -> PlantRecord:
    """
    Scrape one product page, optionally saving the record.

    Raises:
        FetchError: If the page could not be downloaded
        BlockedPageError: If the vendor served a block page
    """
    scraper = scraper or SeedPageScraper()
    record = scraper.scrape(url)

    if output:
        path = write_record(record, output)
        logger.info("single_record_saved", url=url, path=str(path))

    return record
