"""
Batch Scrape Pipeline

Scrapes every plant on a roster into the record store, one page at a time.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Union

from config.settings import settings
from src.sowplanner.exceptions import BlockedPageError, FetchError
from src.sowplanner.ingestion.roster import RosterEntry, read_roster
from src.sowplanner.scrapers.seed_page_scraper import SeedPageScraper
from src.sowplanner.storage.record_store import RecordStore
from src.sowplanner.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class BatchResult:
    """Outcome counts for one batch run."""
    processed: int = 0
    skipped: int = 0
    failed: List[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.failed


class BatchScraper:
    """
    Sequential roster scraper.

    Plants that already have a stored record are skipped, so an interrupted
    run can simply be restarted.
    """

    def __init__(
        self,
        records_dir: Union[str, Path, None] = None,
        scraper: Optional[SeedPageScraper] = None,
        delay_seconds: Optional[float] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.store = RecordStore(records_dir or settings.records_dir)
        self.scraper = scraper or SeedPageScraper()
        self.delay_seconds = settings.request_delay_seconds if delay_seconds is None else delay_seconds
        self.sleep = sleep

    def run(self, roster_path: Union[str, Path]) -> BatchResult:
        """
        Scrape all roster entries.

        Args:
            roster_path: Roster CSV

        Returns:
            BatchResult with the names of plants that failed
        """
        self.store.ensure_dir()
        entries = read_roster(roster_path)
        result = BatchResult()

        for entry in entries:
            self._process_entry(entry, result)

        if result.failed:
            logger.warning(
                "batch_completed_with_failures",
                processed=result.processed,
                skipped=result.skipped,
                failed_count=len(result.failed),
                failed=result.failed,
            )
        else:
            logger.info(
                "batch_completed",
                processed=result.processed,
                skipped=result.skipped,
            )
        logger.info("records_directory", path=str(self.store.records_dir))
        return result

    def _process_entry(self, entry: RosterEntry, result: BatchResult) -> None:
        if not entry.has_valid_url():
            logger.error("empty_url", plant=entry.plant_name)
            result.failed.append(entry.plant_name)
            return

        if self.store.exists(entry.plant_name):
            logger.info("record_exists_skipping", plant=entry.plant_name)
            result.skipped += 1
            return

        logger.info("processing_plant", plant=entry.plant_name, url=entry.url)
        self.sleep(self.delay_seconds)

        try:
            record = self.scraper.scrape(entry.url)
        except BlockedPageError:
            logger.error("plant_blocked", plant=entry.plant_name, url=entry.url)
            result.failed.append(entry.plant_name)
            return
        except FetchError as e:
            logger.error("plant_fetch_failed", plant=entry.plant_name, error=str(e))
            result.failed.append(entry.plant_name)
            return

        try:
            self.store.save(entry.plant_name, record)
        except OSError as e:
            logger.error("record_write_failed", plant=entry.plant_name, error=str(e))
            result.failed.append(entry.plant_name)
            return

        result.processed += 1
