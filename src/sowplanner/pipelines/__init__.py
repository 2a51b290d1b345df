"""
Pipelines Module

Batch scraping, single page scraping and CSV export.
"""
from src.sowplanner.pipelines.batch_scrape import BatchScraper, BatchResult
from src.sowplanner.pipelines.export import ExportPipeline, ExportResult, EXPORT_COLUMNS
from src.sowplanner.pipelines.single_scrape import scrape_single

__all__ = [
    "BatchScraper",
    "BatchResult",
    "ExportPipeline",
    "ExportResult",
    "EXPORT_COLUMNS",
    "scrape_single",
]
