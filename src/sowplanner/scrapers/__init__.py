"""
Scrapers Package

Fetching and extraction of seed vendor product pages.
"""

from .plant_extractor import PlantRecordExtractor, is_blocked_page
from .seed_page import SeedPageDocument
from .seed_page_scraper import SeedPageScraper

__all__ = [
    "PlantRecordExtractor",
    "SeedPageDocument",
    "SeedPageScraper",
    "is_blocked_page",
]
