"""
Sowplanner - Core Package

Scrapes seed vendor product pages into plant records and exports them as a
sowing calendar with recommended start dates.
"""

__version__ = "0.1.0"
