"""
Monitoring Module

Roster coverage diagnostics.
"""
from src.sowplanner.monitoring.coverage import compute_roster_coverage

__all__ = ["compute_roster_coverage"]
