"""
Ingestion Package

Reads the user's plant roster.
"""

from src.sowplanner.ingestion.roster import RosterEntry, read_roster

__all__ = ["RosterEntry", "read_roster"]
