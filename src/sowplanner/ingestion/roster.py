"""
Roster ingestion.

The roster is the user's CSV of plants to scrape and export. Columns are
read by position: name, URL, brand, purchase year, notes, sowing strategy
override. Brand, year and notes are passed through to the export untouched.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from src.sowplanner.exceptions import RosterError
from src.sowplanner.models.sowing import SowingStrategy
from src.sowplanner.storage.record_store import storage_key
from src.sowplanner.utils.logger import get_logger

logger = get_logger(__name__)

ROSTER_COLUMN_COUNT = 6
UNKNOWN_PLANT_NAME = "unknown"


@dataclass
class RosterEntry:
    """One plant line from the roster."""

    plant_name: str
    url: str = ""
    brand: str = ""
    purchase_year: str = ""
    notes: str = ""
    user_strategy_text: str = ""
    user_strategy: Optional[SowingStrategy] = field(init=False)

    def __post_init__(self):
        self.user_strategy = SowingStrategy.parse(self.user_strategy_text)

    @classmethod
    def from_cells(cls, cells: List[Optional[str]]) -> "RosterEntry":
        """Build an entry from positional cells; missing cells become ''."""
        padded = list(cells[:ROSTER_COLUMN_COUNT])
        padded += [None] * (ROSTER_COLUMN_COUNT - len(padded))
        name, url, brand, year, notes, strategy = padded
        return cls(
            plant_name=UNKNOWN_PLANT_NAME if name is None else name,
            url=url or "",
            brand=brand or "",
            purchase_year=year or "",
            notes=notes or "",
            user_strategy_text=strategy or "",
        )

    @property
    def storage_key(self) -> str:
        return storage_key(self.plant_name)

    def has_valid_url(self) -> bool:
        return bool(self.url.strip())

    def passthrough_cells(self) -> List[str]:
        """Roster values echoed at the start of every export row."""
        return [
            self.plant_name,
            self.url,
            self.brand,
            self.purchase_year,
            self.notes,
            self.user_strategy_text,
        ]


def read_roster(path: Union[str, Path]) -> List[RosterEntry]:
    """
    Load roster entries from a CSV file with a header row.

    Args:
        path: Roster CSV path

    Returns:
        Entries in file order

    Raises:
        RosterError: If the file is missing or cannot be parsed
    """
    try:
        df = pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            on_bad_lines="warn",
        )
    except FileNotFoundError as e:
        raise RosterError(f"Roster file not found: {path}") from e
    except pd.errors.EmptyDataError:
        logger.warning("roster_empty", path=str(path))
        return []
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise RosterError(f"Failed to read roster {path}: {e}") from e

    entries = []
    for row in df.itertuples(index=False, name=None):
        cells = [None if pd.isna(value) else value for value in row]
        entries.append(RosterEntry.from_cells(cells))

    logger.info("roster_loaded", path=str(path), entries=len(entries))
    return entries
