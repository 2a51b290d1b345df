"""
Export Pipeline

Joins the roster with stored plant records and writes the sowing calendar
CSV, including the derived strategy, timing and start date columns.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from config.settings import settings
from src.sowplanner.exceptions import MalformedRecordError, RecordStoreError
from src.sowplanner.ingestion.roster import RosterEntry, read_roster
from src.sowplanner.models.plant import PlantRecord
from src.sowplanner.sowing.planner import NULL_MARKER, plan_sowing
from src.sowplanner.storage.record_store import RecordStore
from src.sowplanner.utils.logger import get_logger

logger = get_logger(__name__)

ERROR_MARKER = "ERR"

ROSTER_COLUMNS = [
    "Plant Name",
    "URL",
    "Brand",
    "Purchase Year",
    "Notes",
    "Users Sowing Strategy",
]

# (header, PlantRecord field)
RECORD_COLUMNS = [
    ("Title", "title"),
    ("Description", "description"),
    ("Days to Maturity", "days_to_maturity"),
    ("Family", "family"),
    ("Plant Type", "plant_type"),
    ("Native", "native"),
    ("Hardiness", "hardiness"),
    ("Exposure", "exposure"),
    ("Plant Dimensions", "plant_dimensions"),
    ("Variety Info", "variety_info"),
    ("Attributes", "attributes"),
    ("When to Sow Outside", "when_to_sow_outside"),
    ("When to Start Inside", "when_to_start_inside"),
    ("Days to Emerge", "days_to_emerge"),
    ("Seed Depth", "seed_depth"),
    ("Seed Spacing", "seed_spacing"),
    ("Row Spacing", "row_spacing"),
    ("Thinning", "thinning"),
    ("Rating", "rating"),
    ("Votes", "votes"),
]

DERIVED_COLUMNS = [
    "Sowing Strategy",
    "When to Seed Start",
    "Calculated Start Date",
]

EXPORT_COLUMNS = ROSTER_COLUMNS + [header for header, _ in RECORD_COLUMNS] + DERIVED_COLUMNS


@dataclass
class ExportResult:
    """Row counts for one export run."""
    processed: int = 0
    missing: int = 0
    malformed: int = 0

    @property
    def total(self) -> int:
        return self.processed + self.missing


def format_cell(value) -> str:
    """Render an optional record value; absent values become NULL."""
    if value is None:
        return NULL_MARKER
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_row(entry: RosterEntry, record: PlantRecord, frost_date: date) -> List[str]:
    """Full export row for a plant with a stored record."""
    plan = plan_sowing(record, frost_date, override=entry.user_strategy)
    row = entry.passthrough_cells()
    row.extend(format_cell(getattr(record, field_name)) for _, field_name in RECORD_COLUMNS)
    row.extend([plan.strategy_cell(), plan.timing_cell(), plan.start_date_cell()])
    return row


def build_error_row(entry: RosterEntry) -> List[str]:
    """Export row for a roster plant that has no stored record."""
    row = entry.passthrough_cells()
    row.extend([ERROR_MARKER] * (len(EXPORT_COLUMNS) - len(row)))
    return row


class ExportPipeline:
    """
    Writes the enriched roster CSV.

    The frost date is shared by every row of a run.
    """

    def __init__(
        self,
        records_dir: Union[str, Path, None] = None,
        frost_date: Optional[date] = None,
    ):
        self.store = RecordStore(records_dir or settings.records_dir)
        self.frost_date = frost_date or settings.last_frost_date

    def build_rows(self, entries: List[RosterEntry], result: ExportResult) -> List[List[str]]:
        rows = []
        for entry in entries:
            if not self.store.exists(entry.plant_name):
                logger.warning("record_missing", plant=entry.plant_name)
                rows.append(build_error_row(entry))
                result.missing += 1
                continue

            try:
                record = self.store.load(entry.plant_name)
            except MalformedRecordError as e:
                logger.error("record_unreadable", plant=entry.plant_name, error=str(e))
                result.malformed += 1
                continue

            rows.append(build_row(entry, record, self.frost_date))
            result.processed += 1
        return rows

    def run(self, roster_path: Union[str, Path], output_path: Union[str, Path]) -> ExportResult:
        """
        Export the roster joined with stored records.

        Args:
            roster_path: Roster CSV
            output_path: Destination CSV

        Returns:
            ExportResult with processed, missing and malformed counts

        Raises:
            RecordStoreError: If the records directory does not exist
        """
        if not self.store.records_dir.is_dir():
            raise RecordStoreError(f"Directory {self.store.records_dir} does not exist")

        entries = read_roster(roster_path)
        result = ExportResult()
        rows = self.build_rows(entries, result)

        df = pd.DataFrame(rows, columns=EXPORT_COLUMNS)
        df.to_csv(output_path, index=False, lineterminator="\n")

        logger.info(
            "export_complete",
            output=str(output_path),
            records_dir=str(self.store.records_dir),
            roster=str(roster_path),
            frost_date=self.frost_date.isoformat(),
            total=result.total,
            missing=result.missing,
            malformed=result.malformed,
        )
        return result
