"""
Plant Record Store

One JSON document per plant, keyed by plant name.
"""
from __future__ import annotations

from pathlib import Path
from typing import Union

from pydantic import ValidationError

from src.sowplanner.exceptions import MalformedRecordError
from src.sowplanner.models.plant import PlantRecord
from src.sowplanner.utils.logger import get_logger

logger = get_logger(__name__)


def storage_key(plant_name: str) -> str:
    """Filesystem-safe file stem for a plant name."""
    return plant_name.replace("/", "_")


def write_record(record: PlantRecord, path: Union[str, Path]) -> Path:
    """Write a record as pretty JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(record.to_json(), encoding="utf-8")
    return path


class RecordStore:
    """Directory of stored plant records."""

    def __init__(self, records_dir: Union[str, Path]):
        self.records_dir = Path(records_dir)

    def path_for(self, plant_name: str) -> Path:
        return self.records_dir / f"{storage_key(plant_name)}.json"

    def exists(self, plant_name: str) -> bool:
        return self.path_for(plant_name).exists()

    def ensure_dir(self) -> None:
        self.records_dir.mkdir(parents=True, exist_ok=True)

    def save(self, plant_name: str, record: PlantRecord) -> Path:
        """
        Store a record, replacing any previous one for the same plant.

        Raises:
            OSError: If the file cannot be written
        """
        path = write_record(record, self.path_for(plant_name))
        logger.info("record_saved", plant=plant_name, path=str(path))
        return path

    def load(self, plant_name: str) -> PlantRecord:
        """
        Read a stored record back.

        Raises:
            FileNotFoundError: If nothing is stored for the plant
            MalformedRecordError: If the file cannot be read or validated
        """
        path = self.path_for(plant_name)
        try:
            payload = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise
        except (OSError, UnicodeDecodeError) as e:
            raise MalformedRecordError(f"Failed to read {path}: {e}", path=str(path)) from e

        try:
            return PlantRecord.from_json(payload)
        except ValidationError as e:
            raise MalformedRecordError(f"Failed to parse {path}: {e}", path=str(path)) from e
