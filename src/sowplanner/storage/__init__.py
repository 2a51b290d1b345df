"""
Storage Package

On-disk JSON persistence for scraped plant records.
"""
from src.sowplanner.storage.record_store import RecordStore, storage_key, write_record

__all__ = ["RecordStore", "storage_key", "write_record"]
