"""
Helpers for checking how much of a roster has usable sowing data.
"""
from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Dict, List, Union

import pandas as pd

from src.sowplanner.exceptions import MalformedRecordError
from src.sowplanner.ingestion.roster import RosterEntry
from src.sowplanner.sowing.planner import plan_sowing
from src.sowplanner.storage.record_store import RecordStore


def compute_roster_coverage(
    entries: List[RosterEntry],
    records_dir: Union[str, Path],
    frost_date: date,
) -> Dict[str, object]:
    """
    Classify every roster plant by how far it gets through the export.

    Statuses: missing (no stored record), malformed (record unreadable),
    no_timing (record but no parseable instruction), dated (start date found).

    Returns:
        {"counts": {status: n}, "plants": {status: [names]}}
    """
    store = RecordStore(records_dir)
    rows = []
    for entry in entries:
        if not store.exists(entry.plant_name):
            status = "missing"
        else:
            try:
                record = store.load(entry.plant_name)
            except MalformedRecordError:
                status = "malformed"
            else:
                plan = plan_sowing(record, frost_date, override=entry.user_strategy)
                status = "dated" if plan.start_date else "no_timing"
        rows.append({"plant_name": entry.plant_name, "status": status})

    df = pd.DataFrame(rows, columns=["plant_name", "status"])
    if df.empty:
        return {"counts": {}, "plants": {}}

    counts = {status: int(n) for status, n in df["status"].value_counts().items()}
    plants = df.groupby("status")["plant_name"].apply(list).to_dict()
    return {"counts": counts, "plants": plants}
