"""
Check how many roster plants are missing stored records or start dates.

Quick diagnostic before running an export.
"""
import argparse
import sys
from datetime import date
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from config.settings import settings
from src.sowplanner.ingestion.roster import read_roster
from src.sowplanner.monitoring.coverage import compute_roster_coverage


def check_missing_records(roster_path: str, records_dir: str, frost_date: date):
    """Print roster coverage and the plants that need attention."""
    entries = read_roster(roster_path)
    report = compute_roster_coverage(entries, records_dir, frost_date)
    counts = report["counts"]
    total = len(entries)

    print("\n" + "="*60)
    print("ROSTER RECORD COVERAGE CHECK")
    print("="*60)
    print(f"Roster plants:                    {total:,}")
    print(f"With start date:                  {counts.get('dated', 0):,}")
    print(f"Record but no timing phrase:      {counts.get('no_timing', 0):,}")
    print(f"Unreadable records:               {counts.get('malformed', 0):,}")
    print(f"Missing records:                  {counts.get('missing', 0):,}")
    print(f"Coverage:                         {(counts.get('dated', 0)/total*100 if total > 0 else 0):.1f}%")
    print("="*60 + "\n")

    for status in ("missing", "malformed", "no_timing"):
        names = report["plants"].get(status, [])
        if names:
            print(f"{status} ({len(names)}):")
            for name in names:
                print(f"  - {name}")
            print()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Check roster coverage by stored plant records")
    parser.add_argument("roster", help="Roster CSV")
    parser.add_argument("--json-dir", default=settings.records_dir, help="Directory of JSON records")
    parser.add_argument("--frost-date", type=date.fromisoformat, default=settings.last_frost_date)
    args = parser.parse_args()
    check_missing_records(args.roster, args.json_dir, args.frost_date)
