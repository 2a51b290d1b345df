"""
Sowing Planner

Combines strategy resolution, phrase parsing and date arithmetic for one
plant record.
"""
from dataclasses import dataclass
from datetime import date
from typing import Optional

from src.sowplanner.models.plant import PlantRecord
from src.sowplanner.models.sowing import SowingStrategy, TimingDescriptor
from src.sowplanner.sowing.start_date import calculate_start_date
from src.sowplanner.sowing.strategy import resolve_strategy
from src.sowplanner.sowing.timing_parser import extract_timing
from src.sowplanner.utils.logger import get_logger

logger = get_logger(__name__)

NULL_MARKER = "NULL"


@dataclass(frozen=True)
class SowingPlan:
    """Derived sowing columns for one record."""
    strategy: Optional[SowingStrategy]
    timing: Optional[TimingDescriptor]
    start_date: Optional[date]

    def strategy_cell(self) -> str:
        return self.strategy.value if self.strategy else NULL_MARKER

    def timing_cell(self) -> str:
        return self.timing.describe() if self.timing else NULL_MARKER

    def start_date_cell(self) -> str:
        return self.start_date.isoformat() if self.start_date else NULL_MARKER


def instruction_for(record: PlantRecord, strategy: Optional[SowingStrategy]) -> Optional[str]:
    """Return the raw timing text that belongs to the chosen strategy."""
    if strategy is SowingStrategy.INSIDE:
        return record.when_to_start_inside
    if strategy is SowingStrategy.OUTSIDE:
        return record.when_to_sow_outside
    return None


def plan_sowing(
    record: PlantRecord,
    frost_date: date,
    override: Optional[SowingStrategy] = None,
) -> SowingPlan:
    """
    Resolve strategy, parse the matching instruction and compute the date.

    An override that points at an instruction the page never gave still
    sets the strategy, but leaves timing and date empty. A week count that
    pushes the date outside the calendar keeps the timing, date empty.
    """
    strategy = resolve_strategy(
        record.when_to_sow_outside,
        record.when_to_start_inside,
        override,
    )
    timing = extract_timing(instruction_for(record, strategy))
    start_date = None
    if timing:
        try:
            start_date = calculate_start_date(timing, frost_date)
        except OverflowError:
            logger.debug("start_date_out_of_range", url=record.url, timing=timing.describe())
    return SowingPlan(strategy=strategy, timing=timing, start_date=start_date)
