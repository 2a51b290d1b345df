"""
Sowing Models

Value types for parsed timing instructions and sowing strategies.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RelativeTiming(str, Enum):
    """Direction of the offset from the reference event."""

    BEFORE = "before"
    AFTER = "after"


class TimingType(str, Enum):
    """Reference event a timing instruction is anchored to."""

    LAST_FROST = "LAST_FROST"
    TRANSPLANT = "TRANSPLANT"


class SowingStrategy(str, Enum):
    """Whether seed is started indoors or sown directly outside."""

    INSIDE = "Inside"
    OUTSIDE = "Outside"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["SowingStrategy"]:
        """
        Parse a roster override cell.

        Only the exact strings "Inside" and "Outside" are recognised;
        blank or unknown values mean no override.
        """
        if value is None:
            return None
        for strategy in cls:
            if value == strategy.value:
                return strategy
        return None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TimingDescriptor:
    """
    Structured form of an instruction like "2 to 4 weeks before transplanting".

    Attributes:
        weeks_min: Lower bound of the week range
        weeks_max: Upper bound of the week range
        relative_timing: Before or after the reference event
        timing_type: Last frost or transplanting
    """
    weeks_min: int
    weeks_max: int
    relative_timing: RelativeTiming
    timing_type: TimingType

    def describe(self) -> str:
        """Export form, e.g. "2-4 before LAST_FROST"."""
        return (
            f"{self.weeks_min}-{self.weeks_max} "
            f"{self.relative_timing.value} {self.timing_type.value}"
        )
