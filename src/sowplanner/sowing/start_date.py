"""
Start Date Calculator

Turns a parsed timing instruction into a calendar date anchored on the
average last frost date.
"""
from datetime import date, timedelta

from src.sowplanner.models.sowing import RelativeTiming, TimingDescriptor, TimingType

# Transplanting is assumed to happen three weeks after the last frost
TRANSPLANT_OFFSET = timedelta(days=21)


def calculate_start_date(descriptor: TimingDescriptor, frost_date: date) -> date:
    """
    Compute the recommended start date.

    The earliest edge of the window (weeks_min) is used; weeks_max is only
    carried for display.

    Args:
        descriptor: Parsed timing instruction
        frost_date: Average last frost date for the run

    Returns:
        Start date
    """
    if descriptor.timing_type is TimingType.TRANSPLANT:
        base_date = frost_date + TRANSPLANT_OFFSET
    else:
        base_date = frost_date

    offset = timedelta(weeks=descriptor.weeks_min)
    if descriptor.relative_timing is RelativeTiming.BEFORE:
        return base_date - offset
    return base_date + offset
