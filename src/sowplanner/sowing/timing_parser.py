"""
Timing Phrase Parser

Pulls a structured week offset out of vendor sowing instructions such as
"RECOMMENDED. 2 to 4 weeks before your average last frost date, and when
soil temperature is at least 45°F".

Only one phrase shape is understood:

    <N> to <M> weeks <before|after> <your average last frost date|transplanting>

Anything else is treated as "no instruction", not as an error.
"""
import re
from typing import Optional

from src.sowplanner.models.sowing import RelativeTiming, TimingDescriptor, TimingType
from src.sowplanner.utils.logger import get_logger

logger = get_logger(__name__)

WEEKS_PATTERN = re.compile(
    r"(\d+)\s*to\s*(\d+)\s*weeks\s*(before|after)\s*"
    r"(your average last frost date|transplanting)",
    re.ASCII,
)

REFERENCE_EVENTS = {
    "your average last frost date": TimingType.LAST_FROST,
    "transplanting": TimingType.TRANSPLANT,
}

DIRECTIONS = {
    "before": RelativeTiming.BEFORE,
    "after": RelativeTiming.AFTER,
}


def extract_timing(text: Optional[str]) -> Optional[TimingDescriptor]:
    """
    Parse the first week-range phrase found in text.

    Args:
        text: Free-text sowing instruction (already normalized)

    Returns:
        TimingDescriptor, or None when the text holds no recognised phrase
    """
    if not text:
        return None

    match = WEEKS_PATTERN.search(text)
    if not match:
        return None

    timing_type = REFERENCE_EVENTS.get(match.group(4))
    relative_timing = DIRECTIONS.get(match.group(3))
    if timing_type is None or relative_timing is None:
        return None

    try:
        weeks_min = int(match.group(1))
        weeks_max = int(match.group(2))
    except ValueError:
        return None

    if weeks_max < weeks_min:
        logger.debug("timing_range_inverted", text=text[:80], weeks_min=weeks_min, weeks_max=weeks_max)
        return None

    return TimingDescriptor(
        weeks_min=weeks_min,
        weeks_max=weeks_max,
        relative_timing=relative_timing,
        timing_type=timing_type,
    )
