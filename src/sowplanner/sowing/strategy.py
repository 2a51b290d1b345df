"""
Sowing Strategy Resolution

Decides whether the indoor-start or direct-sow instruction governs a variety.
"""
from typing import Optional

from src.sowplanner.models.sowing import SowingStrategy

RECOMMENDED_MARKER = "RECOMMENDED"


def resolve_strategy(
    outside_text: Optional[str],
    inside_text: Optional[str],
    override: Optional[SowingStrategy] = None,
) -> Optional[SowingStrategy]:
    """
    Pick the governing strategy for one variety.

    Order of precedence:
        1. A user override always wins.
        2. Outside text marked RECOMMENDED.
        3. Inside text marked RECOMMENDED.
        4. Whichever single instruction is present.
        5. Both present, neither recommended: Outside.

    Returns None when there is no override and neither instruction exists.
    """
    if override is not None:
        return override

    if outside_text is not None and RECOMMENDED_MARKER in outside_text:
        return SowingStrategy.OUTSIDE
    if inside_text is not None and RECOMMENDED_MARKER in inside_text:
        return SowingStrategy.INSIDE

    if outside_text is not None:
        # Also covers "both present": direct sowing is the default
        return SowingStrategy.OUTSIDE
    if inside_text is not None:
        return SowingStrategy.INSIDE
    return None
