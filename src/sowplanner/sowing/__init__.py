"""
Sowing Module

Strategy resolution, timing phrase parsing and start date calculation.
"""
from src.sowplanner.sowing.planner import SowingPlan, plan_sowing
from src.sowplanner.sowing.start_date import calculate_start_date, TRANSPLANT_OFFSET
from src.sowplanner.sowing.strategy import resolve_strategy
from src.sowplanner.sowing.timing_parser import extract_timing

__all__ = [
    "SowingPlan",
    "plan_sowing",
    "calculate_start_date",
    "TRANSPLANT_OFFSET",
    "resolve_strategy",
    "extract_timing",
]
