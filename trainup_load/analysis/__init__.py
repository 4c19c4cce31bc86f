"""Analysis module for training load and ACWR calculations."""

from .load_formula import TrainingType, compute_session_load
from .aggregation import TrainingSession, WeeklyLoad, DailyLoad, bucket_by_week, bucket_by_day
from .acwr import compute_weekly_acwr, compute_daily_acwr, quick_acwr_estimate
from .zones import AcwrZone, classify_acwr
from .risk import assess_load_risk

__all__ = [
    "TrainingType",
    "compute_session_load",
    "TrainingSession",
    "WeeklyLoad",
    "DailyLoad",
    "bucket_by_week",
    "bucket_by_day",
    "compute_weekly_acwr",
    "compute_daily_acwr",
    "quick_acwr_estimate",
    "AcwrZone",
    "classify_acwr",
    "assess_load_risk",
]
