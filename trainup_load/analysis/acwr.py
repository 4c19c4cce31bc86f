"""Acute:Chronic Workload Ratio (ACWR) calculations.

Two guarded variants answer different questions and are kept apart:

- ``compute_weekly_acwr``: newest week against the mean of the three weeks
  before it.
- ``compute_daily_acwr``: rolling 7-day against 28-day daily averages.

Both return ``None`` when there is not enough history or the chronic load is
zero. ``None`` means "insufficient data" and must never be shown as 0.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

import numpy as np

from .aggregation import WeeklyLoad, coerce_date

logger = logging.getLogger(__name__)

WEEKLY_MIN_WEEKS = 4
ACUTE_WINDOW_DAYS = 7
CHRONIC_WINDOW_DAYS = 28
MIN_CHRONIC_DAYS = 21


@dataclass(frozen=True)
class AcwrPoint:
    """Rolling ACWR values for one day."""

    date: date
    acute: Optional[float]  # 7-day average of observed days
    chronic: Optional[float]  # 28-day average of observed days
    acwr: Optional[float]


def round_ratio(value: float) -> float:
    """Round to 2 decimals, halves rounding up."""
    return math.floor(value * 100 + 0.5) / 100


def _as_weekly(entry: Union[WeeklyLoad, Tuple[str, float]]) -> WeeklyLoad:
    if isinstance(entry, WeeklyLoad):
        return entry
    week, load = entry
    return WeeklyLoad(week=week, load=load)


def compute_weekly_acwr(weekly_loads: Iterable[Union[WeeklyLoad, Tuple[str, float]]]) -> Optional[float]:
    """Compute ACWR from weekly load totals.

    Only weeks with a positive load count. The most recent of them is the
    acute load, the mean of the next three is the chronic load.

    Args:
        weekly_loads: WeeklyLoad entries (or (week, load) pairs) in any order

    Returns:
        ACWR rounded to 2 decimals, or None if fewer than 4 weeks qualify or
        the chronic load is zero
    """
    recent_weeks = sorted(
        (w for w in map(_as_weekly, weekly_loads) if w.load > 0),
        key=lambda w: w.week,
        reverse=True,
    )

    if len(recent_weeks) < WEEKLY_MIN_WEEKS:
        logger.debug(f"Weekly ACWR needs {WEEKLY_MIN_WEEKS} loaded weeks, got {len(recent_weeks)}")
        return None

    acute_load = recent_weeks[0].load
    chronic_load = float(np.mean([w.load for w in recent_weeks[1:WEEKLY_MIN_WEEKS]]))

    if chronic_load == 0:
        return None

    return round_ratio(acute_load / chronic_load)


def _window(daily_loads: Mapping[date, float], target: date, days: int) -> List[float]:
    """Loads of the days present in [target - days + 1, target]."""
    values = []
    for offset in range(days):
        day = target - timedelta(days=offset)
        if day in daily_loads:
            values.append(daily_loads[day])
    return values


def _normalize_daily(daily_loads: Mapping[Union[date, str], float]) -> Dict[date, float]:
    return {coerce_date(day): load for day, load in daily_loads.items()}


def _rolling_averages(
    daily_loads: Mapping[date, float], target: date
) -> Tuple[Optional[float], Optional[float], int]:
    acute_values = _window(daily_loads, target, ACUTE_WINDOW_DAYS)
    chronic_values = _window(daily_loads, target, CHRONIC_WINDOW_DAYS)

    acute_avg = float(np.mean(acute_values)) if acute_values else None
    chronic_avg = float(np.mean(chronic_values)) if chronic_values else None
    return acute_avg, chronic_avg, len(chronic_values)


def compute_daily_acwr(
    daily_loads: Mapping[Union[date, str], float],
    target_date: Union[date, str],
) -> Optional[float]:
    """Compute rolling ACWR (7-day vs 28-day) for a target date.

    Both windows end on and include the target date. Each is averaged over
    the days that actually have an entry, not over the full window length.

    Args:
        daily_loads: Mapping of date (or "YYYY-MM-DD") to total load
        target_date: Day to calculate ACWR for

    Returns:
        ACWR rounded to 2 decimals, or None if fewer than 21 of the 28 chronic
        days have data or the chronic average is zero
    """
    loads = _normalize_daily(daily_loads)
    target = coerce_date(target_date)

    acute_avg, chronic_avg, chronic_days = _rolling_averages(loads, target)

    # Need at least 21 days of chronic data for a meaningful ratio
    if chronic_days < MIN_CHRONIC_DAYS:
        return None

    if not chronic_avg:
        return None

    return round_ratio((acute_avg or 0.0) / chronic_avg)


def daily_acwr_series(
    daily_loads: Mapping[Union[date, str], float],
    start: Union[date, str],
    end: Union[date, str],
) -> List[AcwrPoint]:
    """Rolling ACWR for every day from start to end inclusive."""
    loads = _normalize_daily(daily_loads)
    day = coerce_date(start)
    end = coerce_date(end)

    series = []
    while day <= end:
        acute_avg, chronic_avg, _ = _rolling_averages(loads, day)
        series.append(AcwrPoint(
            date=day,
            acute=acute_avg,
            chronic=chronic_avg,
            acwr=compute_daily_acwr(loads, day),
        ))
        day += timedelta(days=1)

    return series


def quick_acwr_estimate(acute: float, chronic: float) -> float:
    """Rough, unguarded ACWR for live previews while editing a session.

    A zero chronic load is replaced by 1. Never use this for injury-risk
    displays; use compute_weekly_acwr or compute_daily_acwr instead.
    """
    return round(acute / (chronic or 1), 2)


def smoothed_acwr(acute: Optional[float], chronic: Optional[float]) -> Optional[float]:
    """ACWR from precomputed acute and chronic loads, None if either is missing or not positive."""
    if not acute or not chronic or not (acute > 0 and chronic > 0):
        return None
    return round_ratio(acute / chronic)


def format_acwr(acwr: Optional[float]) -> str:
    """Format an ACWR for display; insufficient data renders as an em-dash."""
    return "—" if acwr is None else f"{acwr:.2f}"
