"""Load-derived injury risk factors and ACWR alerts."""

import logging
import math
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import List, Optional, Sequence, Union

from ..config import config
from .aggregation import TrainingSession, bucket_by_day, coerce_date
from .acwr import ACUTE_WINDOW_DAYS, compute_daily_acwr
from .zones import CAUTION_MAX

logger = logging.getLogger(__name__)

HIGH_EFFORT_POINTS = 25
ACWR_BASE_POINTS = 10
ACWR_POINTS_PER_UNIT = 50
MAX_RISK_SCORE = 100


@dataclass
class LoadRiskAssessment:
    """Risk score (0-100) with the factors that contributed to it."""

    score: int
    factors: List[str] = field(default_factory=list)
    acwr: Optional[float] = None


def count_high_effort_sessions(
    sessions: Sequence[TrainingSession],
    as_of: date,
    min_rpe: Optional[float] = None,
) -> int:
    """Count countable sessions with RPE >= min_rpe in the 7 days ending on as_of."""
    min_rpe = config.HIGH_EFFORT_RPE if min_rpe is None else min_rpe
    window_start = as_of - timedelta(days=ACUTE_WINDOW_DAYS - 1)
    return sum(
        1 for s in sessions
        if s.is_countable and window_start <= s.date <= as_of and s.effort_level >= min_rpe
    )


def acwr_risk_points(acwr: Optional[float]) -> int:
    """Risk points for a high ACWR; higher ratios are penalised more."""
    if acwr is None or acwr <= CAUTION_MAX:
        return 0
    return ACWR_BASE_POINTS + int(math.floor((acwr - CAUTION_MAX) * ACWR_POINTS_PER_UNIT + 0.5))


def acwr_alert(acwr: Optional[float]) -> Optional[str]:
    """Alert note for an ACWR above the caution zone, e.g. "ACWR 1.45"."""
    if acwr is None or acwr <= CAUTION_MAX:
        return None
    return f"ACWR {acwr:.2f}"


def assess_load_risk(
    sessions: Sequence[TrainingSession],
    as_of: Union[date, str, None] = None,
) -> LoadRiskAssessment:
    """Assess injury risk from training load alone.

    Args:
        sessions: Recorded sessions of one athlete
        as_of: Assessment day (defaults to the latest session date)

    Returns:
        LoadRiskAssessment with score capped at 100
    """
    if not sessions:
        return LoadRiskAssessment(score=0, factors=["Insufficient data"])

    as_of = coerce_date(as_of) if as_of is not None else max(s.date for s in sessions)

    score = 0
    factors = []

    high_effort = count_high_effort_sessions(sessions, as_of)
    if high_effort >= config.HIGH_EFFORT_SESSIONS:
        score += HIGH_EFFORT_POINTS
        factors.append("Multiple high-effort sessions in past week")

    acwr = compute_daily_acwr(bucket_by_day(sessions), as_of)
    points = acwr_risk_points(acwr)
    if points:
        score += points
        factors.append(f"High ACWR ratio: {acwr:.2f}")

    logger.debug(f"Load risk on {as_of}: score={score}, acwr={acwr}, high_effort={high_effort}")

    return LoadRiskAssessment(score=min(MAX_RISK_SCORE, score), factors=factors, acwr=acwr)
