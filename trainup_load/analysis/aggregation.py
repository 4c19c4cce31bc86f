"""Weekly (ISO-8601) and daily aggregation of session training loads."""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Tuple, Union

from .load_formula import TrainingType, compute_session_load, normalize_training_type

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrainingSession:
    """A recorded training session."""

    date: date
    training_type: TrainingType
    effort_level: float  # RPE 1-10
    duration_minutes: float
    emotional_load: float  # 1-5

    def __post_init__(self):
        object.__setattr__(self, "date", coerce_date(self.date))
        # Accept form labels such as "Field Training"
        if not isinstance(self.training_type, TrainingType):
            object.__setattr__(self, "training_type", normalize_training_type(self.training_type))

    @property
    def load(self) -> float:
        """Session load in AU."""
        return compute_session_load(
            self.effort_level,
            self.duration_minutes,
            self.emotional_load,
            self.training_type,
        )

    @property
    def is_countable(self) -> bool:
        """Whether the session contributes to load aggregation."""
        return self.duration_minutes > 0 and self.effort_level > 0


@dataclass(frozen=True)
class WeeklyLoad:
    """Total load of one ISO week."""

    week: str  # e.g. "2025-W21"
    load: float


@dataclass(frozen=True)
class DailyLoad:
    """Total load of one calendar day."""

    date: date
    load: float


def week_key(day: date) -> str:
    """ISO year-week key, e.g. "2026-W01" for 2025-12-29."""
    iso_year, iso_week, _ = day.isocalendar()
    return f"{iso_year}-W{iso_week:02d}"


def iso_week_range(day: date) -> Tuple[date, date]:
    """Monday and Sunday of the ISO week containing the given day."""
    monday = day - timedelta(days=day.weekday())
    return monday, monday + timedelta(days=6)


def week_label(key: str) -> str:
    """Human readable label for a week key.

    "2025-W21" -> "Week 21 (19 May – 25 May)"
    """
    year, week_tag = key.split("-W")
    week_no = int(week_tag)
    monday = date.fromisocalendar(int(year), week_no, 1)
    sunday = monday + timedelta(days=6)
    return f"Week {week_no} ({monday.day} {monday:%b} – {sunday.day} {sunday:%b})"


def _countable(sessions: Iterable[TrainingSession]) -> Iterable[TrainingSession]:
    for session in sessions:
        if session.is_countable:
            yield session
        else:
            logger.debug(
                f"Skipping session on {session.date}: duration={session.duration_minutes}, "
                f"rpe={session.effort_level}"
            )


def bucket_by_week(sessions: Iterable[TrainingSession]) -> Dict[str, List[TrainingSession]]:
    """Group sessions by ISO week key. Weeks without sessions are absent."""
    buckets: Dict[str, List[TrainingSession]] = {}
    for session in _countable(sessions):
        buckets.setdefault(week_key(session.date), []).append(session)
    return buckets


def bucket_by_day(sessions: Iterable[TrainingSession]) -> Dict[date, float]:
    """Sum session loads per calendar day. Days without sessions are absent."""
    totals: Dict[date, float] = {}
    for session in _countable(sessions):
        totals[session.date] = totals.get(session.date, 0.0) + session.load
    return totals


def weekly_loads(sessions: Iterable[TrainingSession]) -> List[WeeklyLoad]:
    """Weekly load totals, most recent week first."""
    buckets = bucket_by_week(sessions)
    return [
        WeeklyLoad(week=key, load=sum(s.load for s in buckets[key]))
        for key in sorted(buckets, reverse=True)
    ]


def daily_loads(sessions: Iterable[TrainingSession]) -> List[DailyLoad]:
    """Daily load totals in chronological order."""
    totals = bucket_by_day(sessions)
    return [DailyLoad(date=day, load=totals[day]) for day in sorted(totals)]


def coerce_date(value: Union[date, str]) -> date:
    """Accept a date or an ISO "YYYY-MM-DD" string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value[:10])
