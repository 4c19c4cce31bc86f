"""ACWR zone classification and dashboard report shaping."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional

from .aggregation import WeeklyLoad
from .acwr import compute_weekly_acwr

# Canonical boundaries: [0, 0.8) under, [0.8, 1.2] optimal, (1.2, 1.3] caution
UNDERTRAINING_BELOW = 0.8
OPTIMAL_MAX = 1.2
CAUTION_MAX = 1.3


class AcwrZone(Enum):
    """ACWR risk zones."""

    UNDERTRAINING = "undertraining"
    OPTIMAL = "optimal"
    CAUTION = "caution"
    INJURY_RISK = "injury_risk"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ZoneClassification:
    """Zone, status message and display color for an ACWR value."""

    acwr: Optional[float]
    zone: AcwrZone
    status: str
    color: str

    def to_dict(self) -> Dict[str, object]:
        return {
            "acwr": self.acwr,
            "status": self.status,
            "color": self.color,
            "zone": self.zone.value,
        }


def classify_acwr(acwr: Optional[float]) -> ZoneClassification:
    """Classify an ACWR value into a zone with status and color.

    Args:
        acwr: ACWR value, or None for insufficient data

    Returns:
        ZoneClassification; None and NaN map to the unknown zone
    """
    if acwr is None or math.isnan(acwr):
        return ZoneClassification(None, AcwrZone.UNKNOWN, "Insufficient data", "gray")

    if acwr < UNDERTRAINING_BELOW:
        return ZoneClassification(
            acwr, AcwrZone.UNDERTRAINING, "Underload — safely increase training gradually", "blue"
        )
    elif acwr <= OPTIMAL_MAX:
        return ZoneClassification(acwr, AcwrZone.OPTIMAL, "Optimal Zone", "green")
    elif acwr <= CAUTION_MAX:
        return ZoneClassification(acwr, AcwrZone.CAUTION, "Caution Zone", "yellow")
    else:
        return ZoneClassification(acwr, AcwrZone.INJURY_RISK, "High Risk Zone", "red")


def acwr_zone_labels() -> Dict[str, str]:
    """Zone boundary strings for UI display."""
    return {
        "ok": f"≤ {OPTIMAL_MAX}",
        "caution": f"{OPTIMAL_MAX} – {CAUTION_MAX}",
        "high_risk": f"> {CAUTION_MAX}",
    }


def build_acwr_report(weekly_loads: Iterable[WeeklyLoad]) -> Dict[str, object]:
    """Weekly ACWR with classification, zone labels and weekly loads.

    Weekly loads are listed most recent first with loads rounded to whole AU.
    """
    weeks = sorted(weekly_loads, key=lambda w: w.week, reverse=True)
    report = classify_acwr(compute_weekly_acwr(weeks)).to_dict()
    report["zones"] = acwr_zone_labels()
    report["weeklyLoads"] = [{"week": w.week, "load": round(w.load)} for w in weeks]
    return report
