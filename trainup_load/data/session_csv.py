"""Import training sessions from CSV files."""

import logging
from pathlib import Path
from typing import List, Union

import pandas as pd

from ..analysis.aggregation import TrainingSession
from ..analysis.load_formula import normalize_training_type

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["date", "training_type", "rpe", "duration", "emotional_load"]

# Accepted header variations -> canonical column
COLUMN_ALIASES = {
    "type": "training_type",
    "trainingtype": "training_type",
    "session_type": "training_type",
    "effort_level": "rpe",
    "effortlevel": "rpe",
    "effort_level_rpe": "rpe",
    "duration_minutes": "duration",
    "session_duration": "duration",
    "durationminutes": "duration",
    "emotionalload": "emotional_load",
    "session_date": "date",
}

NUMERIC_COLUMNS = ["rpe", "duration", "emotional_load"]


class SessionImportError(ValueError):
    """Session CSV could not be read."""
    pass


def _canonical_columns(df: pd.DataFrame) -> pd.DataFrame:
    columns = df.columns.str.strip().str.lower().str.replace(" ", "_")
    df.columns = [COLUMN_ALIASES.get(col, col) for col in columns]
    return df


def load_sessions_csv(path: Union[str, Path]) -> List[TrainingSession]:
    """Read training sessions from a CSV file.

    Expected columns: date, training_type, rpe, duration, emotional_load
    (common variations such as "effort_level" or "duration_minutes" are
    accepted). Rows with missing or non-numeric values are skipped.

    Args:
        path: CSV file path

    Returns:
        Sessions in file order

    Raises:
        SessionImportError: If the file cannot be read, a required column is
            missing or a date cannot be parsed
    """
    try:
        df = pd.read_csv(path, encoding="utf-8", skipinitialspace=True)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise SessionImportError(f"Cannot read {path}: {e}") from e

    df = _canonical_columns(df)

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise SessionImportError(f"{path} is missing columns: {', '.join(missing)}")

    try:
        df["date"] = pd.to_datetime(df["date"].astype(str).str.strip(), format="%Y-%m-%d").dt.date
    except ValueError as e:
        raise SessionImportError(f"Invalid date in {path}: {e}") from e

    for col in NUMERIC_COLUMNS:
        df[col] = pd.to_numeric(df[col], errors="coerce")

    incomplete = df[NUMERIC_COLUMNS].isna().any(axis=1) | df["training_type"].isna()
    if incomplete.any():
        logger.warning(f"Skipping {int(incomplete.sum())} incomplete rows in {path}")
        df = df[~incomplete]

    sessions = [
        TrainingSession(
            date=row.date,
            training_type=normalize_training_type(str(row.training_type)),
            effort_level=float(row.rpe),
            duration_minutes=float(row.duration),
            emotional_load=float(row.emotional_load),
        )
        for row in df.itertuples(index=False)
    ]

    logger.info(f"Loaded {len(sessions)} sessions from {path}")
    return sessions
