"""Configuration management for the TrainUp load tool."""

import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration."""

    # Application
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Session data
    SESSIONS_CSV: str = os.getenv("SESSIONS_CSV", "")

    # Dashboard
    WEEKLY_HISTORY_WEEKS: int = int(os.getenv("WEEKLY_HISTORY_WEEKS", "10"))

    # Load risk thresholds
    HIGH_EFFORT_RPE: float = float(os.getenv("HIGH_EFFORT_RPE", "8"))  # RPE at or above = high effort
    HIGH_EFFORT_SESSIONS: int = int(os.getenv("HIGH_EFFORT_SESSIONS", "3"))  # per 7 days

    @classmethod
    def get_sessions_csv(cls, path: Optional[str] = None) -> Path:
        """Resolve the sessions CSV path, falling back to SESSIONS_CSV."""
        resolved = path or cls.SESSIONS_CSV
        if not resolved:
            raise ValueError(
                "No sessions CSV given. Pass a path or set SESSIONS_CSV"
            )
        return Path(resolved)

    @classmethod
    def get_log_level(cls) -> str:
        """Get the configured log level name, defaulting to INFO."""
        level = cls.LOG_LEVEL.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            return "INFO"
        return level


config = Config()
