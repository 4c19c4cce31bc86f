"""Session data import."""

from .session_csv import SessionImportError, load_sessions_csv

__all__ = ["SessionImportError", "load_sessions_csv"]
