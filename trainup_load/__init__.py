"""TrainUp training load and ACWR analysis."""

__version__ = "0.1.0"
