"""In-memory SQL-style tables with typed values, comparison rules and dates."""

__version__ = "0.1.0"

__all__ = ["values", "dates", "table", "cli"]