"""The Sports Page: multi-league scores, standings and favorites."""

__version__ = "1.0.0"
