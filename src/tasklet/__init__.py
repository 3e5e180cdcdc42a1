"""tasklet: a line-based personal task-tracking assistant."""

__version__ = "0.1.0"
