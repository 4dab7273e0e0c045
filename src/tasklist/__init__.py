"""tasklist - a single to-do list backed by local SQLite storage."""

__version__ = "1.0.0"
