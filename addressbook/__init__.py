"""Address book — an in-memory contact directory with remote synchronization."""

__version__ = "0.1.0"
