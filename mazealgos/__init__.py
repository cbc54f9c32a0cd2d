"""Data structures, graph searches, and maze generation and solving."""

__version__ = "0.1.0"