"""Seeded maze generation with breadth-first shortest-path queries."""

__version__ = "0.1.0"
