"""Matescape tournament listing: search, facet filtering and month grouping."""

__version__ = "0.1.0"
