"""Application services for geoid offset queries."""

from .geoid_lookup import DEFAULT_GRID_FILENAME, GeoidLookup

__all__ = ["DEFAULT_GRID_FILENAME", "GeoidLookup"]
