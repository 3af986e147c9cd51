"""Geoid Offset Domain Layer.

This package contains the core logic organized by bounded contexts:
- geoid: Global undulation grid, cell location, bilinear interpolation
"""

from domain import geoid

__all__ = ["geoid"]
