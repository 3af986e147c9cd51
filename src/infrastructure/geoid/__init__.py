"""Infrastructure adapters for the geoid bounded context.

This module provides the infrastructure layer implementations for geoid
operations, including loading the undulation grid from flat binary files.
"""

from .binary_grid_adapter import BinaryGridAdapter

__all__ = ["BinaryGridAdapter"]
