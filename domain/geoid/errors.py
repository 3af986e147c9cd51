"""Geoid Bounded Context - Error Hierarchy.

Custom exceptions for grid loading and offset queries.

Every error also derives from the closest builtin (OSError, ValueError,
IndexError) so callers with generic handlers still catch them.
"""

from __future__ import annotations


class GeoidError(Exception):
    """Base error for geoid operations."""


# ---------------------------------------------------------------------------
# Grid Loading Errors
# ---------------------------------------------------------------------------
class GridIOError(GeoidError, OSError):
    """Grid file is missing, unreadable, empty, or was only partially read."""


class InsufficientMemoryError(GeoidError):
    """Grid file is larger than the configured memory budget."""


# ---------------------------------------------------------------------------
# Query Errors
# ---------------------------------------------------------------------------
class CoordinateDomainError(GeoidError, ValueError):
    """Latitude or longitude is outside the valid geographic range.

    Attributes:
        latitude: The offending latitude in degrees
        longitude: The offending longitude in degrees
    """

    def __init__(self, latitude: float, longitude: float) -> None:
        self.latitude = latitude
        self.longitude = longitude
        super().__init__(
            f"Coordinate ({latitude}, {longitude}) outside "
            f"[lat: -90 to 90, lon: -180 to 180]"
        )


class GridOutOfRangeError(GeoidError, IndexError):
    """Grid post lies outside the grid or the loaded buffer.

    Against a full-coverage grid this only happens for a caller bug; for a
    truncated or wrong-resolution file it is the integrity guard.

    Attributes:
        row: Requested row
        col: Requested column
        nbytes: Length of the loaded buffer in bytes
    """

    def __init__(self, row: int, col: int, nbytes: int) -> None:
        self.row = row
        self.col = col
        self.nbytes = nbytes
        super().__init__(
            f"Grid post (row={row}, col={col}) outside loaded grid of {nbytes} bytes"
        )


class GridReleasedError(GeoidError):
    """Query issued after the lookup released its grid."""
