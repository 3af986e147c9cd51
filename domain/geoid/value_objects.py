"""Geoid Bounded Context - Value Objects.

Immutable data structures for the global geoid undulation grid.
All validation occurs at construction time via Pydantic.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

from domain.geoid.errors import GridOutOfRangeError

# ---------------------------------------------------------------------------
# Grid Constants (EGM96 15-arc-minute grid, WW15MGH.DAC)
# ---------------------------------------------------------------------------
NUM_ROWS = 721  # +90 to -90 inclusive
NUM_COLS = 1440  # 0 to 360 exclusive; column 1440 wraps to column 0
INTERVAL_MINUTES = 15
BYTES_PER_POST = 2  # signed 16-bit, big-endian

# Big-endian signed 16-bit, as stored on disk
POST_DTYPE = np.dtype(">i2")


class GridSpec(BaseModel):
    """Shape and spacing of a global geoid grid (Value Object).

    The spacing in degrees is derived once per instance and reused by every
    query bound to it.

    Invariants:
        GS-1: num_rows >= 2 and num_cols >= 2
        GS-2: interval_minutes > 0
        GS-3: rows span pole to pole, columns span a full turn of longitude
    """

    num_rows: int = NUM_ROWS
    num_cols: int = NUM_COLS
    interval_minutes: int = INTERVAL_MINUTES

    _interval_degree: float = PrivateAttr(default=0.0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_spec(self) -> "GridSpec":
        if self.num_rows < 2 or self.num_cols < 2:
            raise ValueError(
                f"Grid needs at least 2x2 posts, got {self.num_rows}x{self.num_cols}"
            )
        if self.interval_minutes <= 0:
            raise ValueError(
                f"interval_minutes must be positive: {self.interval_minutes}"
            )
        # Exact integer arithmetic in arc-minutes: 180 deg = 10800', 360 deg = 21600'
        if (self.num_rows - 1) * self.interval_minutes != 180 * 60:
            raise ValueError(
                f"{self.num_rows} rows at {self.interval_minutes}' do not span 180 degrees"
            )
        if self.num_cols * self.interval_minutes != 360 * 60:
            raise ValueError(
                f"{self.num_cols} columns at {self.interval_minutes}' do not span 360 degrees"
            )
        return self

    def model_post_init(self, __context: Any) -> None:
        self._interval_degree = self.interval_minutes / 60.0

    @property
    def interval_degree(self) -> float:
        """Post spacing in degrees (0.25 for the 15' grid)."""
        return self._interval_degree

    @property
    def post_count(self) -> int:
        return self.num_rows * self.num_cols

    @property
    def min_bytes(self) -> int:
        """Smallest buffer that covers every post."""
        return self.post_count * BYTES_PER_POST

    def latitude_of(self, row: int) -> float:
        """Latitude in degrees of a grid row (row 0 = north pole)."""
        return 90.0 - row * self.interval_degree

    def longitude_of(self, col: int) -> float:
        """Longitude in degrees [0, 360) of a grid column."""
        return col * self.interval_degree


class GeoidGrid(BaseModel):
    """Raw geoid grid bytes with bounds-checked post access (Value Object).

    The buffer is copied into an owned, read-only array at construction, so
    nothing outside this object can change it. Structure is not validated
    beyond its length: a short buffer is accepted and posts past its end
    raise GridOutOfRangeError when requested.
    """

    data: NDArray[np.uint8]  # 1D raw file bytes, read-only
    spec: GridSpec = Field(default_factory=GridSpec)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @model_validator(mode="after")
    def validate_buffer(self) -> "GeoidGrid":
        if self.data.ndim != 1:
            raise ValueError(f"Data must be 1D, got {self.data.ndim}D")
        if self.data.dtype != np.uint8:
            raise ValueError(f"Data must be uint8, got {self.data.dtype}")
        if self.data.size == 0:
            raise ValueError("Grid buffer cannot be empty")

        immutable = np.array(self.data, dtype=np.uint8, copy=True, order="C")
        immutable.flags.writeable = False
        object.__setattr__(self, "data", immutable)

        return self

    @classmethod
    def from_bytes(cls, raw: bytes, spec: GridSpec | None = None) -> "GeoidGrid":
        """Build a grid from raw big-endian file contents."""
        data = np.frombuffer(raw, dtype=np.uint8)
        if spec is None:
            return cls(data=data)
        return cls(data=data, spec=spec)

    @property
    def nbytes(self) -> int:
        return int(self.data.size)

    @property
    def is_complete(self) -> bool:
        """True if every post of the GridSpec is backed by the buffer."""
        return self.nbytes >= self.spec.min_bytes

    def sample(self, row: int, col: int) -> int:
        """Return the post at (row, col) in centimeters.

        Args:
            row: Grid row in [0, num_rows), row 0 = +90 degrees
            col: Grid column in [0, num_cols), column 0 = 0 degrees

        Returns:
            Signed 16-bit geoid undulation in centimeters

        Raises:
            GridOutOfRangeError: If (row, col) is outside the grid or the
                post lies past the end of the buffer
        """
        if not (0 <= row < self.spec.num_rows and 0 <= col < self.spec.num_cols):
            raise GridOutOfRangeError(row, col, self.nbytes)

        k = row * self.spec.num_cols + col
        offset = k * BYTES_PER_POST
        if offset + 1 >= self.nbytes:
            raise GridOutOfRangeError(row, col, self.nbytes)

        value = (int(self.data[offset]) << 8) | int(self.data[offset + 1])
        return value - 0x10000 if value & 0x8000 else value

    def posts(self) -> NDArray[np.int16]:
        """Return all posts as a read-only (num_rows, num_cols) array.

        Raises:
            GridOutOfRangeError: If the buffer does not cover the full grid
        """
        if not self.is_complete:
            raise GridOutOfRangeError(
                self.spec.num_rows - 1, self.spec.num_cols - 1, self.nbytes
            )
        return (
            self.data[: self.spec.min_bytes]
            .view(POST_DTYPE)
            .reshape(self.spec.num_rows, self.spec.num_cols)
        )


class GridCell(BaseModel):
    """Grid cell enclosing a query point, with the point's position in it.

    Invariants:
        GC-1: top_row >= 0, left_col >= 0, right_col >= 0
        GC-2: right_col is left_col + 1, or 0 when the cell wraps the date line

    Fields:
        u: Fractional column position, 0 = left edge, 1 = right edge
        v: Fractional row position, 0 = top edge, 1 = bottom edge
    """

    top_row: int = Field(ge=0)
    left_col: int = Field(ge=0)
    right_col: int = Field(ge=0)
    u: float
    v: float

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_cell(self) -> "GridCell":
        if self.right_col != self.left_col + 1 and self.right_col != 0:
            raise ValueError(
                f"right_col={self.right_col} does not follow left_col={self.left_col}"
            )
        return self

    @property
    def bottom_row(self) -> int:
        return self.top_row + 1

    @property
    def wraps(self) -> bool:
        """True if the cell straddles the 360/0 degree seam."""
        return self.right_col == 0


class GeoPoint(BaseModel):
    """Geographic coordinate in WGS84 (Value Object).

    Invariants:
        GP-1: latitude in [-90, 90]
        GP-2: longitude in [-180, 180]
    """

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)

    model_config = ConfigDict(frozen=True)
