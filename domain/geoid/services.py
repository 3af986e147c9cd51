"""Geoid Bounded Context - Domain Services.

Pure domain logic for geoid offset queries.
NO I/O operations - grid loading is implemented by infrastructure adapters
under `src/infrastructure/geoid/binary_grid_adapter.py` via domain ports.

Height relations used by the conversion helpers:
    h: ellipsoid height (GNSS)
    H: orthometric height (above mean sea level)
    N: geoid undulation (this module's offset)

    H = h - N
    h = H + N
"""

from __future__ import annotations

import math

from domain.geoid.errors import CoordinateDomainError
from domain.geoid.value_objects import GeoidGrid, GridCell, GridSpec

CENTIMETERS_PER_METER = 100.0


# ---------------------------------------------------------------------------
# Helper: Range Check
# ---------------------------------------------------------------------------
def validate_coordinate(latitude: float, longitude: float) -> None:
    """Raise CoordinateDomainError unless lat in [-90, 90] and lon in [-180, 180].

    NaN fails both comparisons and is rejected.
    """
    if not (-90.0 <= latitude <= 90.0) or not (-180.0 <= longitude <= 180.0):
        raise CoordinateDomainError(latitude, longitude)


# ---------------------------------------------------------------------------
# Coordinate -> Grid Cell
# ---------------------------------------------------------------------------
def locate_cell(latitude: float, longitude: float, spec: GridSpec) -> GridCell:
    """Find the grid cell enclosing a coordinate.

    Rows run south from +90 and columns run east from 0 degrees. The last
    row is never a top row, so the south pole (and anything south of the
    second-to-last row) uses the bottom cell. Longitudes in the last column
    interval pair column num_cols - 1 with column 0 across the date line.

    Args:
        latitude: Degrees in [-90, 90]
        longitude: Degrees in [-180, 180]
        spec: Grid shape and spacing

    Returns:
        GridCell with corner indices and fractional position (u, v)

    Raises:
        CoordinateDomainError: If the coordinate is out of range
    """
    validate_coordinate(latitude, longitude)

    interval = spec.interval_degree

    # Normalize to [0, 360)
    if longitude < 0:
        longitude += 360.0

    if latitude <= -90.0:
        top_row = spec.num_rows - 2
    else:
        top_row = min(int((90.0 - latitude) / interval), spec.num_rows - 2)

    if longitude >= 360.0 - interval:
        left_col = spec.num_cols - 1
        right_col = 0
    else:
        left_col = int(longitude / interval)
        right_col = left_col + 1

    lat_top = spec.latitude_of(top_row)
    lon_left = spec.longitude_of(left_col)

    return GridCell(
        top_row=top_row,
        left_col=left_col,
        right_col=right_col,
        u=(longitude - lon_left) / interval,
        v=(lat_top - latitude) / interval,
    )


# ---------------------------------------------------------------------------
# Bilinear Interpolation
# ---------------------------------------------------------------------------
def bilinear_interpolate(grid: GeoidGrid, cell: GridCell) -> float:
    """Interpolate the undulation in centimeters inside a cell.

    Each corner is weighted by the area of the sub-rectangle opposite it,
    so at a grid post (u == v == 0) the result is exactly that post.

    Raises:
        GridOutOfRangeError: If any corner lies outside the loaded buffer
    """
    ul = grid.sample(cell.top_row, cell.left_col)
    ll = grid.sample(cell.bottom_row, cell.left_col)
    lr = grid.sample(cell.bottom_row, cell.right_col)
    ur = grid.sample(cell.top_row, cell.right_col)

    u = cell.u
    v = cell.v

    pul = (1.0 - u) * (1.0 - v)
    pll = (1.0 - u) * v
    plr = u * v
    pur = u * (1.0 - v)

    return pul * ul + pll * ll + plr * lr + pur * ur


# ---------------------------------------------------------------------------
# Main Service: geoid_offset
# ---------------------------------------------------------------------------
def geoid_offset(grid: GeoidGrid, latitude: float, longitude: float) -> float:
    """Return the geoid undulation N in meters at a coordinate.

    Args:
        grid: Loaded geoid grid
        latitude: Degrees in [-90, 90]
        longitude: Degrees in [-180, 180]

    Returns:
        Offset in meters (ellipsoid height minus orthometric height)

    Raises:
        CoordinateDomainError: If the coordinate is out of range
        GridOutOfRangeError: If the cell needs posts missing from the grid

    Example:
        >>> grid = BinaryGridAdapter().load_grid("WW15MGH.DAC")
        >>> n = geoid_offset(grid, 46.8132, 9.8479)
        >>> print(f"N = {n:.2f} m")
    """
    cell = locate_cell(latitude, longitude, grid.spec)
    return bilinear_interpolate(grid, cell) / CENTIMETERS_PER_METER


# ---------------------------------------------------------------------------
# Height Conversion
# ---------------------------------------------------------------------------
def ellipsoid_to_orthometric(ellipsoid_height_m: float, offset_m: float) -> float:
    """H = h - N."""
    if not math.isfinite(ellipsoid_height_m):
        raise ValueError(f"ellipsoid height must be finite: {ellipsoid_height_m}")
    return ellipsoid_height_m - offset_m


def orthometric_to_ellipsoid(orthometric_height_m: float, offset_m: float) -> float:
    """h = H + N."""
    if not math.isfinite(orthometric_height_m):
        raise ValueError(f"orthometric height must be finite: {orthometric_height_m}")
    return orthometric_height_m + offset_m
