"""GeoidLookup - query facade over a loaded geoid grid.

Loads the grid once through a GeoidGridRepository, then answers repeated,
independent offset queries against the immutable buffer. Release is
deterministic through close() or a ``with`` block.

Example:
    >>> with GeoidLookup("WW15MGH.DAC") as lookup:
    ...     n = lookup.get_offset(46.8132, 9.8479)
    ...     amsl = lookup.ellipsoid_to_msl(46.8132, 9.8479, 1611.5)
"""

from __future__ import annotations

from pathlib import Path
from types import TracebackType

import numpy as np
from numpy.typing import ArrayLike, NDArray

from domain.geoid.errors import GridReleasedError
from domain.geoid.repositories import GeoidGridRepository
from domain.geoid.services import (
    ellipsoid_to_orthometric,
    geoid_offset,
    locate_cell,
    orthometric_to_ellipsoid,
)
from domain.geoid.value_objects import GeoidGrid, GeoPoint, GridCell, GridSpec
from infrastructure.geoid.binary_grid_adapter import BinaryGridAdapter

DEFAULT_GRID_FILENAME = "WW15MGH.DAC"


class GeoidLookup:
    """Geoid undulation lookup bound to one grid file.

    Parameters
    ----------
    path: Path | str
        Grid file to load. Defaults to WW15MGH.DAC in the working directory.
    spec: GridSpec | None
        Grid shape and spacing; used for the default adapter.
    repository: GeoidGridRepository | None
        Source of the grid. Defaults to BinaryGridAdapter(spec).

    Raises
    ------
    GridIOError
        If the grid file cannot be read.
    """

    def __init__(
        self,
        path: Path | str = DEFAULT_GRID_FILENAME,
        *,
        spec: GridSpec | None = None,
        repository: GeoidGridRepository | None = None,
    ) -> None:
        if repository is None:
            repository = BinaryGridAdapter(spec=spec)
        self.path = Path(path)
        self._grid: GeoidGrid | None = repository.load_grid(self.path)

    # -- lifecycle ----------------------------------------------------------
    @property
    def grid(self) -> GeoidGrid:
        if self._grid is None:
            raise GridReleasedError(f"Grid {self.path.name} has been released")
        return self._grid

    @property
    def closed(self) -> bool:
        return self._grid is None

    def close(self) -> None:
        """Drop the grid buffer. Safe to call more than once."""
        self._grid = None

    def __enter__(self) -> "GeoidLookup":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # -- queries ------------------------------------------------------------
    def get_offset(self, latitude: float, longitude: float) -> float:
        """Geoid undulation N in meters at (latitude, longitude) in degrees.

        Raises:
            CoordinateDomainError: If the coordinate is out of range
            GridOutOfRangeError: If the grid lacks the posts of the cell
            GridReleasedError: If the lookup was closed
        """
        return geoid_offset(self.grid, latitude, longitude)

    def offset_at(self, point: GeoPoint) -> float:
        return self.get_offset(point.latitude, point.longitude)

    def locate(self, latitude: float, longitude: float) -> GridCell:
        """Return the grid cell get_offset would interpolate in."""
        return locate_cell(latitude, longitude, self.grid.spec)

    def get_offsets(
        self, latitudes: ArrayLike, longitudes: ArrayLike
    ) -> NDArray[np.float64]:
        """Broadcasting batch form of get_offset.

        Returns an array shaped like the broadcast of the inputs. Any failing
        element fails the whole call; no partial results are returned.
        """
        lats = np.asarray(latitudes, dtype=np.float64)
        lons = np.asarray(longitudes, dtype=np.float64)
        lats, lons = np.broadcast_arrays(lats, lons)

        grid = self.grid
        out = np.empty(lats.shape, dtype=np.float64)
        for idx in np.ndindex(lats.shape):
            out[idx] = geoid_offset(grid, float(lats[idx]), float(lons[idx]))
        return out

    # -- height conversion --------------------------------------------------
    def ellipsoid_to_msl(
        self, latitude: float, longitude: float, ellipsoid_height_m: float
    ) -> float:
        """Convert a WGS84 ellipsoid height to height above mean sea level."""
        return ellipsoid_to_orthometric(
            ellipsoid_height_m, self.get_offset(latitude, longitude)
        )

    def msl_to_ellipsoid(
        self, latitude: float, longitude: float, msl_height_m: float
    ) -> float:
        """Convert a height above mean sea level to a WGS84 ellipsoid height."""
        return orthometric_to_ellipsoid(
            msl_height_m, self.get_offset(latitude, longitude)
        )
