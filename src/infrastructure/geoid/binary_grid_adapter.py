"""Flat binary adapter for GeoidGridRepository.

Implements loading of the headerless EGM96 undulation grid (WW15MGH.DAC:
721 x 1440 big-endian int16 posts, row-major, row 0 = +90 degrees) and
returns a domain GeoidGrid Value Object.

Lifecycle (to avoid resource leaks):
1) Stat the path and reject empty or over-budget files
2) Open the file with a context manager
3) Allocate a uint8 buffer of exactly the file size
4) readinto() the whole file in one pass; a short read is a failure
5) Close the file (context exit) before building the GeoidGrid
6) Return GeoidGrid; post coverage is checked at access time
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from domain.geoid.errors import GridIOError, InsufficientMemoryError
from domain.geoid.value_objects import GeoidGrid, GridSpec

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)


def _log_os_error(action: str, path: Path, e: OSError) -> None:
    # Log only filename, errno, and strerror to avoid leaking absolute paths
    logger.error(
        "Failed to %s %s (errno=%s, strerror=%s)",
        action,
        path.name,
        getattr(e, "errno", "unknown"),
        getattr(e, "strerror", "unknown"),
    )


class BinaryGridAdapter:
    """Infrastructure adapter for loading geoid grids from flat binary files.

    Parameters
    ----------
    spec: GridSpec | None
        Grid shape and spacing attached to loaded grids. Defaults to the
        721 x 1440, 15 arc-minute EGM96 grid.
    max_bytes: int | None
        Optional memory budget for the loaded buffer. Files larger than the
        budget raise InsufficientMemoryError before any allocation.
    """

    def __init__(
        self, spec: GridSpec | None = None, max_bytes: int | None = None
    ) -> None:
        self.spec = spec if spec is not None else GridSpec()
        self.max_bytes = max_bytes

    def load_grid(self, file_path: Path | str) -> GeoidGrid:
        """Read a grid file fully into memory and return a GeoidGrid.

        Raises:
            GridIOError: File missing, not a regular file, unreadable,
                empty, or shorter than its reported size when read
            InsufficientMemoryError: File exceeds max_bytes
        """
        path = Path(file_path)

        try:
            st = path.stat()
        except OSError as e:
            _log_os_error("stat", path, e)
            raise GridIOError(f"Cannot stat grid file {path.name}: {e.strerror}") from e

        size = st.st_size
        if size == 0:
            raise GridIOError(f"Empty file: {path.name}")
        if self.max_bytes is not None and size > self.max_bytes:
            raise InsufficientMemoryError(
                f"File size {size}B exceeds memory budget {self.max_bytes}B"
            )

        try:
            with path.open("rb") as fh:
                buffer = np.empty(size, dtype=np.uint8)
                n_read = fh.readinto(buffer)
        except MemoryError as e:
            raise InsufficientMemoryError(
                "Insufficient memory to load geoid grid"
            ) from e
        except OSError as e:
            _log_os_error("read", path, e)
            raise GridIOError(f"Cannot read grid file {path.name}: {e.strerror}") from e

        if n_read != size:
            raise GridIOError(
                f"Short read on {path.name}: got {n_read} of {size} bytes"
            )

        grid = GeoidGrid(data=buffer, spec=self.spec)

        if not grid.is_complete:
            logger.warning(
                "Geoid grid %s: %d bytes, expected at least %d; "
                "posts past the end are unavailable",
                path.name,
                size,
                self.spec.min_bytes,
            )
        logger.debug(
            "Geoid grid %s: Loaded %d bytes (%dx%d posts)",
            path.name,
            size,
            self.spec.num_rows,
            self.spec.num_cols,
        )
        return grid
