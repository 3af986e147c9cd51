"""Domain Port(s) for Geoid Grid I/O.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete I/O here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .value_objects import GeoidGrid


class GeoidGridRepository(Protocol):
    """Port for obtaining geoid grids from external sources.

    Implementations live in infrastructure (e.g., the flat binary adapter).
    """

    def load_grid(self, file_path: Path | str) -> GeoidGrid:
        """Load a geoid grid file and return it as a GeoidGrid."""
        ...
