"""Root pytest configuration for all tests.

Synthetic grids are built with shared/synthetic_grids.py. Full-size grid
files (2 MB each) are written once per session; in-memory GeoidGrids are
built per test where a test needs its own posts.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import numpy as np
import pytest
from numpy.typing import NDArray

from domain.geoid.value_objects import NUM_COLS, GeoidGrid
from shared.synthetic_grids import (
    TRUNCATED_ROWS,
    encode_posts,
    gradient_posts,
    random_posts,
    single_post,
    write_grid,
    zero_posts,
)


def make_grid(posts: NDArray[np.integer], n_bytes: int | None = None) -> GeoidGrid:
    """Build an in-memory GeoidGrid from posts, optionally truncated."""
    raw = encode_posts(posts)
    if n_bytes is not None:
        raw = raw[:n_bytes]
    return GeoidGrid.from_bytes(raw)


@pytest.fixture
def grid_factory() -> Callable[..., GeoidGrid]:
    return make_grid


# ---------------------------------------------------------------------------
# Session-scoped posts (read-only in tests)
# ---------------------------------------------------------------------------
@pytest.fixture(scope="session")
def random_post_array() -> NDArray[np.int16]:
    return random_posts(seed=42)


@pytest.fixture(scope="session")
def random_grid(random_post_array: NDArray[np.int16]) -> GeoidGrid:
    return make_grid(random_post_array)


@pytest.fixture(scope="session")
def gradient_grid() -> GeoidGrid:
    return make_grid(gradient_posts())


@pytest.fixture(scope="session")
def zero_grid() -> GeoidGrid:
    return make_grid(zero_posts())


# ---------------------------------------------------------------------------
# Session-scoped grid files
# ---------------------------------------------------------------------------
@pytest.fixture(scope="session")
def grid_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    return tmp_path_factory.mktemp("grids")


@pytest.fixture(scope="session")
def zero_grid_path(grid_dir: Path) -> Path:
    return write_grid(grid_dir / "ww15mgh_zero.dac", zero_posts())


@pytest.fixture(scope="session")
def single_post_grid_path(grid_dir: Path) -> Path:
    return write_grid(grid_dir / "ww15mgh_single_post.dac", single_post(0, 0, 100))


@pytest.fixture(scope="session")
def random_grid_path(grid_dir: Path, random_post_array: NDArray[np.int16]) -> Path:
    return write_grid(grid_dir / "ww15mgh_random.dac", random_post_array)


@pytest.fixture(scope="session")
def truncated_grid_path(grid_dir: Path) -> Path:
    return write_grid(
        grid_dir / "ww15mgh_truncated.dac",
        gradient_posts(),
        n_bytes=TRUNCATED_ROWS * NUM_COLS * 2,
    )
