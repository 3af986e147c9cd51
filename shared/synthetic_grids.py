"""Synthetic geoid grids shared by scripts/gen_fixtures.py and the tests.

Location: shared/ (not tests/) to avoid scripts->tests dependency.

Every builder returns posts as a (721, 1440) int16 array in centimeters;
encode_posts() turns them into the on-disk big-endian byte layout.
When adding/removing fixtures, update EXPECTED_FIXTURES and FIXTURE_BUILDERS.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from domain.geoid.value_objects import NUM_COLS, NUM_ROWS, POST_DTYPE

FULL_GRID_BYTES: int = NUM_ROWS * NUM_COLS * 2  # 2,076,480

# Bytes kept in the truncated fixture: the first 10 rows only
TRUNCATED_ROWS = 10


def zero_posts() -> NDArray[np.int16]:
    """Every post is 0 cm."""
    return np.zeros((NUM_ROWS, NUM_COLS), dtype=np.int16)


def single_post(row: int = 0, col: int = 0, value: int = 100) -> NDArray[np.int16]:
    """One post set to ``value`` cm, all others 0."""
    posts = zero_posts()
    posts[row, col] = value
    return posts


def gradient_posts() -> NDArray[np.int16]:
    """Linear field: post(row, col) = 2 * row - col (range -1439..1440).

    Bilinear interpolation reproduces a linear field exactly, so expected
    values can be computed in closed form away from the date-line seam.
    """
    rows = np.arange(NUM_ROWS, dtype=np.int32)[:, np.newaxis]
    cols = np.arange(NUM_COLS, dtype=np.int32)[np.newaxis, :]
    return (2 * rows - cols).astype(np.int16)


def random_posts(seed: int = 42) -> NDArray[np.int16]:
    """Realistic-range random posts (EGM96 spans roughly -107 m .. +86 m)."""
    rng = np.random.default_rng(seed)
    return rng.integers(-10_700, 8_600, size=(NUM_ROWS, NUM_COLS), dtype=np.int16)


def encode_posts(posts: NDArray[np.integer]) -> bytes:
    """Encode posts as headerless big-endian int16, row-major."""
    return np.ascontiguousarray(posts, dtype=POST_DTYPE).tobytes()


def write_grid(path: Path, posts: NDArray[np.integer], n_bytes: int | None = None) -> Path:
    """Write posts to ``path``, optionally keeping only the first ``n_bytes``."""
    raw = encode_posts(posts)
    if n_bytes is not None:
        raw = raw[:n_bytes]
    path.write_bytes(raw)
    return path


# Expected fixtures - SINGLE SOURCE OF TRUTH.
# Maps filename -> (posts builder, byte count or None for the full grid).
FIXTURE_BUILDERS: dict[str, tuple[Callable[[], NDArray[np.int16]], int | None]] = {
    "ww15mgh_gradient.dac": (gradient_posts, None),
    "ww15mgh_single_post.dac": (single_post, None),
    "ww15mgh_truncated.dac": (gradient_posts, TRUNCATED_ROWS * NUM_COLS * 2),
    "ww15mgh_zero.dac": (zero_posts, None),
}

# Sorted alphabetically for deterministic comparison.
EXPECTED_FIXTURES: list[str] = sorted(FIXTURE_BUILDERS)

EXPECTED_FIXTURE_COUNT: int = len(EXPECTED_FIXTURES)
