"""Sanity tests for the synthetic grid fixtures.

These tests validate that scripts/gen_fixtures.py writes every expected
fixture with the on-disk layout the adapter reads. Generation runs into
tmp_path, so the repository's tests/fixtures/ is never touched.

These are NOT behavioral tests of the lookup - those live in
tests/geoid/ and tests/application/.
"""

from pathlib import Path

import numpy as np
import pytest

from infrastructure.geoid.binary_grid_adapter import BinaryGridAdapter
from shared.synthetic_grids import (
    EXPECTED_FIXTURE_COUNT,
    EXPECTED_FIXTURES,
    FULL_GRID_BYTES,
    TRUNCATED_ROWS,
    gradient_posts,
)

pytestmark = pytest.mark.integration


@pytest.fixture
def fixtures_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    import scripts.gen_fixtures as gen

    monkeypatch.setattr(gen, "FIXTURES_DIR", tmp_path / "fixtures")
    assert gen.main() == 0
    return tmp_path / "fixtures"


def test_expected_fixture_list_is_sorted_and_counted():
    assert EXPECTED_FIXTURES == sorted(EXPECTED_FIXTURES)
    assert EXPECTED_FIXTURE_COUNT == len(EXPECTED_FIXTURES) == 4


def test_all_fixtures_generated(fixtures_dir: Path):
    generated = sorted(p.name for p in fixtures_dir.iterdir())

    assert generated == EXPECTED_FIXTURES


@pytest.mark.parametrize(
    "filename",
    ["ww15mgh_gradient.dac", "ww15mgh_single_post.dac", "ww15mgh_zero.dac"],
)
def test_full_fixtures_have_full_coverage(fixtures_dir: Path, filename: str):
    assert (fixtures_dir / filename).stat().st_size == FULL_GRID_BYTES


def test_truncated_fixture_size(fixtures_dir: Path):
    size = (fixtures_dir / "ww15mgh_truncated.dac").stat().st_size

    assert size == TRUNCATED_ROWS * 1440 * 2
    assert size < FULL_GRID_BYTES


def test_gradient_fixture_round_trips_through_adapter(fixtures_dir: Path):
    grid = BinaryGridAdapter().load_grid(fixtures_dir / "ww15mgh_gradient.dac")

    np.testing.assert_array_equal(grid.posts(), gradient_posts())


def test_single_post_fixture_layout(fixtures_dir: Path):
    raw = (fixtures_dir / "ww15mgh_single_post.dac").read_bytes()

    assert raw[:2] == b"\x00\x64"  # 100 cm, big-endian
    assert not any(raw[2:])
