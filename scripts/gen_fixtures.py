#!/usr/bin/env python3
"""Generate synthetic geoid grid fixtures.

This script writes the synthetic WW15MGH-layout grids listed in
shared/synthetic_grids.py. Fixtures are minimal synthetic grids - not real
EGM96 data. The test-suite builds the same grids in tmp_path, so running
this script is only needed to inspect the files by hand.

Usage:
    python scripts/gen_fixtures.py

Output:
    tests/fixtures/*.dac

Dependencies:
    This script imports from shared/synthetic_grids.py (not tests/) to avoid
    circular dependencies between scripts and tests packages.
"""

from __future__ import annotations

from pathlib import Path

from shared.synthetic_grids import (
    EXPECTED_FIXTURE_COUNT,
    EXPECTED_FIXTURES,
    FIXTURE_BUILDERS,
    write_grid,
)

# Output directory
FIXTURES_DIR = Path(__file__).parent.parent / "tests" / "fixtures"


def ensure_dir() -> None:
    """Ensure fixtures directory exists."""
    FIXTURES_DIR.mkdir(parents=True, exist_ok=True)
    print(f"Output directory: {FIXTURES_DIR}")


def gen_fixture(name: str) -> Path:
    """Write one fixture by name and return its path."""
    builder, n_bytes = FIXTURE_BUILDERS[name]
    path = write_grid(FIXTURES_DIR / name, builder(), n_bytes)
    print(f"  {name}: {path.stat().st_size} bytes")
    return path


def verify_fixtures() -> list[str]:
    """Return the expected fixtures missing from FIXTURES_DIR."""
    return [name for name in EXPECTED_FIXTURES if not (FIXTURES_DIR / name).exists()]


def main() -> int:
    ensure_dir()
    for name in EXPECTED_FIXTURES:
        gen_fixture(name)

    missing = verify_fixtures()
    if missing:
        print(f"Missing fixtures: {missing}")
        return 1
    print(f"Generated {EXPECTED_FIXTURE_COUNT} fixtures")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
