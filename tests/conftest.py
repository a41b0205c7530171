"""
Root test configuration and fixtures for paxsheets.

This conftest.py provides common fixtures for all test categories:
- unit/pax_resolution: Name resolution engine
- unit/api: HTTP layer
- unit/scripts: Command line tools

Note: sys.path manipulation is handled here to ensure imports work correctly.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def region_roster_file() -> Path:
    """Raw roster column export: one name per line, with archived/under-age rows."""
    return FIXTURES_DIR / "region_roster.txt"


@pytest.fixture
def region_roster(region_roster_file: Path) -> list[str]:
    """Active roster of a region, cleaned the way callers clean it."""
    from attendance.roster import active_roster

    return active_roster(region_roster_file.read_text(encoding="utf-8").splitlines())


@pytest.fixture
def small_roster() -> list[str]:
    """Two single-word members."""
    return ["Peacock", "Clark"]
