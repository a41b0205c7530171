"""Roster hygiene applied by callers before resolution.

The sheet keeps retired and under-age members on the roster, tagged with
a marker in the name. They must not be matchable, so callers filter them
out here; the resolution engine itself never filters."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

logger = logging.getLogger(__name__)

ROSTER_EXCLUSION_MARKERS: tuple[str, ...] = ("(Archived)", "(<18)")


def is_excluded(name: str, exclusion_markers: Sequence[str] = ROSTER_EXCLUSION_MARKERS) -> bool:
    """Check if a roster name carries any exclusion marker"""
    return any(marker in name for marker in exclusion_markers)


def active_roster(
    names: Iterable[str | None],
    exclusion_markers: Sequence[str] = ROSTER_EXCLUSION_MARKERS,
) -> list[str]:
    """Clean a raw roster column into the active member names.

    Drops empty cells and excluded names, trims whitespace, and removes
    duplicates keeping the first occurrence.

    Examples:
        ["Peacock", " Clark ", "Peacock"] -> ["Peacock", "Clark"]
        ["Gumby (Archived)", "Deuce"] -> ["Deuce"]
    """
    result: list[str] = []
    seen: set[str] = set()
    excluded = 0

    for raw in names:
        if raw is None:
            continue
        name = raw.strip()
        if not name:
            continue
        if is_excluded(name, exclusion_markers):
            excluded += 1
            continue
        if name in seen:
            continue
        seen.add(name)
        result.append(name)

    if excluded:
        logger.debug(f"Excluded {excluded} roster names by marker")
    return result
