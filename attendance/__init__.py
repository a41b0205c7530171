"""
Attendance - Core logic for turning workout posts into attendance records.

This package contains:
- pax_resolution: Name resolution engine (comment + roster -> PAX records)
- roster: Roster hygiene applied before resolution
- logging_config: Unified logging format
"""

from attendance.pax_resolution import PaxRecord, PaxResolver, resolve
from attendance.roster import ROSTER_EXCLUSION_MARKERS, active_roster

__all__ = [
    "PaxRecord",
    "PaxResolver",
    "ROSTER_EXCLUSION_MARKERS",
    "active_roster",
    "resolve",
]
