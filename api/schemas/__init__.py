"""
Pydantic schemas for the paxsheets API.

Re-exports all schemas for convenient importing.
"""

from __future__ import annotations

from .pax import (
    AliasOverrideResponse,
    PaxRecordResponse,
    ResolvePaxRequest,
    ResolvePaxResponse,
    RosterRequest,
    RosterResponse,
)

__all__ = [
    "AliasOverrideResponse",
    "PaxRecordResponse",
    "ResolvePaxRequest",
    "ResolvePaxResponse",
    "RosterRequest",
    "RosterResponse",
]
