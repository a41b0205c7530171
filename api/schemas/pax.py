"""
Pydantic schemas for PAX resolution endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from attendance.pax_resolution import PaxRecord


class ResolvePaxRequest(BaseModel):
    """Request to resolve the PAX named in a comment."""

    comment: str
    roster: list[str | None] = Field(default_factory=list)
    skip_role_labels: bool | None = None  # None = use the server setting


class PaxRecordResponse(BaseModel):
    """One resolved PAX."""

    is_official: bool
    name: str | None = None
    unknown_name: str | None = None

    @classmethod
    def from_record(cls, record: PaxRecord) -> PaxRecordResponse:
        return cls(is_official=record.is_official, name=record.name, unknown_name=record.unknown_name)


class ResolvePaxResponse(BaseModel):
    """Resolution result for a comment."""

    pax: list[PaxRecordResponse]
    official_count: int
    unofficial_count: int


class RosterRequest(BaseModel):
    """Raw roster column to clean."""

    roster: list[str | None]


class RosterResponse(BaseModel):
    """Active roster names."""

    roster: list[str]


class AliasOverrideResponse(BaseModel):
    """One alias override."""

    mention: str
    canonical: str
    kind: str
