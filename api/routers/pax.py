"""
PAX Router - Name resolution endpoints.

This router turns a workout comment plus the region's roster into the list
of attendees, and exposes the roster cleanup and alias table it relies on.
The caller supplies the roster; nothing here reads or writes the sheet.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from attendance.pax_resolution import AliasCollisionError, AliasOverride
from attendance.roster import active_roster

from ..dependencies import get_alias_overrides, get_resolver_cache
from ..schemas import (
    AliasOverrideResponse,
    PaxRecordResponse,
    ResolvePaxRequest,
    ResolvePaxResponse,
    RosterRequest,
    RosterResponse,
)
from ..services.resolver_cache import ResolverCache
from ..settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/pax", tags=["pax"])


@router.post("/resolve", response_model=ResolvePaxResponse)
async def resolve_pax(
    request: ResolvePaxRequest,
    settings: Settings = Depends(get_settings),
    cache: ResolverCache = Depends(get_resolver_cache),
) -> ResolvePaxResponse:
    """Resolve the PAX named in a comment against the supplied roster."""
    roster = active_roster(request.roster, settings.roster_exclusion_markers)
    skip_role_labels = settings.skip_role_labels if request.skip_role_labels is None else request.skip_role_labels

    try:
        resolver = cache.get(roster, skip_role_labels=skip_role_labels)
    except AliasCollisionError as e:
        logger.error(f"Alias collision building resolver: {e}")
        raise HTTPException(status_code=422, detail=str(e)) from e

    records = resolver.resolve(request.comment)
    official_count = sum(1 for r in records if r.is_official)
    logger.info(
        f"Resolved comment against {len(roster)} roster names: "
        f"{official_count} official, {len(records) - official_count} unofficial"
    )

    return ResolvePaxResponse(
        pax=[PaxRecordResponse.from_record(r) for r in records],
        official_count=official_count,
        unofficial_count=len(records) - official_count,
    )


@router.post("/roster/active", response_model=RosterResponse)
async def clean_roster(
    request: RosterRequest,
    settings: Settings = Depends(get_settings),
) -> RosterResponse:
    """Drop blank, duplicate and excluded names from a raw roster column."""
    return RosterResponse(roster=active_roster(request.roster, settings.roster_exclusion_markers))


@router.get("/aliases", response_model=list[AliasOverrideResponse])
async def list_alias_overrides(
    overrides: tuple[AliasOverride, ...] = Depends(get_alias_overrides),
) -> list[AliasOverrideResponse]:
    """List the alias overrides in effect."""
    return [AliasOverrideResponse(**o.to_dict()) for o in overrides]
