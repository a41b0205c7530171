"""PAX name resolution engine.

Extracts the members named in a free-text workout comment, separating
recognized roster names (official) from unrecognized fragments
(unofficial).

Usage:
    from attendance.pax_resolution import PaxResolver, resolve

    records = resolve("@Peacock @Mani Pedi", ["Peacock", "Manny Pedi"])

    resolver = PaxResolver(roster)
    for comment in comments:
        resolver.resolve(comment)
"""

from __future__ import annotations

from .aliases import DEFAULT_ALIAS_OVERRIDES, AliasOverride, AliasTable, OverrideKind, load_alias_overrides
from .core import (
    AliasCollisionError,
    AliasConfigError,
    CommentMode,
    PaxRecord,
    PaxResolutionError,
    RosterEntry,
    Segmentation,
)
from .resolver import PaxResolver, deduplicate_records, resolve
from .segmentation import segment_comment

__all__ = [
    # Entry points
    "PaxResolver",
    "resolve",
    "deduplicate_records",
    "segment_comment",
    # Aliases
    "AliasTable",
    "AliasOverride",
    "OverrideKind",
    "DEFAULT_ALIAS_OVERRIDES",
    "load_alias_overrides",
    # Models
    "CommentMode",
    "PaxRecord",
    "RosterEntry",
    "Segmentation",
    # Errors
    "PaxResolutionError",
    "AliasCollisionError",
    "AliasConfigError",
]
