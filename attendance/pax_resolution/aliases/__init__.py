"""Alias table and override management."""

from __future__ import annotations

from .alias_table import AliasTable, build_roster_entries
from .loader import load_alias_overrides, parse_alias_overrides
from .overrides import DEFAULT_ALIAS_OVERRIDES, AliasOverride, OverrideKind

__all__ = [
    "AliasTable",
    "build_roster_entries",
    "load_alias_overrides",
    "parse_alias_overrides",
    "DEFAULT_ALIAS_OVERRIDES",
    "AliasOverride",
    "OverrideKind",
]
