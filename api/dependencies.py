"""
Shared dependencies for the paxsheets API.

This module provides:
- The alias override table in effect (built-in table + optional file)
- The per-roster resolver cache
"""

from __future__ import annotations

import logging
from functools import lru_cache

from attendance.pax_resolution import DEFAULT_ALIAS_OVERRIDES, AliasOverride, load_alias_overrides

from .services.resolver_cache import ResolverCache
from .settings import get_settings

logger = logging.getLogger(__name__)


@lru_cache
def get_alias_overrides() -> tuple[AliasOverride, ...]:
    """Built-in overrides followed by any configured in ALIAS_OVERRIDES_FILE.

    Raises:
        AliasConfigError: If the configured file is missing or malformed
    """
    settings = get_settings()
    overrides = list(DEFAULT_ALIAS_OVERRIDES)
    if settings.alias_overrides_file is not None:
        overrides.extend(load_alias_overrides(settings.alias_overrides_file))
    return tuple(overrides)


@lru_cache
def get_resolver_cache() -> ResolverCache:
    """FastAPI dependency for the shared resolver cache."""
    settings = get_settings()
    cache = ResolverCache(get_alias_overrides(), max_size=settings.resolver_cache_size)
    logger.info(f"Resolver cache ready ({len(cache.overrides)} alias overrides, max {cache.max_size} rosters)")
    return cache
