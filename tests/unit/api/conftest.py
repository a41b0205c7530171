"""Fixtures for API tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest


@pytest.fixture(autouse=True)
def clear_cached_dependencies() -> Generator[None, None, None]:
    """Settings, overrides and the resolver cache are process-wide; reset them per test."""
    from api.dependencies import get_alias_overrides, get_resolver_cache
    from api.settings import get_settings

    def clear() -> None:
        get_settings.cache_clear()
        get_alias_overrides.cache_clear()
        get_resolver_cache.cache_clear()

    clear()
    yield
    clear()
