"""
Resolver Cache Service.

Keeps one PaxResolver per distinct roster so repeated comments for the same
region reuse its alias table instead of rebuilding it on every request.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from collections.abc import Sequence

from attendance.pax_resolution import AliasOverride, PaxResolver

logger = logging.getLogger(__name__)


class ResolverCache:
    """
    LRU cache of resolvers keyed by (roster, skip_role_labels).

    Resolvers are read-only once built, so a cached instance can serve
    concurrent requests. The lock only guards the cache bookkeeping.
    """

    def __init__(self, overrides: Sequence[AliasOverride], max_size: int = 32):
        self.overrides = tuple(overrides)
        self.max_size = max_size
        self._resolvers: OrderedDict[tuple[tuple[str, ...], bool], PaxResolver] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, roster: Sequence[str], skip_role_labels: bool = False) -> PaxResolver:
        """Get (or build) the resolver for a roster.

        Raises:
            AliasCollisionError: If the roster produces colliding aliases
        """
        key = (tuple(roster), skip_role_labels)
        with self._lock:
            resolver = self._resolvers.get(key)
            if resolver is not None:
                self._resolvers.move_to_end(key)
                self.hits += 1
                return resolver
            self.misses += 1

        # Build outside the lock; a collision error must not poison the cache
        resolver = PaxResolver(roster, overrides=self.overrides, skip_role_labels=skip_role_labels)
        if self.max_size == 0:
            return resolver

        with self._lock:
            self._resolvers[key] = resolver
            self._resolvers.move_to_end(key)
            while len(self._resolvers) > self.max_size:
                self._resolvers.popitem(last=False)
        logger.debug(f"Cached resolver for roster of {len(roster)} names ({len(self._resolvers)} cached)")
        return resolver

    def clear(self) -> None:
        """Drop every cached resolver."""
        with self._lock:
            self._resolvers.clear()

    def __len__(self) -> int:
        return len(self._resolvers)
