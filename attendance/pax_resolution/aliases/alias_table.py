"""Alias table for canonical PAX name lookup.

Maps normalized mention text to the canonical roster name. Lookups are
exact on the normalized string; there is no fuzzy scoring, so any
ambiguity has to be settled by the override table."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from ..core.errors import AliasCollisionError
from ..core.models import RosterEntry
from ..shared.name_utils import normalize_mention, word_count
from .overrides import DEFAULT_ALIAS_OVERRIDES, AliasOverride

logger = logging.getLogger(__name__)


def build_roster_entries(
    roster: Iterable[str | RosterEntry],
    overrides: Sequence[AliasOverride] = DEFAULT_ALIAS_OVERRIDES,
) -> list[RosterEntry]:
    """Turn a roster into RosterEntry objects carrying their override aliases.

    Each name gets its identity alias plus every override whose canonical
    name normalizes to the same key. Overrides pointing at names that are
    not on the roster are ignored. Repeated roster names are merged.

    Args:
        roster: Canonical names, or pre-built entries with extra aliases
        overrides: Override table to apply

    Returns:
        Entries in first-seen roster order
    """
    overrides_by_key: dict[str, list[str]] = {}
    for override in overrides:
        overrides_by_key.setdefault(normalize_mention(override.canonical), []).append(override.mention)

    merged: dict[str, set[str]] = {}
    for item in roster:
        if isinstance(item, RosterEntry):
            canonical = item.canonical_name.strip()
            aliases = set(item.mention_aliases)
        else:
            canonical = item.strip() if item else ""
            aliases = set()

        if not canonical:
            continue

        aliases.add(canonical)
        aliases.update(overrides_by_key.get(normalize_mention(canonical), []))
        merged.setdefault(canonical, set()).update(aliases)

    return [RosterEntry(canonical_name=name, mention_aliases=frozenset(aliases)) for name, aliases in merged.items()]


class AliasTable:
    """Read-only normalized alias -> canonical name index.

    Also records which alias word counts exist, so greedy matching only
    tries window lengths that can possibly hit.
    """

    def __init__(self, entries: Iterable[RosterEntry]):
        """Build the table.

        Args:
            entries: Roster entries to index

        Raises:
            AliasCollisionError: If one normalized alias maps to two canonical names
        """
        self._index: dict[str, str] = {}
        self._canonical_names: list[str] = []
        word_counts: set[int] = set()

        for entry in entries:
            if entry.canonical_name not in self._canonical_names:
                self._canonical_names.append(entry.canonical_name)
            # Sorted so the same roster always produces the same error message
            for alias in sorted(entry.mention_aliases):
                key = normalize_mention(alias)
                if not key:
                    continue
                self._register(key, entry.canonical_name)
                word_counts.add(word_count(key))

        self._window_sizes: tuple[int, ...] = tuple(sorted(word_counts, reverse=True))
        logger.debug(
            f"Built alias table: {len(self._canonical_names)} names, "
            f"{len(self._index)} aliases, window sizes {list(self._window_sizes)}"
        )

    @classmethod
    def from_roster(
        cls,
        roster: Iterable[str | RosterEntry],
        overrides: Sequence[AliasOverride] = DEFAULT_ALIAS_OVERRIDES,
    ) -> AliasTable:
        """Build a table from roster names and an override table"""
        return cls(build_roster_entries(roster, overrides))

    def _register(self, key: str, canonical_name: str) -> None:
        existing = self._index.get(key)
        if existing is None:
            self._index[key] = canonical_name
        elif existing != canonical_name:
            raise AliasCollisionError(key=key, existing=existing, incoming=canonical_name)

    def lookup(self, segment: str) -> str | None:
        """Resolve mention text to a canonical name.

        Returns:
            The canonical name, or None when nothing matches (not an error)
        """
        return self._index.get(normalize_mention(segment))

    def lookup_window(self, tokens: Sequence[str]) -> str | None:
        """Resolve a run of tokens as a single mention"""
        return self.lookup(" ".join(tokens))

    @property
    def window_sizes(self) -> tuple[int, ...]:
        """Distinct alias word counts, largest first"""
        return self._window_sizes

    @property
    def max_words(self) -> int:
        return self._window_sizes[0] if self._window_sizes else 0

    @property
    def canonical_names(self) -> list[str]:
        return list(self._canonical_names)

    def aliases(self) -> dict[str, str]:
        """Copy of the normalized alias index"""
        return dict(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, mention: object) -> bool:
        return isinstance(mention, str) and normalize_mention(mention) in self._index
