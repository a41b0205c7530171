"""PAX resolver - entry point of the name resolution engine.

Runs segmentation, hands the spans to the strategy for the detected
comment mode, and collapses repeated official names. The resolver holds
only read-only state (its alias table), so one instance can be shared
across threads or reused for many comments against the same roster."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .aliases.alias_table import AliasTable
from .aliases.overrides import DEFAULT_ALIAS_OVERRIDES, AliasOverride
from .core.models import CommentMode, PaxRecord, RosterEntry
from .matching import GreedyTokenMatchStrategy, MatchStrategy, MentionMatchStrategy
from .segmentation.segmenter import segment_comment

logger = logging.getLogger(__name__)


def deduplicate_records(records: Iterable[PaxRecord]) -> list[PaxRecord]:
    """Collapse official records that name the same member.

    The first occurrence keeps its position. Unofficial records are all
    kept, even when their text repeats, since two unknown fragments are
    not evidence of the same person.
    """
    seen: set[str] = set()
    result: list[PaxRecord] = []
    for record in records:
        if record.is_official:
            if record.name in seen:
                continue
            seen.add(record.name)  # type: ignore[arg-type]
        result.append(record)
    return result


class PaxResolver:
    """Resolves attendee names in free-text comments against one roster"""

    def __init__(
        self,
        roster: Iterable[str | RosterEntry],
        overrides: Sequence[AliasOverride] = DEFAULT_ALIAS_OVERRIDES,
        skip_role_labels: bool = False,
    ):
        """Initialize the resolver.

        Args:
            roster: Active canonical member names (or entries with aliases)
            overrides: Alias override table
            skip_role_labels: Drop role labels ("Q:", "VQ", "PAX:") and bare
                counts/dates instead of reporting them as unofficial names

        Raises:
            AliasCollisionError: If two members claim the same alias
        """
        self.alias_table = AliasTable.from_roster(roster, overrides)
        self.skip_role_labels = skip_role_labels
        self.strategies: dict[CommentMode, MatchStrategy] = {}
        self.add_strategy(MentionMatchStrategy(skip_role_labels=skip_role_labels))
        self.add_strategy(GreedyTokenMatchStrategy(skip_role_labels=skip_role_labels))

    def add_strategy(self, strategy: MatchStrategy) -> None:
        """Register (or replace) the strategy for a comment mode"""
        self.strategies[strategy.mode] = strategy

    def resolve(self, comment: str) -> list[PaxRecord]:
        """Extract the attendees named in a comment.

        Args:
            comment: Free-form comment text

        Returns:
            Records in order of first appearance, official names deduplicated
        """
        segmentation = segment_comment(comment)
        if segmentation.is_empty:
            return []

        strategy = self.strategies[segmentation.mode]
        raw_records = strategy.match(segmentation.spans, self.alias_table)
        records = deduplicate_records(raw_records)

        logger.debug(
            f"Resolved {len(segmentation.spans)} spans with {strategy.name}: "
            f"{sum(r.is_official for r in records)} official, "
            f"{sum(not r.is_official for r in records)} unofficial, "
            f"{len(raw_records) - len(records)} duplicates collapsed"
        )
        return records


def resolve(
    comment: str,
    roster: Iterable[str | RosterEntry],
    overrides: Sequence[AliasOverride] = DEFAULT_ALIAS_OVERRIDES,
    skip_role_labels: bool = False,
) -> list[PaxRecord]:
    """Resolve a comment against a roster in one call.

    Builds a fresh alias table each time; use PaxResolver directly to reuse
    one table for many comments.
    """
    return PaxResolver(roster, overrides=overrides, skip_role_labels=skip_role_labels).resolve(comment)
