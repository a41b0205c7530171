"""Mention-mode matching.

Each "@" segment already has fixed boundaries, so it is looked up whole
and never split further."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ...logging_config import TRACE
from ..aliases.alias_table import AliasTable
from ..core.models import CommentMode, PaxRecord
from ..shared.name_utils import is_noise_token
from .interfaces import MatchStrategy

logger = logging.getLogger(__name__)


class MentionMatchStrategy(MatchStrategy):
    """Look up each "@" segment as a single mention"""

    @property
    def mode(self) -> CommentMode:
        return CommentMode.MENTION

    @property
    def name(self) -> str:
        return "mention_match"

    def match(self, spans: Sequence[str], table: AliasTable) -> list[PaxRecord]:
        records: list[PaxRecord] = []
        for segment in spans:
            canonical = table.lookup(segment)
            if canonical is None and self.skip_role_labels:
                canonical = self._lookup_without_trailing_labels(segment, table)

            logger.log(TRACE, f"Mention '{segment}' -> {canonical!r}")
            if canonical is not None:
                records.append(PaxRecord.official(canonical))
            else:
                records.append(PaxRecord.unofficial(segment))
        return records

    def _lookup_without_trailing_labels(self, segment: str, table: AliasTable) -> str | None:
        """Retry a missed segment with trailing role labels and counts removed.

        "Peacock PAX:" -> "Peacock", "Switch\\nPAX: 15" -> "Switch"
        """
        words = segment.split()
        while words and is_noise_token(words[-1]):
            words.pop()
        if not words or len(words) == len(segment.split()):
            return None
        return table.lookup_window(words)
