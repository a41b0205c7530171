"""Plain-mode matching by greedy longest match.

Without "@" delimiters there is no way to know how many words a name
spans. At each cursor position the longest alias window that exists in
the table is tried first, so a two-word name such as "Mani Pedi" is not
split into two unknown single words."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ...logging_config import TRACE
from ..aliases.alias_table import AliasTable
from ..core.models import CommentMode, PaxRecord
from ..shared.name_utils import is_noise_token
from .interfaces import MatchStrategy

logger = logging.getLogger(__name__)


class GreedyTokenMatchStrategy(MatchStrategy):
    """Longest-first window matching over a token stream"""

    @property
    def mode(self) -> CommentMode:
        return CommentMode.PLAIN

    @property
    def name(self) -> str:
        return "greedy_token_match"

    def match(self, spans: Sequence[str], table: AliasTable) -> list[PaxRecord]:
        tokens = list(spans)
        records: list[PaxRecord] = []
        cursor = 0

        while cursor < len(tokens):
            size, canonical = self._longest_match_at(tokens, cursor, table)
            if canonical is not None:
                records.append(PaxRecord.official(canonical))
                cursor += size
                continue

            token = tokens[cursor]
            if self.skip_role_labels and is_noise_token(token):
                logger.log(TRACE, f"Skipping label/number token '{token}'")
            else:
                # Unmatched tokens are never merged: the length of an unknown name is unknowable
                records.append(PaxRecord.unofficial(token))
            cursor += 1

        return records

    def _longest_match_at(self, tokens: list[str], cursor: int, table: AliasTable) -> tuple[int, str | None]:
        """Find the longest alias window starting at cursor.

        Returns:
            (window size, canonical name), or (1, None) when nothing matches
        """
        remaining = len(tokens) - cursor
        for size in table.window_sizes:
            if size > remaining:
                continue
            window = tokens[cursor : cursor + size]
            canonical = table.lookup_window(window)
            logger.log(TRACE, f"Window {window} -> {canonical!r}")
            if canonical is not None:
                return size, canonical
        return 1, None
