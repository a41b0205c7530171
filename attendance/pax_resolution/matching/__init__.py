"""Matching strategies for turning comment spans into PAX records."""

from __future__ import annotations

from .greedy_match import GreedyTokenMatchStrategy
from .interfaces import MatchStrategy
from .mention_match import MentionMatchStrategy

__all__ = [
    "GreedyTokenMatchStrategy",
    "MatchStrategy",
    "MentionMatchStrategy",
]
