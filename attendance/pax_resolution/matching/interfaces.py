"""Interfaces for the matching stage.

A match strategy turns the spans of one comment mode into PaxRecords."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..aliases.alias_table import AliasTable
from ..core.models import CommentMode, PaxRecord


class MatchStrategy(ABC):
    """Base class for span matching strategies"""

    def __init__(self, skip_role_labels: bool = False):
        """Initialize the strategy.

        Args:
            skip_role_labels: Drop role labels and bare counts/dates instead
                of reporting them as unofficial names
        """
        self.skip_role_labels = skip_role_labels

    @property
    @abstractmethod
    def mode(self) -> CommentMode:
        """Comment mode this strategy handles"""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Strategy name for logging and debugging"""
        pass

    @abstractmethod
    def match(self, spans: Sequence[str], table: AliasTable) -> list[PaxRecord]:
        """Match spans against the alias table.

        Args:
            spans: Candidate spans in comment order
            table: Alias table built from the roster

        Returns:
            Raw records in comment order, not yet deduplicated
        """
        pass
