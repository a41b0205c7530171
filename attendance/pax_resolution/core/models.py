"""Core domain models for PAX name resolution.

These models are built fresh for every resolution call and are never
mutated afterwards."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CommentMode(Enum):
    """How a comment delimits names"""

    MENTION = "mention"  # names are introduced by "@"
    PLAIN = "plain"  # whitespace-separated, no explicit boundaries


@dataclass(frozen=True)
class RosterEntry:
    """A known member and every text form accepted for them.

    Attributes:
        canonical_name: Identity used everywhere else (e.g. sheet writes)
        mention_aliases: Raw alias strings; matched case-insensitively
    """

    canonical_name: str
    mention_aliases: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not self.mention_aliases:
            object.__setattr__(self, "mention_aliases", frozenset({self.canonical_name}))

    @classmethod
    def from_name(cls, canonical_name: str) -> RosterEntry:
        """Entry whose only alias is the canonical name itself"""
        return cls(canonical_name=canonical_name, mention_aliases=frozenset({canonical_name}))


@dataclass(frozen=True)
class PaxRecord:
    """One resolved attendee.

    Official records carry the canonical roster name in ``name``;
    unofficial records carry the raw trimmed text in ``unknown_name``.
    """

    is_official: bool
    name: str | None = None
    unknown_name: str | None = None

    def __post_init__(self) -> None:
        if self.is_official and (not self.name or self.unknown_name is not None):
            raise ValueError("Official record requires a canonical name and no unknown_name")
        if not self.is_official and (not self.unknown_name or self.name is not None):
            raise ValueError("Unofficial record requires unknown_name and no canonical name")

    @classmethod
    def official(cls, canonical_name: str) -> PaxRecord:
        return cls(is_official=True, name=canonical_name)

    @classmethod
    def unofficial(cls, raw_text: str) -> PaxRecord:
        return cls(is_official=False, unknown_name=raw_text)

    @property
    def display_name(self) -> str:
        """Name to show a human, official or not"""
        return self.name if self.is_official else self.unknown_name  # type: ignore[return-value]

    def to_dict(self) -> dict[str, object]:
        return {
            "is_official": self.is_official,
            "name": self.name,
            "unknown_name": self.unknown_name,
        }


@dataclass(frozen=True)
class Segmentation:
    """Ordered candidate spans of a comment plus the mode that produced them.

    In mention mode each span is a trimmed "@" segment; in plain mode each
    span is a single whitespace-delimited token.
    """

    mode: CommentMode
    spans: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.spans
