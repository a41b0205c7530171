"""Hand-maintained alias overrides.

Each override maps a mention form seen in posts to the canonical name
stored on the roster. An override only takes effect when its canonical
name is on the roster being resolved against."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OverrideKind(Enum):
    """Families of special-case aliases"""

    SPACING = "spacing"  # "Top40" -> "Top 40", "Hill Billy" -> "Hillbilly"
    SPELLING = "spelling"  # "Linguine" -> "Linguini"
    NUMERAL = "numeral"  # "2.0Glitch" -> "Glitch (2.0)"
    PASS_THROUGH = "pass_through"  # "Mr. Meaner" stays "Mr. Meaner"


@dataclass(frozen=True)
class AliasOverride:
    """A single mention -> canonical mapping"""

    mention: str
    canonical: str
    kind: OverrideKind = OverrideKind.SPELLING

    def to_dict(self) -> dict[str, str]:
        return {"mention": self.mention, "canonical": self.canonical, "kind": self.kind.value}


DEFAULT_ALIAS_OVERRIDES: tuple[AliasOverride, ...] = (
    # Whitespace / casing equivalence
    AliasOverride("Top40", "Top 40", OverrideKind.SPACING),
    AliasOverride("Hill Billy", "Hillbilly", OverrideKind.SPACING),
    AliasOverride("Heat Check", "HeatCheck", OverrideKind.SPACING),
    AliasOverride("Sofa King", "SofaKing", OverrideKind.SPACING),
    AliasOverride("Tra La La", "TraLaLa", OverrideKind.SPACING),
    # Spelling variants
    AliasOverride("Mani Pedi", "Manny Pedi", OverrideKind.SPELLING),
    AliasOverride("Linguine", "Linguini", OverrideKind.SPELLING),
    AliasOverride("Spread’em", "Spread'em", OverrideKind.SPELLING),
    AliasOverride("Spreadem", "Spread'em", OverrideKind.SPELLING),
    AliasOverride("Baskins", "Baskinz", OverrideKind.SPELLING),
    # Inline numerals that the roster keeps parenthesized
    AliasOverride("2.0Glitch", "Glitch (2.0)", OverrideKind.NUMERAL),
    AliasOverride("Glitch 2.0", "Glitch (2.0)", OverrideKind.NUMERAL),
    AliasOverride("Glitch2.0", "Glitch (2.0)", OverrideKind.NUMERAL),
    # Punctuated or multi-word names that must match as one unit
    AliasOverride("Mr. Meaner", "Mr. Meaner", OverrideKind.PASS_THROUGH),
    AliasOverride("Slug Bug", "Slug Bug", OverrideKind.PASS_THROUGH),
    AliasOverride("SweatShop - Hernan C", "SweatShop - Hernan C", OverrideKind.PASS_THROUGH),
)
