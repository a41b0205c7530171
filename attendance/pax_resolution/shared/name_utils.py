"""Name normalization and tokenizing utilities."""

from __future__ import annotations

import re

# Role labels that precede or trail names in workout posts ("Q: @Peacock PAX: ...")
ROLE_LABELS = frozenset({"q", "q:", "vq", "vq:", "co-q", "co-q:", "pax", "pax:", "-"})

# Counts and dates written inline ("PAX: 15", "1.25.23", "1/25")
_NUMERIC_TOKEN = re.compile(r"^[\d.,/:\-]+$")


def normalize_mention(text: str) -> str:
    """Normalize text for alias lookup.

    1. Strip leading/trailing whitespace
    2. Collapse internal whitespace runs into single spaces
    3. Convert to lowercase

    Punctuation is preserved: "Mr. Meaner" and "Glitch (2.0)" keep their
    periods and parentheses, so the override table decides what matches.

    Examples:
        "  Mani   Pedi " -> "mani pedi"
        "Mr.\\nMeaner" -> "mr. meaner"
    """
    return " ".join(text.split()).lower()


def tokenize_comment(comment: str) -> list[str]:
    """Split a comment into maximal runs of non-whitespace characters.

    Periods, hyphens and apostrophes stay attached to their word.

    Examples:
        "Mr. Meaner Dead End" -> ["Mr.", "Meaner", "Dead", "End"]
        "SweatShop - Hernan C" -> ["SweatShop", "-", "Hernan", "C"]
    """
    return comment.split()


def word_count(text: str) -> int:
    """Number of whitespace-separated words in text"""
    return len(text.split())


def is_noise_token(token: str) -> bool:
    """Check if a token is a role label or a bare count/date.

    Examples:
        "PAX:" -> True
        "1.25.23" -> True
        "Peacock" -> False
    """
    lowered = token.strip().lower()
    if not lowered:
        return True
    return lowered in ROLE_LABELS or bool(_NUMERIC_TOKEN.match(lowered))
