"""Shared utilities module."""

from __future__ import annotations

from .name_utils import ROLE_LABELS, is_noise_token, normalize_mention, tokenize_comment, word_count

__all__ = [
    "ROLE_LABELS",
    "is_noise_token",
    "normalize_mention",
    "tokenize_comment",
    "word_count",
]
