"""Comment segmentation."""

from __future__ import annotations

from .segmenter import MENTION_MARKER, detect_mode, segment_comment, split_mentions

__all__ = [
    "MENTION_MARKER",
    "detect_mode",
    "segment_comment",
    "split_mentions",
]
