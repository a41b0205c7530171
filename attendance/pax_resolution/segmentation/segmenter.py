"""Comment segmentation.

Decides whether a comment is in mention mode ("@" delimited) or plain
mode (whitespace delimited) and produces the ordered candidate spans."""

from __future__ import annotations

import logging

from ..core.models import CommentMode, Segmentation
from ..shared.name_utils import tokenize_comment

logger = logging.getLogger(__name__)

MENTION_MARKER = "@"


def detect_mode(comment: str) -> CommentMode:
    """Mention mode if the comment contains any "@", plain mode otherwise.

    The whole comment is scanned once; modes are never mixed per line.
    """
    return CommentMode.MENTION if MENTION_MARKER in comment else CommentMode.PLAIN


def split_mentions(comment: str) -> list[str]:
    """Split a mention-mode comment into trimmed "@" segments.

    Text before the first "@" is header noise (dates, "PAX:", role labels)
    and is discarded. Each segment runs up to the next "@" or the end of
    the comment. Segments that are empty after trimming are dropped.

    Trailing punctuation is kept: "@Peacock," yields "Peacock,".

    Examples:
        "Denali 1.25.23 @Herbie @Happy Tree" -> ["Herbie", "Happy Tree"]
        "@Peacock @ @Clark" -> ["Peacock", "Clark"]
    """
    _header, _, body = comment.partition(MENTION_MARKER)
    segments = [part.strip() for part in body.split(MENTION_MARKER)]
    return [segment for segment in segments if segment]


def segment_comment(comment: str) -> Segmentation:
    """Choose the comment mode and produce its candidate spans.

    Args:
        comment: Raw comment text

    Returns:
        Segmentation with mention segments or plain tokens, in comment order
    """
    if not comment or not comment.strip():
        return Segmentation(mode=CommentMode.PLAIN)

    mode = detect_mode(comment)
    if mode is CommentMode.MENTION:
        spans = split_mentions(comment)
    else:
        spans = tokenize_comment(comment)

    logger.debug(f"Segmented comment in {mode.value} mode into {len(spans)} spans")
    return Segmentation(mode=mode, spans=tuple(spans))
