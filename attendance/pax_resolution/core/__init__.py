"""Core models and errors for PAX name resolution."""

from __future__ import annotations

from .errors import AliasCollisionError, AliasConfigError, PaxResolutionError
from .models import CommentMode, PaxRecord, RosterEntry, Segmentation

__all__ = [
    "AliasCollisionError",
    "AliasConfigError",
    "CommentMode",
    "PaxRecord",
    "PaxResolutionError",
    "RosterEntry",
    "Segmentation",
]
