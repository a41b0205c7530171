"""Error classes for PAX name resolution.

Only configuration problems are errors; a name that does not match
anything is a normal outcome and is reported as an unofficial record.
"""

from __future__ import annotations


class PaxResolutionError(Exception):
    """Base exception for PAX resolution errors."""

    pass


class AliasCollisionError(PaxResolutionError):
    """Raised when two canonical names claim the same normalized alias."""

    def __init__(self, key: str, existing: str, incoming: str):
        self.key = key
        self.existing = existing
        self.incoming = incoming
        super().__init__(f"Alias '{key}' maps to both '{existing}' and '{incoming}'")


class AliasConfigError(PaxResolutionError):
    """Raised when an alias override source cannot be loaded or is malformed."""

    pass
