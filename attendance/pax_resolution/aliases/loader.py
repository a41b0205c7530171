"""Load extra alias overrides from a JSON file.

Fast-fail: a missing file, invalid JSON, or a malformed entry raises
AliasConfigError instead of being skipped.

File format:
    [
        {"mention": "Top40", "canonical": "Top 40", "kind": "spacing"},
        {"mention": "Linguine", "canonical": "Linguini"}
    ]
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..core.errors import AliasConfigError
from .overrides import AliasOverride, OverrideKind

logger = logging.getLogger(__name__)


def parse_alias_overrides(data: Any, source: str = "<memory>") -> list[AliasOverride]:
    """Convert decoded JSON into AliasOverride entries.

    Args:
        data: Decoded JSON (expected: list of objects)
        source: Label used in error messages

    Returns:
        Parsed overrides in file order

    Raises:
        AliasConfigError: If the structure or any entry is invalid
    """
    if not isinstance(data, list):
        raise AliasConfigError(f"{source}: expected a list of overrides, got {type(data).__name__}")

    overrides: list[AliasOverride] = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise AliasConfigError(f"{source}[{index}]: expected an object, got {type(entry).__name__}")

        mention = entry.get("mention")
        canonical = entry.get("canonical")
        if not isinstance(mention, str) or not mention.strip():
            raise AliasConfigError(f"{source}[{index}]: 'mention' must be a non-empty string")
        if not isinstance(canonical, str) or not canonical.strip():
            raise AliasConfigError(f"{source}[{index}]: 'canonical' must be a non-empty string")

        kind_value = entry.get("kind", OverrideKind.SPELLING.value)
        try:
            kind = OverrideKind(kind_value)
        except ValueError as e:
            valid = ", ".join(k.value for k in OverrideKind)
            raise AliasConfigError(f"{source}[{index}]: unknown kind '{kind_value}' (expected one of: {valid})") from e

        overrides.append(AliasOverride(mention=mention, canonical=canonical, kind=kind))

    return overrides


def load_alias_overrides(path: str | Path) -> list[AliasOverride]:
    """Read alias overrides from a JSON file.

    Raises:
        AliasConfigError: If the file cannot be read or parsed
    """
    file_path = Path(path)
    try:
        raw = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise AliasConfigError(f"Cannot read alias overrides file {file_path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise AliasConfigError(f"Invalid JSON in alias overrides file {file_path}: {e}") from e

    overrides = parse_alias_overrides(data, source=str(file_path))
    logger.info(f"Loaded {len(overrides)} alias overrides from {file_path}")
    return overrides
