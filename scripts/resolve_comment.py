#!/usr/bin/env python3
"""
Resolve the PAX named in a workout comment from the command line.

Examples:
    scripts/resolve_comment.py --roster-file roster.txt "@Peacock @Mani Pedi"
    pbpaste | scripts/resolve_comment.py --roster-file roster.txt --json
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from attendance.logging_config import configure_logging, parse_level
from attendance.pax_resolution import (
    DEFAULT_ALIAS_OVERRIDES,
    PaxRecord,
    PaxResolutionError,
    PaxResolver,
    load_alias_overrides,
)
from attendance.roster import active_roster

logger = logging.getLogger(__name__)

EXIT_CONFIG_ERROR = 2


def read_roster(path: Path) -> list[str]:
    """Read one roster name per line and drop excluded/blank/duplicate names."""
    return active_roster(path.read_text(encoding="utf-8").splitlines())


def format_records(records: list[PaxRecord], as_json: bool = False) -> str:
    """Render records as JSON or as an aligned text table."""
    if as_json:
        return json.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False)

    lines = []
    for record in records:
        status = "official" if record.is_official else "UNKNOWN"
        lines.append(f"{status:10} {record.display_name}")
    official = sum(1 for r in records if r.is_official)
    lines.append(f"{'TOTAL':10} {official} official, {len(records) - official} unofficial")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Resolve PAX names in a workout comment")
    parser.add_argument("comment", nargs="?", help="Comment text (read from stdin when omitted)")
    parser.add_argument("--roster-file", type=Path, required=True, help="Roster file, one name per line")
    parser.add_argument(
        "--overrides-file",
        type=Path,
        default=None,
        help="Extra alias overrides JSON (default: $ALIAS_OVERRIDES_FILE)",
    )
    parser.add_argument("--skip-role-labels", action="store_true", help="Ignore Q:/VQ/PAX: labels and bare numbers")
    parser.add_argument("--json", action="store_true", help="Print records as JSON")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    # Logs share stdout with the output, so stay quiet unless asked
    level = logging.DEBUG if args.debug else parse_level(os.getenv("LOG_LEVEL"), default=logging.WARNING)
    configure_logging(source="cli", level=level)

    comment = args.comment if args.comment is not None else sys.stdin.read()
    overrides_file = args.overrides_file or os.getenv("ALIAS_OVERRIDES_FILE") or None

    try:
        overrides = list(DEFAULT_ALIAS_OVERRIDES)
        if overrides_file:
            overrides.extend(load_alias_overrides(overrides_file))
        roster = read_roster(args.roster_file)
        logger.debug(f"Loaded {len(roster)} active roster names from {args.roster_file}")
        resolver = PaxResolver(roster, overrides=overrides, skip_role_labels=args.skip_role_labels)
    except OSError as e:
        print(f"ERROR: Cannot read roster file: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except PaxResolutionError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    records = resolver.resolve(comment)
    print(format_records(records, as_json=args.json))
    return 0


if __name__ == "__main__":
    sys.exit(main())
