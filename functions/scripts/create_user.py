"""
CLI helper to validate and store a user record.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from userbase.config import get_settings
from userbase.dependencies import get_db_client
from userbase.validation import ValidationError, validate_user_name


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a user record")
    parser.add_argument("name", help="Display name for the new user")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate and print the normalized name without storing it",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_settings().log_level.upper())

    try:
        name = validate_user_name(args.name)
    except ValidationError as e:
        print(json.dumps(e.as_dict()), file=sys.stderr)
        return 2

    if args.dry_run:
        print(name)
        return 0

    record = get_db_client().create_user(name)
    print(json.dumps(record.as_dict()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
