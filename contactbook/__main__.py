"""Open the contact database and report whether it is usable."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from contactbook.store import ContactStore


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="contactbook", description="Open the contact database")
    parser.add_argument("--db-path", type=str, help="Override database path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        store = ContactStore.open(path=args.db_path)
    except Exception as e:
        print(f"database error: {e}", file=sys.stderr)
        return 1

    print("database connected.")
    store.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
