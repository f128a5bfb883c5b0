"""Zen Cafe database management CLI.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py check-db   # Exit non-zero if a provider is unreachable
"""

import argparse
import sys


def setup_database():
    from zencafe import elements  # noqa: F401
    from zencafe.domain import zencafe
    from zencafe.utils.db import setup_db

    print("Initializing zencafe domain...")
    zencafe.init()
    print("Creating database schema...")
    setup_db(zencafe)
    print("Done.")


def drop_database():
    from zencafe import elements  # noqa: F401
    from zencafe.domain import zencafe
    from zencafe.utils.db import drop_db

    print("Initializing zencafe domain...")
    zencafe.init()
    print("Dropping database schema...")
    drop_db(zencafe)
    print("Done.")


def check_database() -> bool:
    from zencafe import elements  # noqa: F401
    from zencafe.domain import zencafe
    from zencafe.utils.db import DatabaseUnavailableError, check_db

    zencafe.init()
    try:
        check_db(zencafe)
    except DatabaseUnavailableError as exc:
        print(f"Database check failed: {exc}", file=sys.stderr)
        return False
    print("Database is reachable.")
    return True


def main():
    parser = argparse.ArgumentParser(description="Zen Cafe database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("check-db", help="Verify every configured database is reachable")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "check-db":
        if not check_database():
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
