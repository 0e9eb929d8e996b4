"""Ledger database management CLI.

Creates and drops the database schema of the ledger domain, and loads the
demo data set.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Load demo warehouses and items
"""

import argparse
import sys


def setup_database():
    """Create the database schema for the ledger domain."""
    from ledger.domain import ledger
    from ledger.utils.db import setup_db

    print("Initializing ledger domain...")
    ledger.init()
    print("Creating ledger database schema...")
    setup_db(ledger)
    print("Done.")


def drop_database():
    """Drop the database schema of the ledger domain."""
    from ledger.domain import ledger
    from ledger.utils.db import drop_db

    print("Initializing ledger domain...")
    ledger.init()
    print("Dropping ledger database schema...")
    drop_db(ledger)
    print("Done.")


def seed_database():
    """Load the demo data set into an empty ledger."""
    from ledger.domain import ledger
    from ledger.utils.seed import seed_demo_data

    ledger.init()
    with ledger.domain_context():
        loaded = seed_demo_data()
    print("Demo data loaded." if loaded else "Ledger already contains data. Skipping.")


def main():
    parser = argparse.ArgumentParser(description="Ledger database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Load demo warehouses and items")

    args = parser.parse_args()

    from ledger.utils.logging import configure_logging

    configure_logging()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
