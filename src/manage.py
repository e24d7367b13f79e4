"""Storefront database management CLI.

Usage:
    python src/manage.py setup-db       # Create all tables
    python src/manage.py drop-db        # Drop all tables
    python src/manage.py seed-catalog   # Insert sample products into an empty catalog
"""

import argparse
import sys


def _storefront():
    from storefront.domain import storefront

    print("Initializing storefront domain...")
    storefront.init()
    return storefront


def setup_database():
    from storefront.utils.db import setup_db

    domain = _storefront()
    print("Creating storefront database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    from storefront.utils.db import drop_db

    domain = _storefront()
    print("Dropping storefront database schema...")
    drop_db(domain)
    print("Done.")


def seed_catalog():
    from storefront.catalog.seed import seed_sample_products

    domain = _storefront()
    with domain.domain_context():
        inserted = seed_sample_products()
    print(f"Inserted {inserted} sample product(s).")


def main():
    parser = argparse.ArgumentParser(description="Storefront database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed-catalog", help="Insert sample products when the catalog is empty")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed-catalog":
        seed_catalog()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
