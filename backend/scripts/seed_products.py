#!/usr/bin/env python3
"""
Insert sample products named "Product 0" .. "Product N-1".

Product i gets price (i + 1) * 10, so ordering by name and by price agree.

Usage:
    python scripts/seed_products.py --count 5 --reset
"""
import argparse
import logging
import os
import sys

# allow running from repo/scripts
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.config import settings
from app.db import Database
from app.repositories.product_repo import ProductRepository

log = logging.getLogger("seed_products")


def seed(database: Database, count: int, reset: bool = False) -> int:
    database.init_db()
    if reset:
        database.clear_products()
    db = database.session()
    try:
        repo = ProductRepository(db)
        for i in range(count):
            repo.create(f"Product {i}", (i + 1) * 10)
    finally:
        db.close()
    return count


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--count", type=int, default=5, help="number of products")
    parser.add_argument(
        "--reset", action="store_true", help="delete existing products first"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL)
    database = Database(settings.database_url)
    try:
        created = seed(database, max(args.count, 0), reset=args.reset)
    finally:
        database.dispose()
    log.info("Seeded %d products.", created)


if __name__ == "__main__":
    main()
