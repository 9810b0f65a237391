# scripts/seed_database.py
import sys
import json
import logging
import argparse
from src.database import create_db_and_tables, engine
from src.seed import reset_database


def main():
    # Set up argument parser
    parser = argparse.ArgumentParser(
        description="Delete every author (and book) and load the demo dataset."
    )
    parser.add_argument(
        "--keep-books",
        action="store_true",
        help="Only delete authors; existing books are left in place",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    create_db_and_tables()

    result = reset_database(engine, keep_books=args.keep_books)
    if result is None:
        print(json.dumps({"error": "Seeding failed, see log output"}, indent=2))
        sys.exit(1)
    print(json.dumps(result.to_dict(), indent=2))


if __name__ == "__main__":
    main()
