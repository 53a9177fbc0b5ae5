#!/usr/bin/env python3
"""
Seed a store with categories, sizes and colors for a given owner, so the
product form has options to pick from.

Usage:
    python scripts/seed_store.py --user user_123 --name "Kids Wear"
"""
import argparse
import os
import sys

# allow running from repo/scripts
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from storeadmin.db import SessionLocal, init_db
from storeadmin.models.options import Category, Color, Size
from storeadmin.repositories.store_repo import StoreRepository
from storeadmin.utils.transactions import atomic

DEFAULT_CATEGORIES = ["Tops", "Bottoms", "Shoes"]
DEFAULT_SIZES = [("Small", "S"), ("Medium", "M"), ("Large", "L")]
DEFAULT_COLORS = [("Black", "#000000"), ("White", "#ffffff"), ("Red", "#ff0000")]


def seed(user_id: str, name: str) -> str:
    db = SessionLocal()
    try:
        with atomic(db):
            store = StoreRepository(db).create(user_id, name)
            for cat in DEFAULT_CATEGORIES:
                db.add(Category(store_id=store.id, name=cat))
            for size_name, value in DEFAULT_SIZES:
                db.add(Size(store_id=store.id, name=size_name, value=value))
            for color_name, value in DEFAULT_COLORS:
                db.add(Color(store_id=store.id, name=color_name, value=value))
        return store.id
    finally:
        db.close()


def main():
    parser = argparse.ArgumentParser(description="Seed a store for the admin dashboard")
    parser.add_argument("--user", required=True, help="owning identity (user id)")
    parser.add_argument("--name", default="My Store", help="store name")
    parser.add_argument("--reset", action="store_true", help="drop and recreate tables first")
    args = parser.parse_args()

    init_db(reset=args.reset)
    store_id = seed(args.user, args.name)
    print(f"Seeded store {store_id} for user {args.user}")


if __name__ == "__main__":
    main()
