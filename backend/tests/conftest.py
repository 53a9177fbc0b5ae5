import os

# point the app at a throwaway database before storeadmin.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite:///./test_storeadmin.db")

import pytest

from storeadmin.db import SessionLocal, init_db
from storeadmin.models.options import Category, Color, Size
from storeadmin.models.store import Store

OWNER = "user_owner"
OTHER = "user_other"


@pytest.fixture(autouse=True)
def fresh_db():
    init_db(reset=True)
    yield


@pytest.fixture
def seeded():
    """Two stores, each with one category, size and color."""
    db = SessionLocal()
    try:
        ids = {}
        for key, user in (("own", OWNER), ("other", OTHER)):
            s = Store(name=f"{key} store", user_id=user)
            db.add(s)
            db.flush()
            c = Category(store_id=s.id, name="Tops")
            sz = Size(store_id=s.id, name="Medium", value="M")
            co = Color(store_id=s.id, name="Red", value="#ff0000")
            db.add_all([c, sz, co])
            db.flush()
            ids[key] = {
                "store_id": s.id,
                "category_id": c.id,
                "size_id": sz.id,
                "color_id": co.id,
            }
        db.commit()
        return ids
    finally:
        db.close()


def product_body(opts, **overrides):
    body = {
        "name": "Blue Shirt",
        "price": 19.99,
        "categoryId": opts["category_id"],
        "sizeId": opts["size_id"],
        "colorId": opts["color_id"],
        "image": [{"url": "https://img.example/1.png"}, {"url": "https://img.example/2.png"}],
        "isFeatured": False,
        "isArchived": False,
    }
    body.update(overrides)
    return body
