from typing import List, Optional

from sqlalchemy.orm import Session

from storeadmin.models.options import Category, Color, Size
from storeadmin.models.store import Store


class StoreRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_owned(self, store_id: str, user_id: str) -> Optional[Store]:
        return (
            self.db.query(Store)
            .filter(Store.id == store_id, Store.user_id == user_id)
            .first()
        )

    def list_for_user(self, user_id: str) -> List[Store]:
        return (
            self.db.query(Store)
            .filter(Store.user_id == user_id)
            .order_by(Store.created_at, Store.name)
            .all()
        )

    def create(self, user_id: str, name: str) -> Store:
        s = Store(user_id=user_id, name=name)
        self.db.add(s)
        self.db.flush()
        return s

    def options(self, store_id: str) -> dict:
        """Categories, sizes and colors of a store, by name."""
        return {
            "categories": self.db.query(Category)
            .filter(Category.store_id == store_id)
            .order_by(Category.name)
            .all(),
            "sizes": self.db.query(Size)
            .filter(Size.store_id == store_id)
            .order_by(Size.name)
            .all(),
            "colors": self.db.query(Color)
            .filter(Color.store_id == store_id)
            .order_by(Color.name)
            .all(),
        }

    def option_belongs(self, model, option_id: str, store_id: str) -> bool:
        return (
            self.db.query(model.id)
            .filter(model.id == option_id, model.store_id == store_id)
            .first()
            is not None
        )
