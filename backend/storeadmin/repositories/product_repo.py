from typing import List, Optional

from sqlalchemy.orm import Session, joinedload, selectinload

from storeadmin.models.product import Image, Product


class ProductRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, store_id: str, product_id: str, with_options: bool = False) -> Optional[Product]:
        """
        Return the product with its images, scoped to the store.
        `with_options` also eager-loads category, size and color.
        """
        qry = (
            self.db.query(Product)
            .options(selectinload(Product.images))
            .filter(Product.id == product_id, Product.store_id == store_id)
        )
        if with_options:
            qry = qry.options(
                joinedload(Product.category),
                joinedload(Product.size),
                joinedload(Product.color),
            )
        return qry.first()

    def list(
        self,
        store_id: str,
        category_id: Optional[str] = None,
        size_id: Optional[str] = None,
        color_id: Optional[str] = None,
        is_featured: Optional[bool] = None,
        include_archived: bool = True,
    ) -> List[Product]:
        query = (
            self.db.query(Product)
            .options(selectinload(Product.images))
            .filter(Product.store_id == store_id)
        )
        if category_id:
            query = query.filter(Product.category_id == category_id)
        if size_id:
            query = query.filter(Product.size_id == size_id)
        if color_id:
            query = query.filter(Product.color_id == color_id)
        if is_featured is not None:
            query = query.filter(Product.is_featured == is_featured)
        if not include_archived:
            query = query.filter(Product.is_archived == False)
        return query.order_by(Product.created_at.desc(), Product.name).all()

    def create(self, store_id: str, fields: dict, image_urls: List[str]) -> Product:
        p = Product(store_id=store_id, **fields)
        self.db.add(p)
        self.db.flush()
        self.insert_images(p.id, image_urls)
        return p

    def update_and_clear_images(self, product: Product, fields: dict) -> Product:
        """Phase one of an update: write scalar fields and drop every image row."""
        for name, value in fields.items():
            setattr(product, name, value)
        self.db.query(Image).filter(Image.product_id == product.id).delete(
            synchronize_session=False
        )
        self.db.flush()
        return product

    def insert_images(self, product_id: str, image_urls: List[str]) -> List[Image]:
        """Phase two: add image rows in the order given."""
        images = [
            Image(product_id=product_id, url=url, position=pos)
            for pos, url in enumerate(image_urls)
        ]
        self.db.add_all(images)
        self.db.flush()
        return images

    def delete_many(self, store_id: str, product_id: str) -> int:
        """Delete by id within the store; returns the number of rows removed."""
        count = (
            self.db.query(Product)
            .filter(Product.id == product_id, Product.store_id == store_id)
            .delete(synchronize_session=False)
        )
        self.db.flush()
        return count
