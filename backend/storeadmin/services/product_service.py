from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from storeadmin.config import settings
from storeadmin.models.options import Category, Color, Size
from storeadmin.models.product import Product
from storeadmin.repositories.product_repo import ProductRepository
from storeadmin.repositories.store_repo import StoreRepository
from storeadmin.services.auth_gate import AuthorizationGate
from storeadmin.services.exceptions import NotFound, ValidationError
from storeadmin.utils.logs import get_logger
from storeadmin.utils.transactions import atomic

log = get_logger("storeadmin.products", "PRODUCTS")

# (body key, message) in the order they are checked
REQUIRED_FIELDS = [
    ("name", "Name is required"),
    ("image", "Images are required"),
    ("price", "Price is required"),
    ("categoryId", "Category id is required"),
    ("colorId", "Color id is required"),
    ("sizeId", "Size id is required"),
]

PRICE_DIGITS = 8

OPTION_MODELS = [
    ("categoryId", Category, "Category not found in store"),
    ("sizeId", Size, "Size not found in store"),
    ("colorId", Color, "Color not found in store"),
]


class ProductService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = ProductRepository(db)
        self.store_repo = StoreRepository(db)
        self.gate = AuthorizationGate(db)

    # --- reads ---

    def get(self, store_id: str, product_id: str, user_id: Optional[str] = None) -> Optional[Product]:
        if not product_id:
            raise ValidationError("Product Id is required")
        if settings.REQUIRE_AUTH_FOR_READS:
            self.gate.require_store_owner(user_id, store_id)
        return self.repo.get(store_id, product_id, with_options=True)

    def list(self, store_id: str, **filters) -> List[Product]:
        return self.repo.list(store_id, **filters)

    # --- writes ---

    def _check_body(self, body: dict) -> Tuple[dict, List[str]]:
        """
        Falsy values count as missing, so a price of 0 is "Price is required".
        Returns (scalar fields, image urls).
        """
        for key, message in REQUIRED_FIELDS:
            value = body.get(key)
            if not value:
                raise ValidationError(message)

        images = body["image"]
        if not isinstance(images, list):
            raise ValidationError("Images are required")
        urls = []
        for img in images:
            url = img.get("url") if isinstance(img, dict) else None
            if not url or not isinstance(url, str):
                raise ValidationError("Image url is required")
            urls.append(url)

        try:
            price = Decimal(str(body["price"]))
        except InvalidOperation:
            raise ValidationError("Price must be a number")
        if not price.is_finite():
            raise ValidationError("Price must be a number")
        # Numeric(10, 2) holds at most PRICE_DIGITS integer digits; rounding can carry over
        if price.adjusted() >= PRICE_DIGITS:
            raise ValidationError("Price must be a number")
        price = price.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        if price.adjusted() >= PRICE_DIGITS:
            raise ValidationError("Price must be a number")
        if price < 1:
            raise ValidationError("Price must be at least 1")

        fields = {
            "name": str(body["name"]),
            "price": price,
            "category_id": str(body["categoryId"]),
            "size_id": str(body["sizeId"]),
            "color_id": str(body["colorId"]),
        }
        for key, attr in (("isFeatured", "is_featured"), ("isArchived", "is_archived")):
            value = body.get(key)
            if value is None:
                continue
            if not isinstance(value, bool):
                raise ValidationError(f"{key} must be a boolean")
            fields[attr] = value
        return fields, urls

    def _check_options(self, store_id: str, body: dict):
        for key, model, message in OPTION_MODELS:
            if not self.store_repo.option_belongs(model, str(body[key]), store_id):
                raise ValidationError(message)

    def create(self, user_id: Optional[str], store_id: str, body: dict) -> Product:
        self.gate.require_identity(user_id)
        fields, urls = self._check_body(body)
        self.gate.require_store_owner(user_id, store_id)
        self._check_options(store_id, body)

        with atomic(self.db):
            product = self.repo.create(store_id, fields, urls)
        log.info(f"created product id={product.id} store={store_id} images={len(urls)}")
        return product

    def update(self, user_id: Optional[str], store_id: str, product_id: str, body: dict) -> Product:
        """
        Received -> Validated -> Authorized -> Updated(scalars, images cleared)
        -> ImagesInserted -> Responded. Both storage phases share one
        transaction, so a failure in between leaves the product untouched.
        """
        self.gate.require_identity(user_id)
        fields, urls = self._check_body(body)
        if not product_id:
            raise ValidationError("Product Id is required")
        self.gate.require_store_owner(user_id, store_id)
        self._check_options(store_id, body)

        product = self.repo.get(store_id, product_id)
        if not product:
            raise NotFound("Product not found")

        with atomic(self.db):
            self.repo.update_and_clear_images(product, fields)
            self.repo.insert_images(product.id, urls)
        log.info(f"updated product id={product_id} store={store_id} images={len(urls)}")
        return product

    def delete(self, user_id: Optional[str], store_id: str, product_id: str) -> dict:
        """Delete-many semantics: an absent id is a successful zero count."""
        self.gate.require_identity(user_id)
        if not product_id:
            raise ValidationError("Product Id is required")
        self.gate.require_store_owner(user_id, store_id)

        with atomic(self.db):
            count = self.repo.delete_many(store_id, product_id)
        log.info(f"deleted product id={product_id} store={store_id} count={count}")
        return {"count": count}
