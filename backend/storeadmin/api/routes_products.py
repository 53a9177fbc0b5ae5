from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from storeadmin.api.identity import get_current_user_id
from storeadmin.db import get_db
from storeadmin.schemas.product_schema import ProductDetailOut, ProductOut, dump
from storeadmin.services.exceptions import StoreAdminError
from storeadmin.services.product_service import ProductService
from storeadmin.utils.logs import get_logger

router = APIRouter(prefix="/api/{store_id}/products", tags=["products"])

log = get_logger("storeadmin.api.products", "API")


async def json_object_body(request: Request) -> dict:
    """Request body as a JSON object; anything else is a 400."""
    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid request body")
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail="Invalid request body")
    return body


def _fail(tag: str, e: Exception):
    if isinstance(e, StoreAdminError):
        raise HTTPException(status_code=e.status_code, detail=e.message)
    log.exception(f"[{tag}] {e!r}")
    raise HTTPException(status_code=500, detail="Internal error")


@router.get("", summary="List products of a store")
def list_products(
    store_id: str,
    category_id: Optional[str] = Query(None, alias="categoryId"),
    size_id: Optional[str] = Query(None, alias="sizeId"),
    color_id: Optional[str] = Query(None, alias="colorId"),
    is_featured: Optional[bool] = Query(None, alias="isFeatured"),
    include_archived: bool = Query(True, alias="includeArchived"),
    db: Session = Depends(get_db),
):
    svc = ProductService(db)
    try:
        products = svc.list(
            store_id,
            category_id=category_id,
            size_id=size_id,
            color_id=color_id,
            is_featured=is_featured,
            include_archived=include_archived,
        )
        return [dump(ProductOut, p) for p in products]
    except Exception as e:
        _fail("PRODUCTS_GET", e)


@router.post("", summary="Create a product")
def create_product(
    store_id: str,
    body: dict = Depends(json_object_body),
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    svc = ProductService(db)
    try:
        product = svc.create(user_id, store_id, body)
        return dump(ProductOut, product)
    except Exception as e:
        _fail("PRODUCTS_POST", e)


@router.get("/{product_id}", summary="Get a product with its images and options")
def get_product(
    store_id: str,
    product_id: str,
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    svc = ProductService(db)
    try:
        product = svc.get(store_id, product_id, user_id=user_id)
        # an absent product answers null, not 404
        return dump(ProductDetailOut, product) if product else None
    except Exception as e:
        _fail("PRODUCT_GET", e)


@router.patch("/{product_id}", summary="Update a product and replace its images")
def update_product(
    store_id: str,
    product_id: str,
    body: dict = Depends(json_object_body),
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    svc = ProductService(db)
    try:
        product = svc.update(user_id, store_id, product_id, body)
        return dump(ProductOut, product)
    except Exception as e:
        _fail("PRODUCT_PATCH", e)


@router.delete("/{product_id}", summary="Delete a product")
def delete_product(
    store_id: str,
    product_id: str,
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    svc = ProductService(db)
    try:
        return svc.delete(user_id, store_id, product_id)
    except Exception as e:
        _fail("PRODUCT_DELETE", e)
