from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storeadmin.api.identity import get_current_user_id
from storeadmin.db import get_db
from storeadmin.repositories.store_repo import StoreRepository
from storeadmin.schemas.product_schema import OptionOut, StoreOut, dump
from storeadmin.services.auth_gate import AuthorizationGate
from storeadmin.services.exceptions import StoreAdminError

router = APIRouter(prefix="/api", tags=["stores"])


@router.get("/stores", summary="Stores owned by the caller")
def list_stores(
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    try:
        user_id = AuthorizationGate(db).require_identity(user_id)
    except StoreAdminError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    stores = StoreRepository(db).list_for_user(user_id)
    return [dump(StoreOut, s) for s in stores]


@router.get("/{store_id}/options", summary="Categories, sizes and colors for the product form")
def store_options(
    store_id: str,
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    try:
        AuthorizationGate(db).require_store_owner(user_id, store_id)
    except StoreAdminError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    options = StoreRepository(db).options(store_id)
    return {
        key: [dump(OptionOut, o) for o in items] for key, items in options.items()
    }
