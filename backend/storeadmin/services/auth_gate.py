from typing import Optional

from sqlalchemy.orm import Session

from storeadmin.models.store import Store
from storeadmin.repositories.store_repo import StoreRepository
from storeadmin.services.exceptions import Unauthenticated, Unauthorized


class AuthorizationGate:
    """
    Checks the caller against the store named in the request path.

    The identity is passed in explicitly; resolving it from the request is the
    job of the API layer (see storeadmin.api.identity).
    """

    def __init__(self, db: Session):
        self.store_repo = StoreRepository(db)

    def require_identity(self, user_id: Optional[str]) -> str:
        if not user_id:
            raise Unauthenticated()
        return user_id

    def require_store_owner(self, user_id: Optional[str], store_id: str) -> Store:
        user_id = self.require_identity(user_id)
        store = self.store_repo.get_owned(store_id, user_id)
        if not store:
            raise Unauthorized()
        return store
