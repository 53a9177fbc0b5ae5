from typing import Optional, Union

import httpx

from storeadmin.config import settings
from storeadmin.schemas.product_schema import ProductFormValues

Payload = Union[ProductFormValues, dict]


class MutationFailed(Exception):
    """A product request did not succeed; no retry is attempted."""

    def __init__(self, message: str, status_code: Optional[int] = None, detail=None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class RequestTimeout(MutationFailed):
    pass


class ProductClient:
    """
    Thin HTTP client for the product routes of one API.

    `http` is any httpx.Client (FastAPI's TestClient included) whose base_url
    points at the API and whose headers carry the caller identity.
    """

    def __init__(self, http: httpx.Client):
        self.http = http

    @classmethod
    def from_settings(cls, user_id: str) -> "ProductClient":
        http = httpx.Client(
            base_url=settings.API_BASE_URL,
            timeout=settings.REQUEST_TIMEOUT_SECONDS,
            headers={settings.AUTH_USER_HEADER: user_id},
        )
        return cls(http)

    def _request(self, method: str, url: str, payload: Optional[Payload] = None):
        if isinstance(payload, ProductFormValues):
            payload = payload.to_payload()
        try:
            res = self.http.request(method, url, json=payload)
        except httpx.TimeoutException as e:
            raise RequestTimeout(f"{method} {url} timed out") from e
        except httpx.HTTPError as e:
            raise MutationFailed(f"{method} {url} failed: {e}") from e

        if res.is_error:
            try:
                body = res.json()
                detail = body.get("detail") if isinstance(body, dict) else body
            except ValueError:
                detail = res.text
            raise MutationFailed(
                f"{method} {url} returned {res.status_code}",
                status_code=res.status_code,
                detail=detail,
            )
        try:
            return res.json()
        except ValueError as e:
            raise MutationFailed(
                f"{method} {url} returned a non-JSON body",
                status_code=res.status_code,
                detail=res.text,
            ) from e

    def get(self, store_id: str, product_id: str):
        return self._request("GET", f"/api/{store_id}/products/{product_id}")

    def create(self, store_id: str, payload: Payload) -> dict:
        return self._request("POST", f"/api/{store_id}/products", payload)

    def update(self, store_id: str, product_id: str, payload: Payload) -> dict:
        return self._request("PATCH", f"/api/{store_id}/products/{product_id}", payload)

    def delete(self, store_id: str, product_id: str) -> dict:
        return self._request("DELETE", f"/api/{store_id}/products/{product_id}")

    def close(self):
        self.http.close()
