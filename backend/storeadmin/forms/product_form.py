from typing import Callable, Dict, List, Optional, Sequence

from pydantic import ValidationError

from storeadmin.client.product_client import MutationFailed, ProductClient
from storeadmin.schemas.product_schema import ProductFormValues, field_errors
from storeadmin.utils.logs import get_logger

log = get_logger("storeadmin.forms", "FORM")

GENERIC_ERROR = "Something went wrong."

FIELDS = (
    "name",
    "image",
    "price",
    "categoryId",
    "sizeId",
    "colorId",
    "isFeatured",
    "isArchived",
)


def _empty_values() -> dict:
    return {
        "name": "",
        "image": [],
        "price": 0,
        "categoryId": "",
        "sizeId": "",
        "colorId": "",
        "isFeatured": False,
        "isArchived": False,
    }


def _values_from_product(product: dict) -> dict:
    values = _empty_values()
    for key in FIELDS:
        if product.get(key) is not None:
            values[key] = product[key]
    values["price"] = float(product.get("price") or 0)
    values["image"] = [{"url": img["url"]} for img in product.get("image") or []]
    return values


def _noop(*args, **kwargs):
    pass


class ProductForm:
    """
    State of the product create/edit form, independent of any UI.

    Field values are keyed by their wire names (`categoryId`, `isFeatured`, ...).
    While `loading` is true every input is disabled: edits are ignored and a
    second submit or delete is refused.

    Collaborators:
        navigate(path)          -- move to another dashboard page
        refresh()               -- re-fetch server-rendered data
        notify(kind, message)   -- kind is "success" or "error"
    """

    def __init__(
        self,
        client: ProductClient,
        store_id: str,
        initial: Optional[dict] = None,
        categories: Sequence[dict] = (),
        sizes: Sequence[dict] = (),
        colors: Sequence[dict] = (),
        navigate: Optional[Callable[[str], None]] = None,
        refresh: Optional[Callable[[], None]] = None,
        notify: Optional[Callable[[str, str], None]] = None,
    ):
        self.client = client
        self.store_id = store_id
        self.initial = initial
        self.product_id = initial.get("id") if initial else None
        self.categories = list(categories)
        self.sizes = list(sizes)
        self.colors = list(colors)
        self.navigate = navigate or _noop
        self.refresh = refresh or _noop
        self.notify = notify or _noop

        self.values = _values_from_product(initial) if initial else _empty_values()
        self.errors: Dict[str, str] = {}
        self.loading = False
        self.confirm_open = False

    # --- copy ---

    @property
    def is_edit(self) -> bool:
        return self.product_id is not None

    @property
    def title(self) -> str:
        return "Edit Product" if self.is_edit else "Create Product"

    @property
    def description(self) -> str:
        return "Edit a Product" if self.is_edit else "Create a new Product"

    @property
    def toast_message(self) -> str:
        return "Product updated." if self.is_edit else "Product created."

    @property
    def action(self) -> str:
        return "Save changes" if self.is_edit else "Create"

    @property
    def listing_path(self) -> str:
        return f"/{self.store_id}/products"

    # --- field edits ---

    def set_value(self, field: str, value) -> bool:
        if field not in FIELDS:
            raise KeyError(field)
        if self.loading:
            return False
        self.values[field] = value
        self.errors.pop(field, None)
        return True

    @property
    def image_urls(self) -> List[str]:
        return [img["url"] for img in self.values["image"]]

    def add_image(self, url: str) -> bool:
        return self.set_value("image", self.values["image"] + [{"url": url}])

    def remove_image(self, url: str) -> bool:
        return self.set_value(
            "image", [img for img in self.values["image"] if img["url"] != url]
        )

    # --- submit ---

    def validate(self) -> Optional[ProductFormValues]:
        try:
            data = ProductFormValues.model_validate(self.values)
        except ValidationError as e:
            self.errors = field_errors(e)
            return None
        self.errors = {}
        return data

    def submit(self) -> bool:
        if self.loading:
            return False
        data = self.validate()
        if data is None:
            return False

        self.loading = True
        try:
            if self.is_edit:
                self.client.update(self.store_id, self.product_id, data)
            else:
                self.client.create(self.store_id, data)
            self.refresh()
            self.navigate(self.listing_path)
            self.notify("success", self.toast_message)
            return True
        except MutationFailed as e:
            log.error(f"Error saving product: {e} detail={e.detail!r}")
            self.notify("error", GENERIC_ERROR)
            return False
        except Exception as e:
            log.exception(f"Error after saving product: {e!r}")
            self.notify("error", GENERIC_ERROR)
            return False
        finally:
            self.loading = False

    # --- delete ---

    def open_delete(self) -> bool:
        if not self.is_edit or self.loading:
            return False
        self.confirm_open = True
        return True

    def close_delete(self):
        self.confirm_open = False

    def confirm_delete(self) -> bool:
        if not self.confirm_open or self.loading:
            return False

        self.loading = True
        try:
            self.client.delete(self.store_id, self.product_id)
            self.refresh()
            self.navigate(self.listing_path)
            self.notify("success", "Product deleted.")
            return True
        except MutationFailed as e:
            log.error(f"Error deleting product: {e} detail={e.detail!r}")
            self.notify("error", GENERIC_ERROR)
            return False
        except Exception as e:
            log.exception(f"Error after deleting product: {e!r}")
            self.notify("error", GENERIC_ERROR)
            return False
        finally:
            self.loading = False
            self.confirm_open = False
