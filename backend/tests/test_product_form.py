from unittest.mock import MagicMock

import httpx
from fastapi.testclient import TestClient

from conftest import OWNER, product_body
from storeadmin.client.product_client import MutationFailed, ProductClient, RequestTimeout
from storeadmin.db import SessionLocal
from storeadmin.forms.product_form import ProductForm
from storeadmin.main import app
from storeadmin.models.product import Product


def _recorders():
    return MagicMock(), MagicMock(), MagicMock()


def _fill(form, opts):
    form.set_value("name", "Hoodie")
    form.set_value("price", "30")
    form.set_value("categoryId", opts["category_id"])
    form.set_value("sizeId", opts["size_id"])
    form.set_value("colorId", opts["color_id"])
    form.add_image("u1")


def test_new_form_starts_from_defaults():
    form = ProductForm(MagicMock(), "s1")
    assert form.values == {
        "name": "",
        "image": [],
        "price": 0,
        "categoryId": "",
        "sizeId": "",
        "colorId": "",
        "isFeatured": False,
        "isArchived": False,
    }
    assert form.title == "Create Product"
    assert form.action == "Create"
    assert form.loading is False


def test_edit_form_normalises_existing_product():
    initial = {
        "id": "p1",
        "name": "Shirt",
        "price": "12.50",
        "categoryId": "c",
        "sizeId": "s",
        "colorId": "k",
        "isFeatured": True,
        "isArchived": False,
        "image": [{"id": "i1", "productId": "p1", "url": "u1"}],
    }
    form = ProductForm(MagicMock(), "s1", initial=initial)
    assert form.values["price"] == 12.5
    assert form.values["image"] == [{"url": "u1"}]
    assert form.values["isFeatured"] is True
    assert form.title == "Edit Product"
    assert form.toast_message == "Product updated."
    assert form.action == "Save changes"


def test_images_behave_as_ordered_set():
    form = ProductForm(MagicMock(), "s1")
    for url in ("a", "b", "c"):
        form.add_image(url)
    form.remove_image("b")
    assert form.image_urls == ["a", "c"]
    form.add_image("d")
    assert form.image_urls == ["a", "c", "d"]
    form.remove_image("missing")
    assert form.image_urls == ["a", "c", "d"]


def test_invalid_submit_sets_field_errors_and_sends_nothing():
    client = MagicMock()
    navigate, refresh, notify = _recorders()
    form = ProductForm(client, "s1", navigate=navigate, refresh=refresh, notify=notify)

    assert form.submit() is False
    assert {"name", "price", "categoryId", "sizeId", "colorId"} <= set(form.errors)
    client.create.assert_not_called()
    notify.assert_not_called()
    assert form.loading is False

    form.set_value("name", "x")
    assert "name" not in form.errors


def test_create_submit_calls_client_and_signals(seeded):
    own = seeded["own"]
    client = MagicMock()
    navigate, refresh, notify = _recorders()
    form = ProductForm(client, own["store_id"], navigate=navigate, refresh=refresh, notify=notify)
    _fill(form, own)

    assert form.submit() is True
    client.create.assert_called_once()
    store_id, payload = client.create.call_args.args
    assert store_id == own["store_id"]
    assert payload.price == 30.0
    client.update.assert_not_called()
    refresh.assert_called_once_with()
    navigate.assert_called_once_with(f"/{own['store_id']}/products")
    notify.assert_called_once_with("success", "Product created.")
    assert form.loading is False


def test_submit_is_refused_while_loading():
    client = MagicMock()
    form = ProductForm(client, "s1")
    form.loading = True
    assert form.submit() is False
    assert form.set_value("name", "ignored") is False
    assert form.values["name"] == ""
    client.create.assert_not_called()


def test_loading_is_set_during_request_and_cleared_on_failure():
    client = MagicMock()
    navigate, refresh, notify = _recorders()
    initial = {"id": "p1", **product_body({"category_id": "c", "size_id": "s", "color_id": "k"})}
    form = ProductForm(client, "s1", initial=initial, navigate=navigate, refresh=refresh, notify=notify)

    def fail(*args):
        assert form.loading is True
        raise RequestTimeout("timed out")

    client.update.side_effect = fail
    assert form.submit() is False
    notify.assert_called_once_with("error", "Something went wrong.")
    navigate.assert_not_called()
    refresh.assert_not_called()
    assert form.loading is False


def test_delete_needs_confirmation():
    client = MagicMock()
    navigate, refresh, notify = _recorders()
    form = ProductForm(client, "s1", initial={"id": "p1", "name": "x"}, navigate=navigate, refresh=refresh, notify=notify)

    assert form.confirm_delete() is False
    client.delete.assert_not_called()

    assert form.open_delete() is True
    form.close_delete()
    assert form.confirm_delete() is False

    form.open_delete()
    assert form.confirm_delete() is True
    client.delete.assert_called_once_with("s1", "p1")
    navigate.assert_called_once_with("/s1/products")
    notify.assert_called_once_with("success", "Product deleted.")
    assert form.confirm_open is False
    assert form.loading is False


def test_delete_failure_closes_confirmation():
    client = MagicMock()
    client.delete.side_effect = MutationFailed("boom", status_code=500)
    notify = MagicMock()
    form = ProductForm(client, "s1", initial={"id": "p1"}, notify=notify)

    form.open_delete()
    assert form.confirm_delete() is False
    notify.assert_called_once_with("error", "Something went wrong.")
    assert form.confirm_open is False
    assert form.loading is False


def test_create_form_cannot_delete():
    form = ProductForm(MagicMock(), "s1")
    assert form.open_delete() is False
    assert form.confirm_open is False


def test_edit_against_live_api(seeded):
    own = seeded["own"]
    api = ProductClient(TestClient(app, headers={"X-User-Id": OWNER}))
    created = api.create(own["store_id"], product_body(own))

    notify = MagicMock()
    form = ProductForm(api, own["store_id"], initial=api.get(own["store_id"], created["id"]), notify=notify)
    form.set_value("name", "Renamed")
    form.remove_image("https://img.example/1.png")
    form.add_image("https://img.example/3.png")
    assert form.submit() is True
    notify.assert_called_once_with("success", "Product updated.")

    db = SessionLocal()
    try:
        p = db.query(Product).filter(Product.id == created["id"]).first()
        assert p.name == "Renamed"
        assert [i.url for i in p.images] == [
            "https://img.example/2.png",
            "https://img.example/3.png",
        ]
    finally:
        db.close()

    # server rejects an empty image list the form schema allows
    form.remove_image("https://img.example/2.png")
    form.remove_image("https://img.example/3.png")
    assert form.submit() is False
    assert notify.call_args.args == ("error", "Something went wrong.")


def test_navigation_failure_after_save_notifies_generic_error():
    client = MagicMock()
    notify = MagicMock()
    navigate = MagicMock(side_effect=RuntimeError("router gone"))
    initial = {"id": "p1", **product_body({"category_id": "c", "size_id": "s", "color_id": "k"})}
    form = ProductForm(client, "s1", initial=initial, navigate=navigate, notify=notify)

    assert form.submit() is False
    client.update.assert_called_once()
    notify.assert_called_once_with("error", "Something went wrong.")
    assert form.loading is False


def test_refresh_failure_after_delete_notifies_generic_error():
    client = MagicMock()
    notify = MagicMock()
    refresh = MagicMock(side_effect=RuntimeError("refresh failed"))
    form = ProductForm(client, "s1", initial={"id": "p1"}, refresh=refresh, notify=notify)

    form.open_delete()
    assert form.confirm_delete() is False
    client.delete.assert_called_once_with("s1", "p1")
    notify.assert_called_once_with("error", "Something went wrong.")
    assert form.confirm_open is False
    assert form.loading is False


def test_non_json_success_response_notifies_generic_error():
    def handler(request):
        return httpx.Response(200, text="<html>proxy</html>")

    api = ProductClient(httpx.Client(base_url="http://api.test", transport=httpx.MockTransport(handler)))
    notify, navigate = MagicMock(), MagicMock()
    initial = {"id": "p1", **product_body({"category_id": "c", "size_id": "s", "color_id": "k"})}
    form = ProductForm(api, "s1", initial=initial, navigate=navigate, notify=notify)

    assert form.submit() is False
    navigate.assert_not_called()
    notify.assert_called_once_with("error", "Something went wrong.")
