"""
Tests for the inventory page view-model and the API client.
"""
import unittest
from unittest.mock import MagicMock

import httpx

from inventory_tracker.client import CredentialStore, InventoryClient
from inventory_tracker.ui import (
    CONFIRM_DELETE_MESSAGE,
    EMPTY_FORM,
    EMPTY_LIST_MESSAGE,
    InventoryView,
    error_message,
    status_badge_class,
)
from support import WIDGET, make_app, make_store, make_token


class InventoryViewTestCase(unittest.IsolatedAsyncioTestCase):
    """Base class: the view talks to a real app over an in-process transport."""

    async def asyncSetUp(self):
        self.store = make_store()
        self.app = make_app(self.store)
        self.credentials = CredentialStore(token=make_token(), user={"id": "user-1"})
        self.client = InventoryClient(
            self.credentials,
            base_url="http://testserver/api",
            transport=httpx.ASGITransport(app=self.app),
        )
        self.confirm = MagicMock(return_value=True)
        self.alert = MagicMock()
        self.navigate = MagicMock()
        self.view = InventoryView(self.client, self.credentials, self.confirm, self.alert, self.navigate)

    async def asyncTearDown(self):
        await self.client.aclose()
        self.store.dispose()

    def fill_form(self, **fields):
        for name, value in fields.items():
            self.view.handle_input_change(name, value)


class TestInventoryClient(InventoryViewTestCase):

    async def test_round_trip(self):
        created = await self.client.create_item(WIDGET)
        fetched = await self.client.get_item(created["_id"])
        self.assertEqual(fetched["itemName"], "Widget")
        updated = await self.client.update_item(created["_id"], {**WIDGET, "quantity": 3})
        self.assertEqual(updated["quantity"], 3)
        self.assertEqual(await self.client.list_items(), [updated])
        result = await self.client.delete_item(created["_id"])
        self.assertEqual(result, {"message": "Item deleted successfully"})

    async def test_missing_item_raises_status_error(self):
        with self.assertRaises(httpx.HTTPStatusError) as ctx:
            await self.client.get_item("f" * 24)
        self.assertEqual(ctx.exception.response.status_code, 404)

    async def test_no_token_sends_no_authorization_header(self):
        self.credentials.clear()
        with self.assertRaises(httpx.HTTPStatusError) as ctx:
            await self.client.list_items()
        self.assertEqual(ctx.exception.response.status_code, 401)


class TestInventoryView(InventoryViewTestCase):

    async def test_mount_loads_items(self):
        await self.client.create_item(WIDGET)
        await self.view.mount()
        self.assertEqual([item["itemName"] for item in self.view.items], ["Widget"])
        self.assertFalse(self.view.show_modal)

    async def test_empty_table_renders_hint(self):
        await self.view.mount()
        self.assertIn(EMPTY_LIST_MESSAGE, self.view.render())

    async def test_table_lists_items(self):
        await self.client.create_item({**WIDGET, "status": "Low Stock"})
        await self.view.mount()
        rendered = self.view.render()
        self.assertIn("Storage Location", rendered)
        self.assertIn("Widget", rendered)
        self.assertIn("Low Stock", rendered)

    async def test_unauthorized_fetch_goes_to_landing(self):
        self.credentials.save("expired-or-bogus")
        await self.view.mount()
        self.navigate.assert_called_once_with("/")
        self.assertEqual(self.view.items, [])

    async def test_add_item(self):
        self.view.open_add_modal()
        self.assertTrue(self.view.show_modal)
        self.assertEqual(self.view.modal_title, "Add New Item")
        self.assertEqual(self.view.submit_label, "Add")
        self.fill_form(itemName="Gadget", quantity="4", storageLocation="B7")

        saved = await self.view.handle_submit()

        self.assertTrue(saved)
        self.assertFalse(self.view.show_modal)
        self.assertIsNone(self.view.editing_item)
        self.assertEqual(self.view.form_data, EMPTY_FORM)
        self.assertEqual(len(self.view.items), 1)
        self.assertEqual(self.view.items[0]["quantity"], 4)

    async def test_edit_item(self):
        await self.client.create_item(WIDGET)
        await self.view.mount()
        item = self.view.items[0]

        self.view.handle_edit(item)
        self.assertTrue(self.view.show_modal)
        self.assertEqual(self.view.modal_title, "Edit Item")
        self.assertEqual(self.view.submit_label, "Update")
        self.assertEqual(self.view.form_data["itemName"], "Widget")
        self.assertEqual(self.view.form_data["image"], "")

        self.fill_form(quantity=0, status="Out of Stock")
        self.assertTrue(await self.view.handle_submit())

        self.assertEqual(len(self.view.items), 1)
        self.assertEqual(self.view.items[0]["_id"], item["_id"])
        self.assertEqual(self.view.items[0]["status"], "Out of Stock")
        self.assertIsNone(self.view.editing_item)

    def test_edit_falls_back_to_empty_image(self):
        item = {**WIDGET, "_id": "a" * 24, "image": None}
        self.view.handle_edit(item)
        self.assertEqual(self.view.form_data["image"], "")

    async def test_failed_save_alerts_and_keeps_modal_open(self):
        self.view.open_add_modal()
        self.fill_form(itemName="Gadget", storageLocation="B7", status="Misplaced")

        saved = await self.view.handle_submit()

        self.assertFalse(saved)
        self.alert.assert_called_once_with("Error saving item: Validation error")
        self.assertTrue(self.view.show_modal)
        self.assertEqual(self.view.form_data["itemName"], "Gadget")

    async def test_delete_requires_confirmation(self):
        created = await self.client.create_item(WIDGET)
        await self.view.mount()
        self.confirm.return_value = False

        await self.view.handle_delete(created["_id"])

        self.confirm.assert_called_once_with(CONFIRM_DELETE_MESSAGE)
        self.assertEqual(len(await self.client.list_items()), 1)

    async def test_confirmed_delete_refetches(self):
        created = await self.client.create_item(WIDGET)
        await self.view.mount()

        await self.view.handle_delete(created["_id"])

        self.assertEqual(self.view.items, [])

    async def test_failed_delete_is_not_alerted(self):
        await self.view.handle_delete("a" * 24)
        self.alert.assert_not_called()

    def test_logout_clears_credentials(self):
        self.view.handle_logout()
        self.assertFalse(self.credentials.is_authenticated)
        self.assertIsNone(self.credentials.user)
        self.navigate.assert_called_once_with("/")

    def test_close_modal(self):
        self.view.open_add_modal()
        self.view.close_modal()
        self.assertFalse(self.view.show_modal)


class TestHelpers(unittest.TestCase):

    def test_status_badge_class(self):
        self.assertEqual(status_badge_class("Good"), "status-good")
        self.assertEqual(status_badge_class("Low Stock"), "status-low-stock")
        self.assertEqual(status_badge_class("Out of Stock"), "status-out-of-stock")

    def test_error_message_prefers_server_message(self):
        request = httpx.Request("POST", "http://testserver/api/inventory")
        response = httpx.Response(500, json={"message": "Server error"}, request=request)
        error = httpx.HTTPStatusError("boom", request=request, response=response)
        self.assertEqual(error_message(error), "Server error")

    def test_error_message_falls_back_to_error_text(self):
        request = httpx.Request("GET", "http://testserver/api/inventory")
        error = httpx.ConnectError("connection refused", request=request)
        self.assertEqual(error_message(error), "connection refused")


if __name__ == "__main__":
    unittest.main()
