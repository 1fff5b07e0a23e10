"""
Inventory page view-model.

``InventoryView`` holds the state of the inventory page (the item list, the
add/edit modal and its form) and implements the page's actions on top of an
``InventoryClient``. The list is never patched locally: after every mutation
it is fetched again from the server.

Interaction with the user goes through three callables supplied by the host:
``confirm(message) -> bool``, ``alert(message)`` and ``navigate(path)``.
"""
import logging
from typing import Any, Callable, Dict, List, Optional
import httpx
from tabulate import tabulate

from .client import CredentialStore, InventoryClient

logger = logging.getLogger(__name__)

LANDING_PATH = "/"
CONFIRM_DELETE_MESSAGE = "Are you sure you want to delete this item?"
EMPTY_LIST_MESSAGE = 'No items yet. Click "Add Item" to get started!'
TABLE_HEADERS = ["Item Name", "Quantity", "Storage Location", "Status"]

EMPTY_FORM = {
    "itemName": "",
    "quantity": 0,
    "storageLocation": "",
    "status": "Good",
    "image": "",
}


def empty_form() -> Dict[str, Any]:
    return dict(EMPTY_FORM)


def status_badge_class(status: str) -> str:
    """CSS class for a status badge, e.g. ``Low Stock`` -> ``status-low-stock``."""
    return "status-" + status.lower().replace(" ", "-")


def error_message(error: httpx.HTTPError) -> str:
    """Message to show for a failed call: the server's ``message`` if it sent one."""
    if isinstance(error, httpx.HTTPStatusError):
        try:
            message = error.response.json().get("message")
        except (ValueError, AttributeError):
            message = None
        if message:
            return message
    return str(error)


class InventoryView:
    """
    State and actions of the inventory page.

    Attributes:
        items (list): Records as last fetched from the server
        show_modal (bool): Whether the add/edit modal is open
        editing_item (dict): Record being edited, None when adding
        form_data (dict): Buffer for the five editable fields
    """

    def __init__(
        self,
        client: InventoryClient,
        credentials: CredentialStore,
        confirm: Callable[[str], bool],
        alert: Callable[[str], None],
        navigate: Callable[[str], None],
    ):
        self.client = client
        self.credentials = credentials
        self.confirm = confirm
        self.alert = alert
        self.navigate = navigate

        self.items: List[dict] = []
        self.show_modal = False
        self.editing_item: Optional[dict] = None
        self.form_data = empty_form()

    @property
    def modal_title(self) -> str:
        return "Edit Item" if self.editing_item else "Add New Item"

    @property
    def submit_label(self) -> str:
        return "Update" if self.editing_item else "Add"

    async def mount(self) -> None:
        await self.fetch_items()

    async def fetch_items(self) -> None:
        """Reload the list; an expired or missing login sends the user to the landing page."""
        try:
            self.items = await self.client.list_items()
        except httpx.HTTPError as error:
            logger.error(f"Error fetching items: {error}")
            if isinstance(error, httpx.HTTPStatusError) and error.response.status_code == 401:
                self.navigate(LANDING_PATH)

    def handle_input_change(self, name: str, value: Any) -> None:
        self.form_data = {**self.form_data, name: value}

    async def handle_submit(self) -> bool:
        """
        Save the form: update the item being edited, otherwise create a new one.

        Returns:
            True if the item was saved
        """
        try:
            if self.editing_item:
                await self.client.update_item(self.editing_item["_id"], self.form_data)
            else:
                await self.client.create_item(self.form_data)
        except httpx.HTTPError as error:
            logger.error(f"Error saving item: {error}")
            self.alert(f"Error saving item: {error_message(error)}")
            return False

        self.show_modal = False
        self.editing_item = None
        self.form_data = empty_form()
        await self.fetch_items()
        return True

    def handle_edit(self, item: dict) -> None:
        self.editing_item = item
        self.form_data = {
            "itemName": item["itemName"],
            "quantity": item["quantity"],
            "storageLocation": item["storageLocation"],
            "status": item["status"],
            "image": item.get("image") or "",
        }
        self.show_modal = True

    async def handle_delete(self, item_id: str) -> None:
        if not self.confirm(CONFIRM_DELETE_MESSAGE):
            return
        try:
            await self.client.delete_item(item_id)
        except httpx.HTTPError as error:
            logger.error(f"Error deleting item: {error}")
            return
        await self.fetch_items()

    def handle_logout(self) -> None:
        self.credentials.clear()
        self.navigate(LANDING_PATH)

    def open_add_modal(self) -> None:
        self.editing_item = None
        self.form_data = empty_form()
        self.show_modal = True

    def close_modal(self) -> None:
        self.show_modal = False

    def render(self) -> str:
        """Render the item table as text."""
        if not self.items:
            return tabulate([], headers=TABLE_HEADERS) + "\n" + EMPTY_LIST_MESSAGE
        rows = [
            [item["itemName"], item["quantity"], item["storageLocation"], item["status"]]
            for item in self.items
        ]
        return tabulate(rows, headers=TABLE_HEADERS)
