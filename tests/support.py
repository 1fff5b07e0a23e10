"""
Shared fixtures for the Inventory Tracker tests.
"""
from datetime import timedelta

from inventory_tracker.auth import create_access_token
from inventory_tracker.database import Store
from inventory_tracker.main import create_app

WIDGET = {
    "itemName": "Widget",
    "quantity": 10,
    "storageLocation": "A1",
    "status": "Good",
}


def make_store() -> Store:
    """In-memory record store with the inventory table created."""
    store = Store("sqlite://")
    store.create_all()
    return store


def make_app(store: Store):
    return create_app(store=store)


def make_token(user_id: str = "user-1", expires_delta: timedelta = None) -> str:
    return create_access_token({"sub": user_id, "email": f"{user_id}@example.com"}, expires_delta)


def auth_headers(token: str = None) -> dict:
    return {"Authorization": f"Bearer {token or make_token()}"}
