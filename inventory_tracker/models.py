"""
SQLAlchemy ORM models for the Inventory Tracker.

Defines the database schema for the inventory table.
"""
import secrets
from datetime import datetime
from sqlalchemy import BigInteger, CheckConstraint, Column, DateTime, String
from .database import Base

STATUSES = ("Good", "Low Stock", "Out of Stock", "Expired")
DEFAULT_STATUS = "Good"

ITEM_ID_LENGTH = 24

# Largest quantity a signed 64-bit column can hold
MAX_QUANTITY = 2**63 - 1


def generate_item_id() -> str:
    """Return a new 24 character hex identifier."""
    return secrets.token_hex(ITEM_ID_LENGTH // 2)


class InventoryItem(Base):
    """
    Inventory item model representing one tracked record.

    Attributes:
        id (str): Store-assigned identifier (24 hex characters)
        item_name (str): Name of the item, trimmed
        quantity (int): Units on hand, never negative
        storage_location (str): Where the item is kept
        status (str): One of STATUSES
        image (str): Optional image URL or path
        created_at (datetime): Timestamp when the item was created
        updated_at (datetime): Timestamp of the last write
    """
    __tablename__ = "inventory"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_inventory_quantity_non_negative"),
        CheckConstraint(
            "status IN (%s)" % ", ".join(f"'{status}'" for status in STATUSES),
            name="ck_inventory_status",
        ),
    )

    id = Column(String(ITEM_ID_LENGTH), primary_key=True, default=generate_item_id)
    item_name = Column(String, nullable=False)
    quantity = Column(BigInteger, nullable=False, default=0)
    storage_location = Column(String, nullable=False)
    status = Column(String, nullable=False, default=DEFAULT_STATUS)
    image = Column(String, nullable=False, default="")
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)
