"""
CRUD (Create, Read, Update, Delete) operations for the Inventory Tracker.

This module contains all record store operations for inventory management.
Store failures roll the session back and propagate as SQLAlchemy errors.
"""
import logging
import re
from datetime import datetime, timedelta
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from . import models, schemas

logger = logging.getLogger(__name__)

ITEM_ID_PATTERN = re.compile(r"[0-9a-fA-F]{%d}" % models.ITEM_ID_LENGTH)


def normalize_item_id(item_id: str) -> Optional[str]:
    """
    Normalize an identifier taken from a request path.

    Args:
        item_id: Raw identifier

    Returns:
        Lowercase identifier, or None if it is not 24 hex characters
    """
    if not ITEM_ID_PATTERN.fullmatch(item_id):
        return None
    return item_id.lower()


def _commit(db: Session) -> None:
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise


def get_inventory_item(db: Session, item_id: str) -> Optional[models.InventoryItem]:
    """
    Retrieve a single inventory item by ID.

    Args:
        db: Database session
        item_id: ID of the inventory item to retrieve

    Returns:
        InventoryItem object or None if not found (or the ID is malformed)
    """
    normalized = normalize_item_id(item_id)
    if normalized is None:
        return None
    return db.query(models.InventoryItem).filter(models.InventoryItem.id == normalized).first()


def get_inventory_items(db: Session) -> List[models.InventoryItem]:
    """
    Retrieve all inventory items, most recently created first.

    Args:
        db: Database session

    Returns:
        List of InventoryItem objects
    """
    return db.query(models.InventoryItem).order_by(models.InventoryItem.created_at.desc()).all()


def create_inventory_item(db: Session, item: schemas.InventoryItemPayload) -> models.InventoryItem:
    """
    Create a new inventory item in the database.

    Args:
        db: Database session
        item: Validated inventory item data

    Returns:
        Created InventoryItem object with its assigned ID and timestamps
    """
    now = datetime.utcnow()
    db_item = models.InventoryItem(
        item_name=item.item_name,
        quantity=item.quantity,
        storage_location=item.storage_location,
        status=item.status,
        image=item.image,
        created_at=now,
        updated_at=now,
    )
    db.add(db_item)
    _commit(db)
    db.refresh(db_item)
    logger.info(f"Created inventory item {db_item.id} ({db_item.item_name!r})")
    return db_item


def update_inventory_item(db: Session, item_id: str, item: schemas.InventoryItemPayload) -> Optional[models.InventoryItem]:
    """
    Replace the editable fields of an existing inventory item.

    All five editable fields are written, whether or not the client sent them.

    Args:
        db: Database session
        item_id: ID of the inventory item to update
        item: Full replacement data

    Returns:
        Updated InventoryItem object or None if not found
    """
    db_item = get_inventory_item(db, item_id)
    if db_item is None:
        return None

    for key, value in item.model_dump().items():
        setattr(db_item, key, value)
    # updated_at must move forward even when two writes share a clock tick
    db_item.updated_at = max(datetime.utcnow(), db_item.updated_at + timedelta(microseconds=1))

    _commit(db)
    db.refresh(db_item)
    logger.info(f"Updated inventory item {db_item.id}")
    return db_item


def delete_inventory_item(db: Session, item_id: str) -> bool:
    """
    Delete an inventory item from the database.

    Args:
        db: Database session
        item_id: ID of the inventory item to delete

    Returns:
        True if item was deleted, False if not found
    """
    db_item = get_inventory_item(db, item_id)
    if db_item is None:
        return False

    db.delete(db_item)
    _commit(db)
    logger.info(f"Deleted inventory item {item_id}")
    return True
