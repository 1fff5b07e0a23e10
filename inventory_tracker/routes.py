"""
Inventory routes, mounted under ``/api/inventory``.

Every route requires a valid bearer token; the gate runs as a router-wide
dependency so a rejected request never reaches the record store.
"""
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import auth, crud, schemas
from .database import get_db

logger = logging.getLogger(__name__)

ITEM_NOT_FOUND = "Item not found"
ITEM_DELETED = "Item deleted successfully"

router = APIRouter(
    prefix="/api/inventory",
    tags=["inventory"],
    dependencies=[Depends(auth.get_current_user)],
    responses={
        401: {"model": schemas.Message},
        500: {"model": schemas.ServerErrorResponse},
    },
)


def server_error(action: str, exc: SQLAlchemyError) -> HTTPException:
    logger.error(f"Store failure while trying to {action}: {exc}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"message": "Server error", "error": str(exc)},
    )


def item_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ITEM_NOT_FOUND)


@router.get("", response_model=List[schemas.InventoryItem])
@router.get("/", response_model=List[schemas.InventoryItem], include_in_schema=False)
def list_inventory_items(db: Session = Depends(get_db)):
    """
    List all inventory items, newest first.

    Returns:
        List of inventory item objects
    """
    try:
        return crud.get_inventory_items(db)
    except SQLAlchemyError as e:
        raise server_error("list items", e)


@router.get("/{item_id}", response_model=schemas.InventoryItem, responses={404: {"model": schemas.Message}})
def get_inventory_item(item_id: str, db: Session = Depends(get_db)):
    """
    Get a single inventory item by ID.

    Raises:
        HTTPException: 404 if item not found
    """
    try:
        db_item = crud.get_inventory_item(db, item_id=item_id)
    except SQLAlchemyError as e:
        raise server_error("get an item", e)
    if db_item is None:
        raise item_not_found()
    return db_item


@router.post(
    "",
    response_model=schemas.InventoryItem,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": schemas.ValidationErrorResponse}},
)
@router.post("/", response_model=schemas.InventoryItem, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_inventory_item(item: schemas.InventoryItemPayload, db: Session = Depends(get_db)):
    """
    Create a new inventory item.

    Returns:
        Created inventory item object, including its ID and timestamps
    """
    try:
        return crud.create_inventory_item(db=db, item=item)
    except SQLAlchemyError as e:
        raise server_error("create an item", e)


@router.put(
    "/{item_id}",
    response_model=schemas.InventoryItem,
    responses={400: {"model": schemas.ValidationErrorResponse}, 404: {"model": schemas.Message}},
)
def update_inventory_item(item_id: str, item: schemas.InventoryItemPayload, db: Session = Depends(get_db)):
    """
    Replace all editable fields of an existing inventory item.

    Raises:
        HTTPException: 404 if item not found
    """
    try:
        db_item = crud.update_inventory_item(db, item_id=item_id, item=item)
    except SQLAlchemyError as e:
        raise server_error("update an item", e)
    if db_item is None:
        raise item_not_found()
    return db_item


@router.delete("/{item_id}", response_model=schemas.Message, responses={404: {"model": schemas.Message}})
def delete_inventory_item(item_id: str, db: Session = Depends(get_db)):
    """
    Delete an inventory item.

    Raises:
        HTTPException: 404 if item not found
    """
    try:
        deleted = crud.delete_inventory_item(db, item_id=item_id)
    except SQLAlchemyError as e:
        raise server_error("delete an item", e)
    if not deleted:
        raise item_not_found()
    return {"message": ITEM_DELETED}
