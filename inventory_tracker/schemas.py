"""
Pydantic schemas for request/response validation in the Inventory Tracker.

Wire names are camelCase (``itemName``, ``storageLocation``...); Python code
uses the snake_case attribute names.
"""
from datetime import datetime
from typing import List, Literal
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from .models import MAX_QUANTITY

Status = Literal["Good", "Low Stock", "Out of Stock", "Expired"]


class InventoryItemBase(BaseModel):
    """Base schema with the five editable inventory item attributes."""
    model_config = ConfigDict(populate_by_name=True)

    item_name: str = Field(..., alias="itemName")
    quantity: int = Field(default=0, ge=0, le=MAX_QUANTITY)
    storage_location: str = Field(..., alias="storageLocation", min_length=1)
    status: Status = "Good"
    image: str = ""

    @field_validator("item_name")
    @classmethod
    def item_name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("itemName must not be empty")
        return value


class InventoryItemPayload(InventoryItemBase):
    """
    Schema for create and update request bodies.

    Updates are wholesale: every field not present in the body is written with
    its default. Any ``id``, ``_id`` or timestamp in the body is ignored.
    """
    pass


class InventoryItem(InventoryItemBase):
    """
    Schema for inventory item responses, includes all database fields.

    Attributes:
        id (str): Store-assigned identifier, also serialized as ``_id``
        created_at (datetime): When the item was created
        updated_at (datetime): When the item was last written
    """
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    @computed_field(alias="_id")
    @property
    def object_id(self) -> str:
        return self.id


class Message(BaseModel):
    """Schema for plain message responses."""
    message: str


class FieldError(BaseModel):
    field: str
    message: str


class ValidationErrorResponse(Message):
    """Schema for 400 responses produced by request validation."""
    errors: List[FieldError] = []


class ServerErrorResponse(Message):
    """Schema for 500 responses produced by store failures."""
    error: str
