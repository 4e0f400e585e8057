"""
Pydantic Schemas for Request/Response Validation

Field names follow Python conventions; aliases keep the camelCase JSON
names the frontend already sends and reads (``foodName``, ``_id``, ...).

Every request field is optional here. Presence checks belong to the
route layer, and only the contact route performs them.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Any, Optional
from datetime import datetime


class _Payload(BaseModel):
    """Common config: accept aliases or field names, numbers and booleans as text."""

    class Config:
        populate_by_name = True
        coerce_numbers_to_str = True

    @field_validator("*", mode="before")
    @classmethod
    def booleans_as_text(cls, v: Any) -> Any:
        if isinstance(v, bool):
            return "true" if v else "false"
        return v


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class MenuItemCreate(_Payload):
    """Body of POST /insert."""
    food_name: Optional[str] = Field(None, alias="foodName", examples=["Pizza"])
    description: Optional[str] = Field(None, examples=["Mozzarella & basil"])
    price: Optional[str] = Field(None, examples=["$8.99"])
    image: Optional[str] = Field(None, examples=["food1.jpg"])


class MenuItemRename(_Payload):
    """Body of PUT /update."""
    id: Optional[str] = None
    new_food_name: Optional[str] = Field(None, alias="newFoodName")


class ContactCreate(_Payload):
    """Body of POST /api/contact."""
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    about: Optional[str] = None

    def missing_fields(self) -> list[str]:
        """Required fields that are absent or empty."""
        return [
            field for field in ("name", "email", "password", "about")
            if not getattr(self, field)
        ]


class OrderCreate(_Payload):
    """Body of POST /api/order. Any client-sent payment status is ignored."""
    name: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    pincode: Optional[str] = None
    phone: Optional[str] = None
    product: Optional[str] = None
    description: Optional[str] = None
    price: Optional[str] = None


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class MenuItemResponse(BaseModel):
    """A stored menu item."""
    id: str = Field(..., alias="_id")
    food_name: Optional[str] = Field(None, alias="foodName")
    description: Optional[str] = None
    price: Optional[str] = None
    image: Optional[str] = None

    class Config:
        from_attributes = True
        populate_by_name = True


class MessageResponse(BaseModel):
    """Flat human-readable result used by the contact and order routes."""
    message: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    database: str
    mail_service: str
    timestamp: datetime
