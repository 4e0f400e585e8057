"""
SQLAlchemy Database Models

One canonical table definition per record kind:
- MenuItem: dishes shown on the menu page
- ContactMessage: contact-form submissions
- Order: checkout submissions

Records are flat and unrelated to each other. Data columns are unbounded,
nullable text; the contact route alone enforces required fields.
"""

import uuid

from sqlalchemy import Column, String, DateTime, Text, Integer
from sqlalchemy.sql import func

from food_ordering.database import Base

PAYMENT_SUCCESS = "Success"


def generate_id() -> str:
    """Opaque system-assigned record id."""
    return uuid.uuid4().hex


class MenuItem(Base):
    """Menu item. Only ``food_name`` is ever mutated after insert."""
    __tablename__ = "menu_items"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(32), unique=True, index=True, nullable=False, default=generate_id)

    food_name = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    price = Column(Text, nullable=True)  # e.g. "$8.99", kept as text
    image = Column(Text, nullable=True)


class ContactMessage(Base):
    """
    Contact-form submission.

    ``password`` is stored as submitted (plaintext). The field exists for
    compatibility with the existing frontend only; nothing reads it.
    """
    __tablename__ = "contacts"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(32), unique=True, index=True, nullable=False, default=generate_id)

    name = Column(Text, nullable=True)
    email = Column(Text, nullable=True)
    password = Column(Text, nullable=True)
    about = Column(Text, nullable=True)

    # Client-supplied Idempotency-Key; NULLs do not collide
    request_id = Column(String, nullable=True, unique=True, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Order(Base):
    """Checkout submission. Product fields are free text, not menu references."""
    __tablename__ = "orders"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(32), unique=True, index=True, nullable=False, default=generate_id)

    # Customer
    name = Column(Text, nullable=True)
    street = Column(Text, nullable=True)
    city = Column(Text, nullable=True)
    pincode = Column(Text, nullable=True)
    phone = Column(Text, nullable=True)

    # Product
    product = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    price = Column(Text, nullable=True)

    # Placeholder: no payment processing happens
    payment_status = Column(Text, default=PAYMENT_SUCCESS)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
