"""
Record Repositories

One repository per record kind, all with the same interface:

    create / create_many / list / get_by_id / update / delete_by_id / count

Every method is a single round trip to the database and commits on its
own. Nothing spans more than one call, so there are no multi-record
transactions.
"""

import logging
from typing import Any, Generic, Iterable, Optional, TypeVar

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from food_ordering.database import Base
from food_ordering.models import MenuItem, ContactMessage, Order

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Generic create/read/update/delete access to one table."""

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, **fields: Any) -> ModelT:
        """Insert one record and return it with its assigned id."""
        record = self.model(**fields)
        self.session.add(record)
        await self.session.commit()
        await self.session.refresh(record)
        return record

    async def create_many(self, rows: Iterable[dict[str, Any]]) -> list[ModelT]:
        """Insert a batch of records in one commit."""
        records = [self.model(**row) for row in rows]
        self.session.add_all(records)
        await self.session.commit()
        return records

    async def list(self) -> list[ModelT]:
        """All records in insertion order."""
        result = await self.session.execute(
            select(self.model).order_by(self.model.seq)
        )
        return list(result.scalars().all())

    async def get_by_id(self, record_id: str) -> Optional[ModelT]:
        result = await self.session.execute(
            select(self.model).where(self.model.id == record_id)
        )
        return result.scalar_one_or_none()

    async def update(self, record_id: str, **fields: Any) -> Optional[ModelT]:
        """
        Replace the given fields of one record.

        Returns:
            The updated record, or None if no record has this id
        """
        record = await self.get_by_id(record_id)
        if record is None:
            return None

        for name, value in fields.items():
            setattr(record, name, value)
        await self.session.commit()
        return record

    async def delete_by_id(self, record_id: str) -> bool:
        """
        Remove one record.

        Returns:
            False if no record has this id
        """
        record = await self.get_by_id(record_id)
        if record is None:
            return False

        await self.session.delete(record)
        await self.session.commit()
        return True

    async def count(self) -> int:
        result = await self.session.execute(select(func.count(self.model.seq)))
        return result.scalar() or 0


class MenuItemRepository(Repository[MenuItem]):
    model = MenuItem


class ContactRepository(Repository[ContactMessage]):
    model = ContactMessage

    async def get_by_request_id(self, request_id: str) -> Optional[ContactMessage]:
        """Find the message stored for a client Idempotency-Key."""
        result = await self.session.execute(
            select(ContactMessage)
            .where(ContactMessage.request_id == request_id)
            .order_by(ContactMessage.seq)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def create_once(self, request_id: str, **fields: Any) -> tuple[ContactMessage, bool]:
        """
        Store a message unless one already exists for ``request_id``.

        The unique index on ``request_id`` decides concurrent inserts; the
        loser rolls back and returns the winner's record.

        Returns:
            (record, created)
        """
        existing = await self.get_by_request_id(request_id)
        if existing is not None:
            return existing, False

        try:
            return await self.create(request_id=request_id, **fields), True
        except IntegrityError:
            await self.session.rollback()
            existing = await self.get_by_request_id(request_id)
            if existing is None:
                raise
            return existing, False


class OrderRepository(Repository[Order]):
    model = Order
