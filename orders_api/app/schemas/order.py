"""
Pydantic schemas for orders.

Field names are snake_case in Python and camelCase on the wire
(``productName``, ``instanceId``).  Every model accepts both forms on
input; FastAPI serialises responses by alias, so clients always see
the camelCase names.
"""

from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderCreate(BaseModel):
    """Request body for adding an order to a store."""

    model_config = ConfigDict(populate_by_name=True)

    product_name: str = Field(..., alias="productName", description="Name of the ordered product")
    quantity: int = Field(0, description="Number of units ordered; defaults to 0 when omitted")
    date: Optional[datetime] = Field(None, description="Order timestamp; defaults to the time of insertion")


class Order(BaseModel):
    """An order held by an :class:`OrderService`.

    ``id`` is ``0`` until the owning store assigns one on insert.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    id: int = 0
    product_name: str = Field(..., alias="productName")
    quantity: int
    date: datetime = Field(default_factory=_utcnow)

    @classmethod
    def from_create(cls, data: OrderCreate) -> "Order":
        if data.date is None:
            return cls(product_name=data.product_name, quantity=data.quantity)
        date = data.date
        if date.tzinfo is None:
            # Naive timestamps are taken as UTC, like the default.
            date = date.replace(tzinfo=timezone.utc)
        return cls(product_name=data.product_name, quantity=data.quantity, date=date)


class OrderList(BaseModel):
    """Response of ``GET /api/orders/{lifecycle}``."""

    model_config = ConfigDict(populate_by_name=True)

    cycle: str
    instance_id: UUID = Field(..., alias="instanceId")
    count: int
    orders: List[Order]


class OrderAdded(BaseModel):
    """Response of ``POST /api/orders/{lifecycle}``."""

    message: str
    total: int
