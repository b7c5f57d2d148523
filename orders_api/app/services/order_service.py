"""
In-memory order store.

An ``OrderService`` owns an ordered, append-only list of orders and an
identity token generated once at construction.  The identity token is
what callers use to tell store instances apart: two responses with the
same ``instanceId`` were served by the same object.

Identifier assignment reads the current maximum and then appends, with
no lock held in between.  Two threads adding to the same store at the
same time may therefore observe the same maximum and hand out the same
id.  Singleton stores are shared by every request, so this can happen
in production under concurrent POSTs; it is a known limitation and is
covered by ``tests/test_order_service.py``.
"""

from __future__ import annotations

import logging
import uuid
from typing import List

from orders_api.app.schemas.order import Order

logger = logging.getLogger(__name__)


class OrderService:
    """Service class holding one store of orders."""

    def __init__(self) -> None:
        self._orders: List[Order] = []
        self._instance_id = uuid.uuid4()

    def get_instance_id(self) -> uuid.UUID:
        """Return the identity token fixed at construction."""
        return self._instance_id

    def add_order(self, order: Order) -> Order:
        """Assign the next identifier to ``order`` and append it.

        The same object is returned with its ``id`` filled in.
        """
        order.id = self._next_id()
        self._orders.append(order)
        logger.debug("Store %s: added order %s (%s x%s)", self._instance_id, order.id, order.product_name, order.quantity)
        return order

    def get_orders(self) -> List[Order]:
        """Return the stored orders in insertion order.

        The list is a copy; appending to it does not touch the store.
        """
        return list(self._orders)

    def get_orders_count(self) -> int:
        return len(self._orders)

    def _next_id(self) -> int:
        # max + 1 rather than a counter: ids follow the current contents.
        if not self._orders:
            return 1
        return max(o.id for o in self._orders) + 1

    def __repr__(self) -> str:
        return f"OrderService(instance_id={self._instance_id}, count={len(self._orders)})"
