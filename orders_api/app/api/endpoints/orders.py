"""
Order endpoints.

The same two routes serve all three lifecycles; the ``{lifecycle}``
path segment selects which store the request talks to.  The store is
resolved once per request, so a transient GET always reports an empty
store and a transient POST always reports a total of 1.

Handlers are plain functions: FastAPI runs them in its threadpool, and
concurrent requests against the singleton store really do run in
parallel.
"""

from fastapi import APIRouter, Depends, status

from orders_api.app.api.deps import get_lifecycle, get_order_store
from orders_api.app.core.lifecycle import Lifecycle
from orders_api.app.schemas.order import Order, OrderAdded, OrderCreate, OrderList
from orders_api.app.services.order_service import OrderService

router = APIRouter()


@router.get("/{lifecycle}", response_model=OrderList)
def list_orders(
    lifecycle: Lifecycle = Depends(get_lifecycle),
    store: OrderService = Depends(get_order_store),
) -> OrderList:
    """Return the identity, size and contents of the resolved store."""
    return OrderList(
        cycle=lifecycle.label,
        instance_id=store.get_instance_id(),
        count=store.get_orders_count(),
        orders=store.get_orders(),
    )


@router.post("/{lifecycle}", response_model=OrderAdded, status_code=status.HTTP_200_OK)
def add_order(
    order_in: OrderCreate,
    lifecycle: Lifecycle = Depends(get_lifecycle),
    store: OrderService = Depends(get_order_store),
) -> OrderAdded:
    """Append an order to the resolved store and report the new total."""
    store.add_order(Order.from_create(order_in))
    return OrderAdded(message=f"Added to {lifecycle.label}", total=store.get_orders_count())
