"""
FastAPI dependencies shared by the order endpoints.

Each request gets its own :class:`OrderScope`, opened by ``get_scope``
and closed after the response is sent, so a request is the unit of
work for scoped stores.
"""

import logging
from typing import Iterator

from fastapi import Depends, HTTPException, Request, status

from orders_api.app.core.lifecycle import Lifecycle, LifecycleRegistry, OrderScope
from orders_api.app.services.order_service import OrderService

logger = logging.getLogger(__name__)


def get_registry(request: Request) -> LifecycleRegistry:
    """Return the registry created by ``create_app``."""
    return request.app.state.registry


def get_scope(registry: LifecycleRegistry = Depends(get_registry)) -> Iterator[OrderScope]:
    scope = registry.create_scope()
    try:
        yield scope
    finally:
        scope.close()


def is_known_lifecycle(lifecycle: str) -> bool:
    return lifecycle.lower() in {item.value for item in Lifecycle}


def lifecycle_not_found(lifecycle: str) -> HTTPException:
    """Build the 404 reported for an unknown ``{lifecycle}`` segment."""
    logger.info("Unknown lifecycle requested: %r", lifecycle)
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Unknown lifecycle '{lifecycle}'. Expected one of: "
        + ", ".join(item.value for item in Lifecycle),
    )


def get_lifecycle(lifecycle: str) -> Lifecycle:
    """Parse the ``{lifecycle}`` path segment.

    Unknown values are reported as 404 so that ``/api/orders/foo``
    behaves like a route that does not exist.
    """
    if not is_known_lifecycle(lifecycle):
        raise lifecycle_not_found(lifecycle)
    return Lifecycle(lifecycle.lower())


def get_order_store(
    lifecycle: Lifecycle = Depends(get_lifecycle),
    registry: LifecycleRegistry = Depends(get_registry),
    scope: OrderScope = Depends(get_scope),
) -> OrderService:
    """Resolve the store for this request according to ``lifecycle``."""
    return registry.resolve(lifecycle, scope)
