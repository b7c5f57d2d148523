"""
Lifecycle-aware resolution of order stores.

The registry answers one question: given a lifecycle, should the caller
get a brand-new store or one that already exists?

``transient``
    A new store on every resolution.
``scoped``
    One store per unit of work.  The unit of work is an explicit
    :class:`OrderScope` handle passed by the caller; the HTTP layer
    opens one per request and closes it when the response is sent.
``singleton``
    One store for the lifetime of the registry, built on first use.

Stores are never destroyed explicitly.  Transient stores die with the
caller's reference, scoped stores when their scope is closed, and the
singleton with the registry (or on :meth:`LifecycleRegistry.reset`).
"""

from __future__ import annotations

import logging
import threading
import uuid
from enum import Enum
from typing import Callable, Dict, Optional

from orders_api.app.services.order_service import OrderService

logger = logging.getLogger(__name__)

StoreFactory = Callable[[], OrderService]


class Lifecycle(str, Enum):
    """Supported lifecycle policies, keyed by their URL segment."""

    TRANSIENT = "transient"
    SCOPED = "scoped"
    SINGLETON = "singleton"

    @property
    def label(self) -> str:
        """Display name used in API responses (``"Transient"``...)."""
        return self.value.capitalize()


class LifecycleError(Exception):
    """Base class for misuse of the lifecycle registry."""


class ScopeRequiredError(LifecycleError):
    """A scoped store was requested without a scope."""


class ScopeClosedError(LifecycleError):
    """A store was requested from a scope that has already been closed."""


class OrderScope:
    """A unit of work within which scoped resolutions share one store.

    Scopes are cheap: create one per request (or per job, per test) and
    close it when the work is done.  A scope caches at most one instance
    per factory.
    """

    def __init__(self) -> None:
        self.scope_id = uuid.uuid4()
        self._instances: Dict[StoreFactory, OrderService] = {}
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def get_or_create(self, factory: StoreFactory) -> OrderService:
        """Return the instance built by ``factory`` in this scope, creating it once."""
        with self._lock:
            if self._closed:
                raise ScopeClosedError(f"Scope {self.scope_id} is closed")
            instance = self._instances.get(factory)
            if instance is None:
                instance = factory()
                self._instances[factory] = instance
                logger.debug("Scope %s: created store %s", self.scope_id, instance.get_instance_id())
            return instance

    def close(self) -> None:
        """Release the scope's instances.  Closing twice is a no-op."""
        with self._lock:
            self._instances.clear()
            self._closed = True

    def __enter__(self) -> "OrderScope":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class LifecycleRegistry:
    """Resolve order stores according to a :class:`Lifecycle`.

    Parameters
    ----------
    factory : Callable[[], OrderService]
        Builds a new store.  Defaults to :class:`OrderService`.
    """

    def __init__(self, factory: StoreFactory = OrderService) -> None:
        self._factory = factory
        self._singleton: Optional[OrderService] = None
        self._singleton_lock = threading.Lock()

    def create_scope(self) -> OrderScope:
        return OrderScope()

    def resolve(self, lifecycle: Lifecycle, scope: Optional[OrderScope] = None) -> OrderService:
        """Return the store ``lifecycle`` selects.

        Raises
        ------
        ScopeRequiredError
            ``lifecycle`` is scoped and no ``scope`` was given.
        ScopeClosedError
            ``scope`` has been closed.
        """
        lifecycle = Lifecycle(lifecycle)
        if lifecycle is Lifecycle.TRANSIENT:
            store = self._factory()
            logger.debug("Created transient store %s", store.get_instance_id())
            return store
        if lifecycle is Lifecycle.SCOPED:
            if scope is None:
                raise ScopeRequiredError("A scope is required to resolve a scoped store")
            return scope.get_or_create(self._factory)
        return self._get_singleton()

    def reset(self) -> None:
        """Forget the singleton store; the next resolution builds a new one."""
        with self._singleton_lock:
            self._singleton = None

    def _get_singleton(self) -> OrderService:
        store = self._singleton
        if store is not None:
            return store
        with self._singleton_lock:
            if self._singleton is None:
                self._singleton = self._factory()
                logger.info("Created singleton store %s", self._singleton.get_instance_id())
            return self._singleton
