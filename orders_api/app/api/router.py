"""
Top-level router for the ``/api`` prefix.

Domain routers live in ``api/endpoints`` and are included here with
their own prefix.  The root status route is mounted separately by
``create_app`` because it sits outside ``/api``.
"""

from fastapi import APIRouter

from .endpoints import orders

router = APIRouter()

router.include_router(orders.router, prefix="/orders", tags=["orders"])
