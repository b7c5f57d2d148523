"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one concern.
Routers under ``/api`` are aggregated in ``api/router.py``.
"""
