"""Root status endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from orders_api.app.core.config import settings

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
def read_root() -> str:
    """Return a short message confirming the service is up."""
    return settings.root_message
