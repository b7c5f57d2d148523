from __future__ import annotations

from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from orders_api.app.core.lifecycle import LifecycleRegistry
from orders_api.app.main import create_app


@pytest.fixture
def app() -> FastAPI:
    """A fresh application, so every test starts with an empty singleton."""
    return create_app()


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def registry() -> LifecycleRegistry:
    return LifecycleRegistry()
