from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests
from fastapi.testclient import TestClient

from orders_client import OrdersAPI, compare_lifecycles


class _FakeResponse:
    def __init__(self, status_code: int, body: Optional[Dict[str, Any]] = None, text: str = "") -> None:
        self.status_code = status_code
        self._body = body
        self.text = text
        self.content = b"x" if body is not None else b""

    def json(self) -> Dict[str, Any]:
        if self._body is None:
            raise ValueError("no json")
        return self._body

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


class _FakeSession:
    def __init__(self, responses: List[Any]) -> None:
        self.responses = responses
        self.calls: List[Dict[str, Any]] = []

    def request(self, **kwargs: Any) -> _FakeResponse:
        self.calls.append(kwargs)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def test_add_order_sends_camel_case_payload() -> None:
    session = _FakeSession([_FakeResponse(200, {"message": "Added to Singleton", "total": 1})])
    api = OrdersAPI(base_url="http://orders.local/", session=session)

    data, error = api.add_order("singleton", "Widget", 3)

    assert error is None
    assert data["total"] == 1
    assert session.calls[0]["method"] == "POST"
    assert session.calls[0]["url"] == "http://orders.local/api/orders/singleton"
    assert session.calls[0]["json"] == {"productName": "Widget", "quantity": 3}


def test_http_error_is_returned_not_raised() -> None:
    session = _FakeSession([_FakeResponse(404, {"detail": "Unknown lifecycle 'x'"})])
    api = OrdersAPI(base_url="http://orders.local", session=session)

    data, error = api.list_orders("x")

    assert data is None
    assert error == {"status_code": 404, "message": "Unknown lifecycle 'x'"}


def test_connection_error_is_returned_not_raised() -> None:
    session = _FakeSession([requests.ConnectionError("refused")])
    api = OrdersAPI(base_url="http://orders.local", session=session)

    data, error = api.status()

    assert data is None
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_compare_lifecycles_against_running_app(client: TestClient) -> None:
    api = OrdersAPI(base_url="http://testserver", session=client)

    report, errors = compare_lifecycles(api)

    assert errors == []
    assert report["transient"]["same_instance"] is False
    assert report["scoped"]["same_instance"] is False
    assert report["singleton"]["same_instance"] is True


def test_status_against_running_app(client: TestClient) -> None:
    api = OrdersAPI(base_url="http://testserver", session=client)

    message, error = api.status()

    assert error is None
    assert message
