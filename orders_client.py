"""Orders API client.

A thin wrapper around the Orders API HTTP endpoints, built on
``requests``.  Every call returns a ``(data, error)`` tuple: ``data``
is the parsed JSON body on success and ``error`` is ``None``; on
failure ``data`` is ``None`` and ``error`` is a dictionary with keys
``status_code`` and ``message``.

The client exposes:

* :meth:`OrdersAPI.status` – the plain-text message served at ``/``.
* :meth:`OrdersAPI.list_orders` – ``GET /api/orders/{lifecycle}``.
* :meth:`OrdersAPI.add_order` – ``POST /api/orders/{lifecycle}``.

:func:`compare_lifecycles` uses these to show the three lifecycles side
by side: it requests each store twice and reports whether the
``instanceId`` survived between requests.  Run the module directly to
print that comparison for a running server::

    python orders_client.py --base-url http://localhost:8000
"""

from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

LIFECYCLES = ("transient", "scoped", "singleton")

Error = Dict[str, Any]


class OrdersAPI:
    """Client for the Orders API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None, expect_json: bool = True
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/orders/scoped``).
            json_body: JSON body to send with the request.
            expect_json: Parse the response as JSON; otherwise return its text.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if not expect_json:
                return response.text, None
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def status(self) -> Tuple[Optional[str], Optional[Error]]:
        """Return the status message served at ``/``."""
        return self._request("GET", "/", expect_json=False)

    def list_orders(self, lifecycle: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Fetch the store for ``lifecycle``.

        Returns:
            A tuple ``(body, error)`` where ``body`` has the keys
            ``cycle``, ``instanceId``, ``count`` and ``orders``.
        """
        return self._request("GET", f"/api/orders/{lifecycle}")

    def add_order(
        self, lifecycle: str, product_name: str, quantity: int
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Add an order to the store for ``lifecycle``.

        Returns:
            A tuple ``(body, error)`` where ``body`` has the keys
            ``message`` and ``total``.
        """
        payload = {"productName": product_name, "quantity": quantity}
        return self._request("POST", f"/api/orders/{lifecycle}", json_body=payload)


def compare_lifecycles(client: OrdersAPI) -> Tuple[Dict[str, Dict[str, Any]], List[Error]]:
    """Request every lifecycle twice and compare the instance ids.

    Returns:
        A tuple ``(report, errors)``.  ``report`` maps each lifecycle to
        ``{"first": id, "second": id, "same_instance": bool}``; lifecycles
        whose requests failed are left out and their errors collected.
    """
    report: Dict[str, Dict[str, Any]] = {}
    errors: List[Error] = []
    for lifecycle in LIFECYCLES:
        first, error = client.list_orders(lifecycle)
        if error:
            errors.append(error)
            continue
        second, error = client.list_orders(lifecycle)
        if error:
            errors.append(error)
            continue
        report[lifecycle] = {
            "first": first["instanceId"],
            "second": second["instanceId"],
            "same_instance": first["instanceId"] == second["instanceId"],
        }
    return report, errors


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Compare order store lifecycles on a running Orders API.")
    parser.add_argument("--base-url", default="http://localhost:8000", help="Base URL of the Orders API")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    client = OrdersAPI(base_url=args.base_url)
    report, errors = compare_lifecycles(client)
    for lifecycle, row in report.items():
        verdict = "same instance" if row["same_instance"] else "new instance"
        print(f"{lifecycle:<10} {row['first']} -> {row['second']} ({verdict})")
    for error in errors:
        print(f"error: {error['message']}")
    return 1 if errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
