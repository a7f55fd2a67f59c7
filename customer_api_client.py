"""Customer Record API client.

A thin wrapper around the service's HTTP endpoints built on
``requests``.  Every method returns a tuple ``(data, error)``: on
success ``error`` is ``None``; on failure ``data`` is empty and
``error`` is a dictionary with keys ``status_code`` and ``message``.
Network problems are reported the same way (with ``status_code`` set
to ``None``) instead of raising.

Example::

    api = CustomerRecordAPI(base_url="http://localhost:5000")
    created, error = api.create_customer({
        "first_name": "Ann",
        "last_name": "Lee",
        "phone_number": "5551234567",
        "email": "a@b.com",
        "address": "1 Main St",
    })
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class CustomerRecordAPI:
    """Client for the ``/customers`` endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Root URL of the service, e.g. ``http://localhost:5000``.
            timeout: Seconds to wait for each request.
            session: Optional requests session.  One is created if omitted.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and decode the JSON response.

        Returns:
            ``(data, None)`` on a 2xx response, ``(None, error)`` otherwise.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            # ``Response.__bool__`` is False for error statuses, so compare to None.
            resp = exc.response
            status = resp.status_code if resp is not None else None
            message = ""
            if resp is not None:
                try:
                    err_json = resp.json()
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = resp.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Customer operations
    # ------------------------------------------------------------------
    def create_customer(self, customer: Dict[str, Any]) -> Tuple[Optional[int], Optional[Error]]:
        """Create a customer and return its new id."""
        data, error = self._request("POST", "/customers", json_body=customer)
        if error:
            return None, error
        return (data or {}).get("id"), None

    def get_customer(self, customer_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/customers/{customer_id}")

    def update_customer(
        self, customer_id: int, customer: Dict[str, Any]
    ) -> Tuple[bool, Optional[Error]]:
        """Replace all fields of a customer.

        The payload must carry every field; the service does not
        support partial updates.
        """
        _, error = self._request("PUT", f"/customers/{customer_id}", json_body=customer)
        return error is None, error

    def delete_customer(self, customer_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/customers/{customer_id}")
        return error is None, error

    def search_customers(self, term: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/customers", params={"search": term})
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_page(self, page: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Fetch one page of customers.

        The returned dictionary has the keys ``totalCustomers``,
        ``totalPages`` and ``customers``.
        """
        return self._request("GET", f"/customers/page/{page}")
