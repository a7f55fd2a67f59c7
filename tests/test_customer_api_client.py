import json

import pytest
import requests

from customer_api_client import CustomerRecordAPI
from tests.conftest import customer_payload


def make_response(status_code, payload=None, text=None):
    response = requests.Response()
    response.status_code = status_code
    response.url = "http://testserver/customers"
    if payload is not None:
        response._content = json.dumps(payload).encode("utf-8")
    else:
        response._content = (text or "").encode("utf-8")
    return response


class FakeSession:
    """Stands in for ``requests.Session`` and records outgoing requests."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


def make_client(*responses):
    session = FakeSession(*responses)
    return CustomerRecordAPI(base_url="http://testserver/", session=session), session


def test_create_customer_returns_id():
    api, session = make_client(make_response(201, {"message": "Customer added successfully", "id": 3}))
    customer_id, error = api.create_customer(customer_payload())
    assert (customer_id, error) == (3, None)
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "http://testserver/customers"
    assert call["json"] == customer_payload()


def test_validation_error_message_is_reported():
    api, _ = make_client(make_response(400, {"error": "Invalid email format."}))
    customer_id, error = api.create_customer(customer_payload(email="nope"))
    assert customer_id is None
    assert error == {"status_code": 400, "message": "Invalid email format."}


def test_get_missing_customer():
    api, session = make_client(make_response(404, {"error": "Customer not found"}))
    customer, error = api.get_customer(9)
    assert customer is None
    assert error == {"status_code": 404, "message": "Customer not found"}
    assert session.calls[0]["url"] == "http://testserver/customers/9"


def test_update_and_delete_report_success():
    api, session = make_client(
        make_response(200, {"message": "Customer updated successfully"}),
        make_response(200, {"message": "Customer deleted"}),
    )
    assert api.update_customer(1, customer_payload()) == (True, None)
    assert api.delete_customer(1) == (True, None)
    assert [c["method"] for c in session.calls] == ["PUT", "DELETE"]


def test_search_sends_term_as_query_parameter():
    rows = [{"id": 1, **customer_payload()}]
    api, session = make_client(make_response(200, rows))
    result, error = api.search_customers("main")
    assert (result, error) == (rows, None)
    assert session.calls[0]["params"] == {"search": "main"}


def test_get_page():
    page = {"totalCustomers": 0, "totalPages": 0, "customers": []}
    api, session = make_client(make_response(200, page))
    assert api.get_page(2) == (page, None)
    assert session.calls[0]["url"] == "http://testserver/customers/page/2"


def test_server_error_with_plain_text_body():
    api, _ = make_client(make_response(500, text="upstream exploded"))
    result, error = api.search_customers("x")
    assert result == []
    assert error == {"status_code": 500, "message": "upstream exploded"}


def test_network_failure_does_not_raise():
    api, _ = make_client(requests.ConnectionError("connection refused"))
    result, error = api.delete_customer(1)
    assert result is False
    assert error["status_code"] is None
    assert "connection refused" in error["message"]


@pytest.mark.parametrize("timeout", [1, 30])
def test_timeout_is_forwarded(timeout):
    api, session = make_client(make_response(200, []))
    api.timeout = timeout
    api.search_customers("")
    assert session.calls[0]["timeout"] == timeout
