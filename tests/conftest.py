"""Shared fixtures and fakes for the checkout client tests."""
from typing import Any, Dict, List, Optional

import pytest
from requests.structures import CaseInsensitiveDict

from pagseguro_checkout import CheckoutConfig, CheckoutRequest


class FakeResponse:
    def __init__(self, body: bytes, status_code: int = 200, headers: Optional[Dict[str, str]] = None):
        self.content = body
        self.status_code = status_code
        self.headers = CaseInsensitiveDict(
            headers or {"Content-Type": "application/xml;charset=ISO-8859-1"}
        )


class FakeSession:
    """Records posts and answers with a canned response or exception."""

    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def config():
    return CheckoutConfig(seller_email="vendas@example.com", seller_token="TOKEN123")


@pytest.fixture
def checkout_request():
    request = CheckoutRequest.create("TOKEN123", "vendas@example.com", "REF-1")
    request.add_item("0001", "Test", 10.0, 1)
    return request


@pytest.fixture
def fake_session_factory():
    return FakeSession


@pytest.fixture
def fake_response_factory():
    return FakeResponse
