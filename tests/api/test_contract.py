"""Endpoint Contract — shared contract and URL builder.

Tests cover:
    - SUBSCRIBERS_CREATE documents every status the route can return
    - The mounted route uses the contract's method and path
    - build_url substitutes known placeholders and leaves others alone
"""

from app.api.contract import SUBSCRIBERS_CREATE, build_url
from app.main import app
from app.schemas.subscriber import (
    MessageBody, SubscriberCreate, SubscriberResponse, ValidationErrorBody,
)


def test_subscribers_create_contract():
    assert SUBSCRIBERS_CREATE.method == "POST"
    assert SUBSCRIBERS_CREATE.path == "/api/subscribers"
    assert SUBSCRIBERS_CREATE.input is SubscriberCreate
    assert SUBSCRIBERS_CREATE.responses == {
        201: SubscriberResponse,
        400: ValidationErrorBody,
        409: MessageBody,
        500: MessageBody,
    }


def test_route_mounted_from_contract():
    operations = app.openapi()["paths"][SUBSCRIBERS_CREATE.path]
    method = SUBSCRIBERS_CREATE.method.lower()
    assert list(operations) == [method]
    assert set(operations[method]["responses"]) >= {"201", "400", "409", "500"}


def test_build_url_substitutes_params():
    assert build_url("/api/users/:id", {"id": 123}) == "/api/users/123"


def test_build_url_without_params_returns_path():
    assert build_url("/api/subscribers") == "/api/subscribers"


def test_build_url_ignores_unknown_params():
    assert build_url("/api/users/:id", {"slug": "x"}) == "/api/users/:id"
