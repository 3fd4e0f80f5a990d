"""
Unit tests for the GraphQL HTTP client.
"""

import json
from unittest.mock import Mock

import pytest
import requests
from django.test import override_settings

from schema_bridge.client import GraphQLClient
from schema_bridge.exceptions import FetchError

pytestmark = pytest.mark.unit

URL = "http://graphql.test/graphql"


def make_response(body=None, status=200, text=None):
    response = Mock()
    response.status_code = status
    response.ok = 200 <= status < 300
    if text is not None:
        response.json.side_effect = ValueError(f"Expecting value: {text!r}")
    else:
        response.json.return_value = body
    return response


def make_client(response=None, exc=None):
    session = Mock()
    if exc is not None:
        session.post.side_effect = exc
    else:
        session.post.return_value = response
    return GraphQLClient(URL, timeout=5, session=session), session


def test_execute_posts_json_and_returns_data():
    client, session = make_client(make_response({"data": {"users": []}}))

    data = client.execute("query GetUsers { users { id } }", {"x": 1}, operation_name="GetUsers")

    assert data == {"users": []}
    args, kwargs = session.post.call_args
    assert args == (URL,)
    assert kwargs["headers"]["Content-Type"] == "application/json"
    assert kwargs["timeout"] == 5
    assert json.loads(kwargs["data"]) == {
        "query": "query GetUsers { users { id } }",
        "variables": {"x": 1},
        "operationName": "GetUsers",
    }


def test_missing_data_returns_empty_dict():
    client, _ = make_client(make_response({}))
    assert client.execute("{ ok }") == {}


def test_graphql_errors_raise_fetch_error():
    errors = [{"message": "boom"}]
    client, _ = make_client(make_response({"errors": errors, "data": None}))

    with pytest.raises(FetchError) as exc_info:
        client.execute("{ ok }")

    assert "boom" in str(exc_info.value)
    assert exc_info.value.errors == errors


def test_errors_take_precedence_over_http_status():
    client, _ = make_client(make_response({"errors": [{"message": "bad query"}]}, status=400))

    with pytest.raises(FetchError, match="bad query") as exc_info:
        client.execute("{ nope }")

    assert exc_info.value.status_code == 400


def test_non_json_body_raises_fetch_error():
    client, _ = make_client(make_response(text="<html>"))

    with pytest.raises(FetchError, match="Failed to parse response"):
        client.execute("{ ok }")


def test_http_error_without_errors_raises_fetch_error():
    client, _ = make_client(make_response({"message": "nope"}, status=502))

    with pytest.raises(FetchError, match="HTTP 502"):
        client.execute("{ ok }")


def test_transport_failure_raises_fetch_error():
    client, _ = make_client(exc=requests.ConnectionError("connection refused"))

    with pytest.raises(FetchError, match="connection refused"):
        client.execute("{ ok }")


def test_extra_headers_are_sent():
    session = Mock()
    session.post.return_value = make_response({"data": {}})
    client = GraphQLClient(URL, session=session, headers={"Authorization": "Bearer t"})

    client.execute("{ ok }")

    headers = session.post.call_args.kwargs["headers"]
    assert headers == {"Content-Type": "application/json", "Authorization": "Bearer t"}


def test_from_settings():
    with override_settings(
        SCHEMA_BRIDGE={"client_settings": {"endpoint_url": URL, "timeout_seconds": 3}}
    ):
        client = GraphQLClient.from_settings()

    assert client.endpoint_url == URL
    assert client.timeout == 3


def test_close_leaves_injected_session_open():
    client, session = make_client(make_response({"data": {}}))

    client.close()

    session.close.assert_not_called()


def test_close_closes_own_session(monkeypatch):
    session = Mock()
    monkeypatch.setattr(requests, "Session", Mock(return_value=session))

    GraphQLClient(URL).close()

    session.close.assert_called_once_with()
