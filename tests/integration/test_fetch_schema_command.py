"""
Integration tests for the fetch_schema management command.
"""

import json
from io import StringIO
from types import SimpleNamespace
from unittest.mock import Mock, patch

import pytest
import requests
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import override_settings

from schema_bridge.sample import SampleStore, schema

pytestmark = pytest.mark.integration

URL = "http://graphql.test/graphql"


def response_with(body, status=200):
    response = Mock()
    response.status_code = status
    response.ok = 200 <= status < 300
    response.json.return_value = body
    return response


def introspect_sample_schema(url, data=None, headers=None, timeout=None):
    """Stand-in for Session.post that answers from the sample schema."""
    payload = json.loads(data)
    result = schema.execute(
        payload["query"],
        operation_name=payload.get("operationName"),
        context_value=SimpleNamespace(sample_store=SampleStore()),
    )
    return response_with({"data": result.data})


@pytest.fixture
def session():
    with patch("schema_bridge.client.client.requests.Session") as session_cls:
        yield session_cls.return_value


def test_fetch_schema_writes_sdl(session, tmp_path):
    session.post.side_effect = introspect_sample_schema
    target = tmp_path / "schema.graphql"
    out = StringIO()

    call_command("fetch_schema", URL, output_file=str(target), stdout=out)

    content = target.read_text(encoding="utf-8")
    assert "type User {\n" in content
    assert "  post(id: ID!): Post\n" in content
    assert "schema {" not in content
    assert f"Fetching schema from {URL}" in out.getvalue()
    assert "Schema saved to" in out.getvalue()

    sent = json.loads(session.post.call_args.kwargs["data"])
    assert sent["query"].count("ofType") == 7
    assert session.post.call_args.args[0] == URL


def test_fetch_schema_stdout_and_depth(session):
    session.post.side_effect = introspect_sample_schema
    out = StringIO()

    call_command(
        "fetch_schema", URL, "--print", "--depth", "4", "--include-schema-block", stdout=out
    )

    assert "schema {\n  query: Query\n  mutation: Mutation\n}" in out.getvalue()
    sent = json.loads(session.post.call_args.kwargs["data"])
    assert sent["query"].count("ofType") == 4


def test_fetch_schema_uses_settings_defaults(session, tmp_path):
    session.post.side_effect = introspect_sample_schema
    target = tmp_path / "from-settings.graphql"

    with override_settings(
        SCHEMA_BRIDGE={
            "introspection_settings": {
                "endpoint_url": "http://configured.test/graphql",
                "output_path": str(target),
                "timeout_seconds": 2,
            }
        }
    ):
        call_command("fetch_schema", stdout=StringIO())

    assert target.exists()
    assert session.post.call_args.args[0] == "http://configured.test/graphql"
    assert session.post.call_args.kwargs["timeout"] == 2


def test_graphql_errors_abort_without_output(session, tmp_path):
    session.post.return_value = response_with({"errors": [{"message": "boom"}]})
    target = tmp_path / "schema.graphql"

    with patch("schema_bridge.introspection.fetcher.render_sdl") as render:
        with pytest.raises(CommandError, match="boom"):
            call_command("fetch_schema", URL, output_file=str(target), stdout=StringIO())

    render.assert_not_called()
    assert not target.exists()


def test_network_failure_aborts_without_output(session, tmp_path):
    session.post.side_effect = requests.ConnectionError("connection refused")
    target = tmp_path / "schema.graphql"

    with pytest.raises(CommandError, match="connection refused"):
        call_command("fetch_schema", URL, output_file=str(target), stdout=StringIO())

    assert not target.exists()


def test_unusable_payload_aborts_without_output(session, tmp_path):
    session.post.return_value = response_with({"data": {"__schema": {"types": "nope"}}})
    target = tmp_path / "schema.graphql"

    with pytest.raises(CommandError, match="types not found or not an array"):
        call_command("fetch_schema", URL, output_file=str(target), stdout=StringIO())

    assert not target.exists()


def test_unwritable_output_is_a_command_error(session, tmp_path):
    session.post.side_effect = introspect_sample_schema

    with pytest.raises(CommandError, match="could not write"):
        call_command("fetch_schema", URL, output_file=str(tmp_path), stdout=StringIO())


def test_captured_stdout_does_not_switch_to_print_mode(session, tmp_path):
    session.post.side_effect = introspect_sample_schema
    target = tmp_path / "schema.graphql"
    out = StringIO()

    call_command("fetch_schema", URL, output_file=str(target), stdout=out)

    assert target.exists()
    assert "type User {" not in out.getvalue()
