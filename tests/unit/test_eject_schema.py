import json
import pytest
from io import StringIO
from django.core.management import call_command
from django.core.management.base import CommandError

pytestmark = pytest.mark.unit


def test_eject_schema_command():
    """Test the eject_schema management command against the sample schema."""
    out = StringIO()
    call_command("eject_schema", stdout=out)
    output = out.getvalue()

    assert "type User {" in output
    assert "type Post {" in output
    assert "  posts: [Post!]!" in output
    assert "  searchUsers(name: String): [User!]!" in output
    assert "  createUser(name: String!, email: String!, age: Int!): User!" in output
    assert "__Schema" not in output
    assert "schema {" not in output


def test_eject_schema_with_schema_block():
    out = StringIO()
    call_command("eject_schema", include_schema_block=True, stdout=out)

    assert out.getvalue().startswith("schema {\n  query: Query\n  mutation: Mutation\n}\n\n")


def test_eject_schema_json():
    """Test JSON output."""
    out = StringIO()
    call_command("eject_schema", json=True, stdout=out)

    data = json.loads(out.getvalue())
    assert "__schema" in data
    assert data["__schema"]["queryType"] == {"name": "Query"}


def test_eject_schema_to_file(tmp_path):
    target = tmp_path / "schema.graphql"
    out = StringIO()
    call_command("eject_schema", output_file=str(target), stdout=out)

    assert "type Query {" in target.read_text(encoding="utf-8")
    assert "Schema written to" in out.getvalue()


def test_eject_schema_rejects_invalid_depth():
    with pytest.raises(CommandError, match="type_ref_depth"):
        call_command("eject_schema", depth=0, stdout=StringIO())


def test_eject_schema_unwritable_output(tmp_path):
    with pytest.raises(CommandError, match="Could not write"):
        call_command("eject_schema", output_file=str(tmp_path), stdout=StringIO())
