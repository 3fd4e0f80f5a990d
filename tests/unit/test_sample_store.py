"""
Unit tests for the in-memory sample store.
"""

import pytest

from schema_bridge.sample import SampleStore

pytestmark = pytest.mark.unit


@pytest.fixture
def store():
    return SampleStore()


def test_seed_data(store):
    assert [u.name for u in store.list_users()] == ["John Doe", "Jane Smith", "Bob Johnson"]
    assert [p.title for p in store.list_posts()] == ["First Post", "Second Post", "Third Post"]


def test_lookups(store):
    assert store.get_user("2").email == "jane@example.com"
    assert store.get_user("404") is None
    assert store.get_post("3").author_id == "1"
    assert store.get_post("404") is None
    assert [p.id for p in store.posts_by_author("1")] == ["1", "3"]


def test_search_is_case_insensitive(store):
    assert [u.name for u in store.search_users("JOHN")] == ["John Doe", "Bob Johnson"]
    assert len(store.search_users(None)) == 3
    assert len(store.search_users("")) == 3
    assert store.search_users("nobody") == []


def test_create_user_assigns_next_id(store):
    user = store.create_user("Alice", "alice@example.com", 28)

    assert user.id == "4"
    assert store.get_user("4").name == "Alice"


def test_ids_are_not_reused_after_delete(store):
    assert store.delete_user("2") is True
    assert store.create_user("Carol", "carol@example.com", 40).id == "4"


def test_update_user_changes_only_given_fields(store):
    user = store.update_user("1", age=31)

    assert user.age == 31
    assert user.name == "John Doe"
    assert store.update_user("404", name="x") is None


def test_delete_missing_user(store):
    assert store.delete_user("404") is False
    assert len(store.list_users()) == 3


def test_lookups_return_copies(store):
    user = store.get_user("1")
    user.name = "Changed"
    assert store.get_user("1").name == "John Doe"


def test_stores_are_independent():
    first, second = SampleStore(), SampleStore()
    first.delete_user("1")
    assert second.get_user("1") is not None
