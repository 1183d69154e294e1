# tests/test_firestore_store.py
"""FirestoreUserStore against a mocked google.cloud.firestore.Client."""

from unittest.mock import MagicMock

import pytest
from google.api_core.exceptions import ServiceUnavailable

from users_api.db.firestore import FirestoreUserStore, create_client
from users_api.db.store import StartupFailure, StoreError, UserNotFound
from users_api.models.users import UserRecord


def _snapshot(doc_id, data, exists=True):
    snap = MagicMock()
    snap.id = doc_id
    snap.exists = exists
    snap.to_dict.return_value = data if exists else None
    return snap


@pytest.fixture()
def fs_client():
    return MagicMock()


@pytest.fixture()
def collection(fs_client):
    return fs_client.collection.return_value


@pytest.fixture()
def fs_store(fs_client):
    return FirestoreUserStore(fs_client, "users")


def test_add_user_returns_generated_id(fs_store, fs_client, collection):
    doc_ref = MagicMock()
    doc_ref.id = "Xy12abcDEF34ghiJKL56"
    collection.add.return_value = (MagicMock(), doc_ref)

    user_id = fs_store.add_user(UserRecord(name="Ada", email="ada@example.com"))

    assert user_id == "Xy12abcDEF34ghiJKL56"
    fs_client.collection.assert_called_with("users")
    collection.add.assert_called_once_with({"name": "Ada", "email": "ada@example.com"})


def test_add_user_wraps_api_errors(fs_store, collection):
    collection.add.side_effect = ServiceUnavailable("backend down")
    with pytest.raises(StoreError):
        fs_store.add_user(UserRecord(name="a", email="b"))


def test_get_user_reads_document(fs_store, collection):
    collection.document.return_value.get.return_value = _snapshot(
        "abc", {"name": "Grace", "email": "grace@example.com", "age": 85}
    )
    assert fs_store.get_user("abc") == UserRecord(name="Grace", email="grace@example.com")
    collection.document.assert_called_with("abc")


def test_get_user_missing_document(fs_store, collection):
    collection.document.return_value.get.return_value = _snapshot("abc", None, exists=False)
    with pytest.raises(UserNotFound):
        fs_store.get_user("abc")


def test_get_user_wraps_api_errors(fs_store, collection):
    collection.document.return_value.get.side_effect = ServiceUnavailable("timeout")
    with pytest.raises(StoreError) as exc_info:
        fs_store.get_user("abc")
    assert not isinstance(exc_info.value, UserNotFound)


def test_get_user_wraps_invalid_paths(fs_store, collection):
    collection.document.side_effect = ValueError("A document must have an even number of path elements")
    with pytest.raises(StoreError):
        fs_store.get_user("a/b")


def test_scan_users_reads_whole_stream(fs_store, collection):
    collection.stream.return_value = iter(
        [
            _snapshot("a", {"name": "A", "email": "a@x"}),
            _snapshot("b", {"name": "B"}),
        ]
    )
    result = fs_store.scan_users()
    assert not result.truncated
    assert [(u.id, u.user.name, u.user.email) for u in result.users] == [
        ("a", "A", "a@x"),
        ("b", "B", ""),
    ]


def test_scan_users_stops_at_first_error(fs_store, collection):
    def stream():
        yield _snapshot("a", {"name": "A", "email": "a@x"})
        raise ServiceUnavailable("stream reset")

    collection.stream.return_value = stream()
    result = fs_store.scan_users()

    assert result.truncated
    assert isinstance(result.error.__cause__, ServiceUnavailable)
    assert [u.id for u in result.users] == ["a"]


def test_close_closes_client(fs_store, fs_client):
    fs_store.close()
    fs_client.close.assert_called_once_with()


def test_create_client_missing_credentials_file(tmp_path):
    with pytest.raises(StartupFailure):
        create_client(str(tmp_path / "missing.json"), "demo-project")
