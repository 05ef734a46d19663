"""
Key-value storage backends.

MongoStorage runs against a fake collection implementing the subset of
pymongo's Collection API the backend uses; no MongoDB server required.
"""
import json

import pytest

from shopdesk.config import FileStorage, MemoryStorage, MongoStorage, Settings, build_storage
from tests.fakes import FakeCollection


def test_memory_storage_set_get_delete():
    s = MemoryStorage()
    assert s.get("currentUser") is None
    s.set("currentUser", "{}")
    assert s.get("currentUser") == "{}"
    s.delete("currentUser")
    assert s.get("currentUser") is None
    s.delete("currentUser")  # missing key is a no-op


def test_file_storage_persists_across_instances(tmp_path):
    path = tmp_path / "nested" / "storage.json"
    FileStorage(str(path)).set("currentUser", '{"id":"1"}')

    assert FileStorage(str(path)).get("currentUser") == '{"id":"1"}'
    assert json.loads(path.read_text(encoding="utf-8")) == {"currentUser": '{"id":"1"}'}


def test_file_storage_delete_keeps_other_keys(tmp_path):
    path = tmp_path / "storage.json"
    s = FileStorage(str(path))
    s.set("currentUser", "a")
    s.set("theme", "dark")
    s.delete("currentUser")

    assert s.get("currentUser") is None
    assert s.get("theme") == "dark"


def test_file_storage_unreadable_file_reads_as_empty(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("not json at all", encoding="utf-8")
    s = FileStorage(str(path))

    assert s.get("currentUser") is None
    s.set("currentUser", "x")
    assert s.get("currentUser") == "x"


def test_mongo_storage_roundtrip_on_fake_collection():
    collection = FakeCollection()
    s = MongoStorage(collection)

    s.set("currentUser", "v1")
    s.set("currentUser", "v2")
    assert collection.docs["currentUser"] == {"_id": "currentUser", "value": "v2"}
    assert s.get("currentUser") == "v2"

    s.delete("currentUser")
    assert s.get("currentUser") is None


def test_mongo_storage_requires_uri():
    with pytest.raises(RuntimeError):
        MongoStorage.from_settings(Settings(_env_file=None, storage_backend="mongo"))


def test_build_storage_selects_backend(tmp_path):
    memory = build_storage(Settings(_env_file=None, storage_backend="memory"))
    assert isinstance(memory, MemoryStorage)

    file_backed = build_storage(
        Settings(_env_file=None, storage_backend="file", storage_path=str(tmp_path / "s.json"))
    )
    assert isinstance(file_backed, FileStorage)
    assert file_backed.path == str(tmp_path / "s.json")


def test_file_storage_keeps_non_string_entries_on_write(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text(json.dumps({"settings": {"theme": "dark"}}), encoding="utf-8")
    s = FileStorage(str(path))

    assert s.get("settings") == {"theme": "dark"}
    s.set("currentUser", "x")
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "settings": {"theme": "dark"},
        "currentUser": "x",
    }


def test_mongo_storage_returns_stored_value_unchanged():
    collection = FakeCollection()
    collection.docs["currentUser"] = {"_id": "currentUser", "value": {"id": "1"}}

    assert MongoStorage(collection).get("currentUser") == {"id": "1"}
