"""Tests for the JSON-file key-value store."""

import pytest

from pantry.infrastructure.storage.json_file_store import JsonFileStore


@pytest.fixture
def store(tmp_path):
    return JsonFileStore(tmp_path / "data", prefix="test_")


class TestJsonFileStore:

    def test_missing_key_reads_as_none(self, store):
        assert store.get("products") is None

    def test_set_then_get(self, store):
        store.set("products", [{"id": "1"}])
        assert store.get("products") == [{"id": "1"}]

    def test_set_creates_prefixed_file(self, store):
        store.set("inventory", [])
        assert (store.directory / "test_inventory.json").exists()

    def test_none_value_rejected(self, store):
        with pytest.raises(ValueError, match="remove"):
            store.set("products", None)

    def test_corrupted_json_reads_as_none(self, store):
        store.set("products", [])
        (store.directory / "test_products.json").write_text("{not json", encoding="utf-8")
        assert store.get("products") is None

    def test_unreadable_key_reads_as_none(self, store):
        (store.directory / "test_products.json").mkdir(parents=True)
        assert store.get("products") is None

    def test_remove(self, store):
        store.set("products", [])
        store.remove("products")
        store.remove("products")
        assert store.get("products") is None

    def test_clear_only_touches_prefixed_files(self, store):
        store.set("products", [])
        store.set("shopping-list", [])
        foreign = store.directory / "other.json"
        foreign.write_text("[]", encoding="utf-8")

        store.clear()

        assert store.keys() == []
        assert foreign.exists()

    def test_keys(self, store):
        store.set("products", [])
        store.set("inventory", [])
        assert store.keys() == ["inventory", "products"]

    def test_clear_on_missing_directory(self, tmp_path):
        JsonFileStore(tmp_path / "nowhere").clear()
