"""Tests for squad_catalog/storage/json_file.py"""

import json
import os
from unittest.mock import patch

import pytest

from squad_catalog.catalog import PersistenceError
from squad_catalog.storage import JsonFileCatalogStore


class TestJsonFileCatalogStore:
    def test_missing_file_reads_empty(self, tmp_path):
        store = JsonFileCatalogStore(tmp_path / "catalog.json")
        assert store.read_catalog() == []

    def test_round_trip(self, tmp_path, hoodie_product):
        store = JsonFileCatalogStore(tmp_path / "data" / "catalog.json")
        store.replace_catalog([hoodie_product])
        assert store.read_catalog() == [hoodie_product]

    def test_file_holds_single_document(self, tmp_path, hoodie_product):
        path = tmp_path / "catalog.json"
        JsonFileCatalogStore(path).replace_catalog([hoodie_product])

        document = json.loads(path.read_text(encoding="utf-8"))
        assert list(document) == ["products"]
        assert document["products"][0]["handle"] == "hoodie"

    def test_no_temp_files_left(self, tmp_path, hoodie_product):
        JsonFileCatalogStore(tmp_path / "catalog.json").replace_catalog([hoodie_product])
        assert os.listdir(tmp_path) == ["catalog.json"]

    def test_failed_write_keeps_previous_file(self, tmp_path, hoodie_product):
        path = tmp_path / "catalog.json"
        store = JsonFileCatalogStore(path)
        store.replace_catalog([hoodie_product])

        with patch("squad_catalog.storage.json_file.os.replace", side_effect=OSError("read-only")):
            with pytest.raises(PersistenceError):
                store.replace_catalog([])

        assert [p.handle for p in store.read_catalog()] == ["hoodie"]
        assert os.listdir(tmp_path) == ["catalog.json"]

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(PersistenceError):
            JsonFileCatalogStore(path).read_catalog()

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_bytes(b"\xff\xfe{")
        with pytest.raises(PersistenceError):
            JsonFileCatalogStore(path).read_catalog()

    def test_delete(self, tmp_path, hoodie_product):
        path = tmp_path / "catalog.json"
        store = JsonFileCatalogStore(path)
        store.replace_catalog([hoodie_product])
        store.delete_catalog()

        assert not path.exists()
        assert store.read_catalog() == []

    def test_delete_missing_file(self, tmp_path):
        JsonFileCatalogStore(tmp_path / "catalog.json").delete_catalog()
