"""Tests for squad_catalog/common/config_loader.py"""

import pytest

from squad_catalog.common.config_loader import (
    DEFAULT_SETTINGS,
    get_currency_symbol,
    get_storage_settings,
    load_config,
    load_settings,
    merge_settings,
)


class TestMergeSettings:
    def test_nested_override(self):
        result = merge_settings({"a": {"x": 1, "y": 2}, "b": 3}, {"a": {"y": 5}})
        assert result == {"a": {"x": 1, "y": 5}, "b": 3}

    def test_inputs_not_modified(self):
        base = {"a": {"x": 1}}
        merge_settings(base, {"a": {"x": 2}})
        assert base == {"a": {"x": 1}}


class TestGetStorageSettings:
    def test_env_overrides_firestore(self):
        settings = {"storage": {"backend": "firestore", "firestore": {"project_id": "from-yaml"}}}
        environ = {"FIRESTORE_PROJECT_ID": "from-env", "FIRESTORE_API_KEY": "key"}

        storage = get_storage_settings(settings, environ)

        assert storage["backend"] == "firestore"
        assert storage["firestore"]["project_id"] == "from-env"
        assert storage["firestore"]["api_key"] == "key"
        assert storage["firestore"]["database"] == "(default)"

    def test_defaults_fill_missing_keys(self):
        storage = get_storage_settings({}, {})
        assert storage["backend"] == "json"
        assert storage["json_path"] == "data/catalog.json"

    def test_empty_env_value_ignored(self):
        settings = {"storage": {"firestore": {"project_id": "from-yaml"}}}
        storage = get_storage_settings(settings, {"FIRESTORE_PROJECT_ID": ""})
        assert storage["firestore"]["project_id"] == "from-yaml"


class TestGetCurrencySymbol:
    def test_from_settings(self):
        assert get_currency_symbol({"display": {"currency_symbol": "$"}}) == "$"

    def test_default(self):
        assert get_currency_symbol({}) == DEFAULT_SETTINGS["display"]["currency_symbol"]


class TestLoadFromConfigFiles:
    """Tests that load the real config YAML from the repo."""

    def test_load_settings_has_sections(self):
        settings = load_settings()
        assert "storage" in settings
        assert "display" in settings

    def test_load_settings_backend(self):
        assert load_settings()["storage"]["backend"] in {"memory", "json", "firestore"}

    def test_missing_settings_file_uses_defaults(self):
        assert load_settings("nonexistent_file.yaml") == DEFAULT_SETTINGS

    def test_load_config_missing_file(self):
        with pytest.raises(FileNotFoundError):
            load_config("nonexistent_file.yaml")
