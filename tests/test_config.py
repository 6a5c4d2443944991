"""Tests for vault configuration and settings persistence."""

import pytest
import yaml

from find_project_note.config import (
    load_settings,
    load_vault_configuration,
    save_settings,
    settings_path,
)
from find_project_note.data_models import Settings, VaultMetadata


@pytest.fixture
def vault(tmp_path):
    vault_path = tmp_path / "vault"
    vault_path.mkdir()
    return VaultMetadata(name="test", path=vault_path)


def write_settings(vault, payload):
    path = settings_path(vault)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(payload), encoding="utf-8")


class TestVaultConfiguration:
    def test_loads_name_and_path(self, tmp_path):
        config = tmp_path / "vault.yaml"
        config.write_text(f"name: personal\npath: {tmp_path}\n", encoding="utf-8")

        vault = load_vault_configuration(config)

        assert vault.name == "personal"
        assert vault.path == tmp_path.resolve()

    def test_name_defaults_to_folder_name(self, tmp_path):
        config = tmp_path / "vault.yaml"
        config.write_text(f"path: {tmp_path}\n", encoding="utf-8")
        assert load_vault_configuration(config).name == tmp_path.resolve().name

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_vault_configuration(tmp_path / "missing.yaml")

    def test_missing_path_raises(self, tmp_path):
        config = tmp_path / "vault.yaml"
        config.write_text("name: personal\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_vault_configuration(config)


class TestSettings:
    def test_defaults_when_no_file(self, vault):
        settings = load_settings(vault)
        assert settings == Settings()
        assert settings.primary_tag == "HOC"
        assert settings.secondary_tag == "MOC"
        assert settings.force_preview_tags == frozenset({"HOC", "MOC"})
        assert settings.debounce_ms == 300
        assert settings.fleeting_folder_name == "00.Fleeting"

    def test_stored_values_merge_over_defaults(self, vault):
        write_settings(vault, {"primary_tag": "project", "debounce_ms": 50})

        settings = load_settings(vault)

        assert settings.primary_tag == "project"
        assert settings.debounce_ms == 50
        assert settings.secondary_tag == "MOC"

    def test_unknown_keys_are_ignored(self, vault, caplog):
        write_settings(vault, {"HocTag": "old", "secondary_tag": "index"})

        settings = load_settings(vault)

        assert settings.secondary_tag == "index"
        assert "HocTag" in caplog.text

    def test_single_string_force_preview_tag(self, vault):
        write_settings(vault, {"force_preview_tags": "HOC"})
        assert load_settings(vault).force_preview_tags == frozenset({"HOC"})

    @pytest.mark.parametrize(
        "payload",
        [
            {"primary_tag": 2024},
            {"force_preview_tags": [1, 2]},
            {"debounce_ms": -1},
            {"debounce_ms": True},
        ],
    )
    def test_wrong_types_fall_back_to_default(self, vault, payload, caplog):
        write_settings(vault, payload)

        settings = load_settings(vault)

        assert settings == Settings()
        (key,) = payload
        assert key in caplog.text

    def test_valid_keys_survive_an_invalid_sibling(self, vault):
        write_settings(vault, {"primary_tag": 2024, "secondary_tag": "index"})

        settings = load_settings(vault)

        assert settings.primary_tag == "HOC"
        assert settings.secondary_tag == "index"

    def test_non_mapping_uses_defaults(self, vault, caplog):
        path = settings_path(vault)
        path.parent.mkdir(parents=True)
        path.write_text("- a\n- b\n", encoding="utf-8")

        assert load_settings(vault) == Settings()
        assert "mapping" in caplog.text

    def test_invalid_yaml_uses_defaults(self, vault, caplog):
        path = settings_path(vault)
        path.parent.mkdir(parents=True)
        path.write_text("primary_tag: [unclosed\n", encoding="utf-8")

        assert load_settings(vault) == Settings()
        assert "Could not load settings" in caplog.text

    def test_save_writes_full_record(self, vault):
        settings = Settings().updated(primary_tag="project", force_preview_tags=["B", "A"])

        path = save_settings(vault, settings)

        stored = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert stored == {
            "primary_tag": "project",
            "secondary_tag": "MOC",
            "force_preview_tags": ["A", "B"],
            "debounce_ms": 300,
            "fleeting_folder_name": "00.Fleeting",
        }
        assert load_settings(vault) == settings
