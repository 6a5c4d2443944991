"""Configuration loading: vault location and persisted settings."""

import logging
from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from find_project_note.constants import CONFIG_PATH, SETTINGS_RELATIVE_PATH
from find_project_note.data_models import Settings, VaultMetadata

logger = logging.getLogger(__name__)

_SETTINGS_FIELDS = {f.name for f in fields(Settings)}


def load_vault_configuration(config_path: Path = CONFIG_PATH) -> VaultMetadata:
    """Load and validate the vault configuration file.

    Args:
        config_path: Path to the YAML configuration file. Defaults to ``vault.yaml``
        next to the package, or ``$FIND_PROJECT_NOTE_CONFIG`` when set.

    Returns:
        :class:`VaultMetadata` with the normalized vault root.

    Raises:
        FileNotFoundError: If the configuration file is missing.
        ValueError: If the file does not provide a ``path`` string.
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Vault configuration file not found at {config_path}")

    raw_config = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw_config, dict):
        raise ValueError("Vault configuration must be a mapping with 'name' and 'path' keys")

    raw_path = raw_config.get("path")
    if not isinstance(raw_path, str) or not raw_path.strip():
        raise ValueError("Vault configuration is missing a valid 'path' string")

    resolved_path = Path(raw_path).expanduser()
    try:
        resolved_path = resolved_path.resolve(strict=False)
    except RuntimeError:
        # resolve can raise if underlying filesystem is inaccessible; fall back to expanded path
        pass

    name = raw_config.get("name") or resolved_path.name
    return VaultMetadata(name=str(name).strip(), path=resolved_path)


def settings_path(vault: VaultMetadata) -> Path:
    """Location of the persisted settings record inside ``vault``."""
    return vault.path / SETTINGS_RELATIVE_PATH


def _coerce_settings(stored: dict[str, Any]) -> dict[str, Any]:
    """Keep the stored values that are valid, warning about the rest.

    Unknown keys and values of the wrong type are dropped so the default
    for that key applies.
    """
    values: dict[str, Any] = {}
    for key, value in stored.items():
        if key not in _SETTINGS_FIELDS:
            logger.warning("Ignoring unknown settings key '%s'", key)
            continue

        if key in ("primary_tag", "secondary_tag", "fleeting_folder_name"):
            if not isinstance(value, str):
                logger.warning("Ignoring setting '%s': expected a string, got %r", key, value)
                continue
        elif key == "force_preview_tags":
            if isinstance(value, str):
                value = [value]
            if not isinstance(value, (list, tuple, set)) or not all(isinstance(t, str) for t in value):
                logger.warning("Ignoring setting '%s': expected a list of strings, got %r", key, value)
                continue
            value = frozenset(value)
        elif key == "debounce_ms":
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                logger.warning("Ignoring setting '%s': expected a non-negative integer, got %r", key, value)
                continue

        values[key] = value

    return values


def load_settings(vault: VaultMetadata) -> Settings:
    """Load settings for ``vault``, merging stored values over the defaults.

    A missing, unreadable or malformed file yields the defaults; missing or
    invalid keys fall back to their default individually.
    """
    path = settings_path(vault)
    if not path.is_file():
        logger.info("No stored settings for vault '%s'; using defaults", vault.name)
        return Settings()

    try:
        stored = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        logger.warning("Could not load settings from %s; using defaults: %s", path, exc)
        return Settings()

    if not isinstance(stored, dict):
        logger.warning("Settings file %s does not contain a mapping; using defaults", path)
        return Settings()

    return Settings().updated(**_coerce_settings(stored))


def save_settings(vault: VaultMetadata, settings: Settings) -> Path:
    """Write the full settings record for ``vault``."""
    path = settings_path(vault)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(settings.as_payload(), sort_keys=False), encoding="utf-8")
    logger.info("Saved settings for vault '%s' to %s", vault.name, path)
    return path
