"""Module-level constants for the Find Project Note server."""

import os
from pathlib import Path

# Configuration
CONFIG_ENV_VAR = "FIND_PROJECT_NOTE_CONFIG"
CONFIG_PATH = Path(os.environ.get(CONFIG_ENV_VAR, Path(__file__).parent.parent / "vault.yaml"))
SETTINGS_RELATIVE_PATH = Path(".obsidian") / "plugins" / "find-project-note" / "settings.yaml"

# Notes
NOTE_SUFFIX = ".md"
FALLBACK_NOTE_NAME = "README.md"
FRONTMATTER_DELIMITER = "---"
TAGS_KEY_LINE = "tags:"

# Settings defaults
DEFAULT_PRIMARY_TAG = "HOC"
DEFAULT_SECONDARY_TAG = "MOC"
DEFAULT_FORCE_PREVIEW_TAGS = frozenset({"HOC", "MOC"})
DEFAULT_DEBOUNCE_MS = 300
DEFAULT_FLEETING_FOLDER_NAME = "00.Fleeting"

# Logging
LOG_LEVEL = "INFO"
