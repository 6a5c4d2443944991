"""Settings MCP tools."""

import logging
from typing import Any

from mcp.server.fastmcp import Context

from find_project_note.server import mcp
from find_project_note.session import get_state
from find_project_note.models import GetSettingsInput, UpdateSettingsInput

logger = logging.getLogger(__name__)


@mcp.tool()
async def get_find_project_note_settings(
    input: GetSettingsInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Return the current settings record.

    Returns:
        {
            "vault": str,
            "settings": {
                "primary_tag": str,
                "secondary_tag": str,
                "force_preview_tags": list[str],
                "debounce_ms": int,
                "fleeting_folder_name": str
            }
        }
    """
    state = get_state()
    return {"vault": state.vault.name, "settings": state.settings.as_payload()}


@mcp.tool()
async def update_find_project_note_settings(
    input: UpdateSettingsInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Change one or more settings and save the full record.

    Args:
        input (UpdateSettingsInput): Validated input; omitted fields keep
            their current value.

    Returns:
        {"vault": str, "settings": dict, "fields_updated": list[str], "status": str}

    Error Handling:
        - ValidationError: Empty tag names or a negative debounce
    """
    state = get_state()
    changes = input.changes()
    if not changes:
        return {
            "vault": state.vault.name,
            "settings": state.settings.as_payload(),
            "fields_updated": [],
            "status": "unchanged",
        }

    settings = state.update_settings(**changes)
    logger.info("Settings updated for vault '%s' (fields=%s)", state.vault.name, ", ".join(sorted(changes)))
    return {
        "vault": state.vault.name,
        "settings": settings.as_payload(),
        "fields_updated": sorted(changes),
        "status": "updated",
    }
