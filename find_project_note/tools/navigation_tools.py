"""Navigation MCP tools.

This module provides the navigation surface of the server:
- activate_note: Navigation event; applies preview/source mode from tags
- get_active_note: Report the session's active note and view mode
- open_project_note: Open the nearest ancestor note tagged with the primary tag
- open_moc_note: Open the nearest ancestor note tagged with the secondary tag

All tools delegate to core operations in find_project_note.core.
"""
from __future__ import annotations

import logging
from typing import Any

from mcp.server.fastmcp import Context

from find_project_note.server import mcp
from find_project_note.session import get_session_view, get_state, wait_for_quiet
from find_project_note.models import (
    ActivateNoteInput,
    GetActiveNoteInput,
    OpenAncestorNoteInput,
)
from find_project_note.core.resolve_operations import resolve_project_note
from find_project_note.core.view_mode_operations import handle_note_activated
from find_project_note.data_models import NotePath, TagType

logger = logging.getLogger(__name__)


# ==============================================================================
# NAVIGATION EVENTS
# ==============================================================================


@mcp.tool()
async def activate_note(
    input: ActivateNoteInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Make a note the session's active note and pick its view mode.

    Notes tagged with any force-preview tag open in preview mode, all others
    in source mode. Rapid successive calls are debounced: an activation that
    is overtaken by a newer one returns status "superseded" without reading
    the note.

    Args:
        input (ActivateNoteInput): Validated input containing:
            - title (str): Note identifier (folders separated by /)

    Returns:
        {
            "vault": str,
            "note": str,
            "tags": list[str],
            "mode": "preview" | "source",
            "changed": bool,
            "status": "active" | "superseded"
        }

    Error Handling:
        - ValidationError: Invalid title format, empty title, or path traversal attempt
        - Missing or unreadable note → treated as untagged (source mode)
    """
    state = get_state()
    view = get_session_view(ctx)
    note = NotePath.from_title(input.title)
    view.active_note = note

    if not await wait_for_quiet(view, state.settings.debounce_ms):
        logger.debug("Activation of '%s' superseded by a newer event", note)
        return {"vault": state.vault.name, "note": note.as_posix(), "status": "superseded"}

    outcome = handle_note_activated(state.store, note, state.settings, view)
    return {"vault": state.vault.name, **outcome.as_payload(), "status": "active"}


@mcp.tool()
async def get_active_note(
    input: GetActiveNoteInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Report the session's active note and its current view mode.

    Returns:
        {"vault": str, "note": str | None, "mode": str, "reopen_count": int}
    """
    state = get_state()
    return {"vault": state.vault.name, **get_session_view(ctx).as_payload()}


# ==============================================================================
# ANCESTOR LOOKUP COMMANDS
# ==============================================================================


async def _open_ancestor_note(
    tag_type: TagType,
    input: OpenAncestorNoteInput,
    ctx: Context | None,
) -> dict[str, Any]:
    state = get_state()
    view = get_session_view(ctx)
    start = NotePath.from_title(input.title) if input.title else view.active_note
    if start is None:
        return {"vault": state.vault.name, "status": "no_active_note"}

    result = resolve_project_note(
        state.store,
        start,
        tag_type,
        state.settings,
        skip_self_match=input.skip_self_match,
    )
    payload: dict[str, Any] = {"vault": state.vault.name, "from": start.as_posix(), **result.as_payload()}

    target = result.target
    if target is None:
        logger.info("Lookup from '%s' in vault '%s': %s", start, state.vault.name, result.notice)
        return payload

    # Opening a note overrides any activation still waiting on the debounce.
    view.generation += 1
    view.active_note = target
    payload["view"] = handle_note_activated(state.store, target, state.settings, view).as_payload()
    return payload


@mcp.tool()
async def open_project_note(
    input: OpenAncestorNoteInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Open the nearest ancestor folder note tagged with the project tag.

    Walks from the note's own folder up to the vault root looking for folder
    notes (a note named after its folder, e.g. ``Alpha/Alpha.md``) whose
    front-matter tags contain the configured primary tag (default "HOC").
    Falls back to the vault-root README.md when nothing matches.

    Args:
        input (OpenAncestorNoteInput): Validated input containing:
            - title (str, optional): Starting note (omit to use the active note)
            - skip_self_match (bool): Walk past the starting note when it is
              itself the tagged folder note (default True)

    Returns:
        {
            "vault": str,
            "from": str,
            "status": "found" | "fallback" | "not_found" | "no_active_note",
            "tag": str,
            "note": str | None,
            "current_is_marked": bool,
            "notice": str | None,
            "view": dict            # present when a note was opened
        }

    Examples:
        - Use when: Jumping from a deep working note to its project overview
        - status "not_found" → show ``notice`` to the user
    """
    return await _open_ancestor_note(TagType.PRIMARY, input, ctx)


@mcp.tool()
async def open_moc_note(
    input: OpenAncestorNoteInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Open the nearest ancestor folder note tagged with the map-of-content tag.

    Same walk as open_project_note() but matches the configured secondary
    tag (default "MOC").

    Args:
        input (OpenAncestorNoteInput): Validated input containing:
            - title (str, optional): Starting note (omit to use the active note)
            - skip_self_match (bool): Walk past the starting note when it is
              itself the tagged folder note (default True)
    """
    return await _open_ancestor_note(TagType.SECONDARY, input, ctx)
