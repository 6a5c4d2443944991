"""Pydantic input models for MCP tool validation.

Architecture:
- base: BaseNoteInput and the shared note title validator
- navigation_models: Input models for navigation and ancestor lookup tools
- settings_models: Input models for settings tools

Usage:
    from find_project_note.models import ActivateNoteInput, OpenAncestorNoteInput
"""

from .base import BaseNoteInput, validate_note_title
from .navigation_models import (
    ActivateNoteInput,
    GetActiveNoteInput,
    OpenAncestorNoteInput,
)
from .settings_models import (
    GetSettingsInput,
    UpdateSettingsInput,
)

__all__ = [
    # Base models
    "BaseNoteInput",
    "validate_note_title",
    # Navigation models
    "ActivateNoteInput",
    "GetActiveNoteInput",
    "OpenAncestorNoteInput",
    # Settings models
    "GetSettingsInput",
    "UpdateSettingsInput",
]
