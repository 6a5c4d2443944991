"""Pydantic input models for navigation tools.

This module defines input models for:
- Activating a note (navigation event)
- Reading the active note
- Opening the project / map-of-content note of a note
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .base import BaseNoteInput, validate_note_title


class ActivateNoteInput(BaseNoteInput):
    """Input model for activate_note tool.

    Examples:
        >>> ActivateNoteInput(title="Projects/Alpha/Design/Spec")
    """

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"title": "Projects/Alpha/Design/Spec"},
                {"title": "README"}
            ]
        }


class GetActiveNoteInput(BaseModel):
    """Input model for get_active_note tool. Takes no parameters."""

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [{}]
        }


class OpenAncestorNoteInput(BaseModel):
    """Input model for open_project_note and open_moc_note tools.

    Examples:
        >>> OpenAncestorNoteInput()
        >>> OpenAncestorNoteInput(title="Projects/Alpha/Alpha", skip_self_match=False)
    """

    title: Optional[str] = Field(
        None,
        description=(
            "Note to start from (path without .md extension). "
            "Omit to start from the session's active note."
        ),
        examples=["Projects/Alpha/Design/Spec"]
    )

    skip_self_match: bool = Field(
        True,
        description=(
            "When the starting note is itself a tagged folder note, "
            "walk past it to the next tagged ancestor instead of returning it."
        )
    )

    @field_validator('title')
    @classmethod
    def validate_title(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return validate_note_title(v)

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {},
                {"title": "Projects/Alpha/Alpha", "skip_self_match": False}
            ]
        }
