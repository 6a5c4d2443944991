"""Base Pydantic models for MCP tool input validation.

Base Models:
- BaseNoteInput: Common validation for note identifiers
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


def validate_note_title(v: str) -> str:
    """Validate a note identifier for safety and format.

    Enforces:
    - Non-empty title
    - No path traversal attempts (.., .) and no empty folder segments
    - Relative path only (no absolute paths)
    - Strips .md extension if present (normalized internally)

    Raises:
        ValueError: If title contains invalid characters or patterns
    """
    cleaned = v.strip()

    if not cleaned:
        raise ValueError(
            "Note title cannot be empty. "
            "Provide a valid note identifier like 'Projects/Alpha/Alpha'."
        )

    if cleaned.startswith("/"):
        raise ValueError(
            "Note title must be a relative path within the vault. "
            "Do not start with '/'. "
            f"Invalid title: '{cleaned}'"
        )

    parts = cleaned.split("/")
    if any(part in {".", ".."} for part in parts):
        raise ValueError(
            "Note title cannot contain '.' or '..' path segments. "
            f"Invalid title: '{cleaned}'"
        )
    if any(not part for part in parts):
        raise ValueError(
            "Note title cannot contain empty folder segments. "
            f"Invalid title: '{cleaned}'"
        )

    if cleaned.lower().endswith(".md"):
        cleaned = cleaned[:-3]

    if not cleaned or cleaned.endswith("/"):
        raise ValueError(
            "Note title cannot be just '.md'. "
            "Provide a valid note name."
        )

    return cleaned


class BaseNoteInput(BaseModel):
    """Base model for operations on a single note.

    All note-related input models should inherit from this class.
    """

    title: str = Field(
        min_length=1,
        description=(
            "Note identifier (path without .md extension). "
            "Examples: 'Projects/Alpha/Alpha', 'Projects/Alpha/Design/Spec'. "
            "Forward slashes for folders, case-sensitive."
        ),
        examples=["Projects/Alpha/Alpha", "Areas/Health/Sleep log", "README"]
    )

    @field_validator('title')
    @classmethod
    def validate_title(cls, v: str) -> str:
        return validate_note_title(v)
