"""Pydantic input models for settings tools."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class GetSettingsInput(BaseModel):
    """Input model for get_find_project_note_settings tool. Takes no parameters."""

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [{}]
        }


class UpdateSettingsInput(BaseModel):
    """Input model for update_find_project_note_settings tool.

    Only the fields that are given are changed; the full record is saved.

    Examples:
        >>> UpdateSettingsInput(primary_tag="project")
        >>> UpdateSettingsInput(force_preview_tags=["HOC", "MOC", "Archive"])
    """

    primary_tag: Optional[str] = Field(
        None,
        description="Tag marking project notes (without #). Default 'HOC'.",
        examples=["HOC", "project"]
    )
    secondary_tag: Optional[str] = Field(
        None,
        description="Tag marking map-of-content notes (without #). Default 'MOC'.",
        examples=["MOC"]
    )
    force_preview_tags: Optional[list[str]] = Field(
        None,
        description="Notes carrying any of these tags open in preview mode.",
        examples=[["HOC", "MOC"]]
    )
    debounce_ms: Optional[int] = Field(
        None,
        ge=0,
        description="Delay applied to navigation events before the mode is chosen.",
        examples=[300]
    )
    fleeting_folder_name: Optional[str] = Field(
        None,
        description="Folder holding fleeting notes.",
        examples=["00.Fleeting"]
    )

    @field_validator('primary_tag', 'secondary_tag')
    @classmethod
    def validate_tag(cls, v: Optional[str]) -> Optional[str]:
        """Strip whitespace and a leading '#', rejecting empty tags."""
        if v is None:
            return None

        cleaned = v.strip().lstrip("#").strip()
        if not cleaned:
            raise ValueError("Tag name cannot be empty.")

        return cleaned

    @field_validator('fleeting_folder_name')
    @classmethod
    def validate_folder(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None

        cleaned = v.strip()
        if not cleaned:
            raise ValueError("Folder name cannot be empty.")

        return cleaned

    @field_validator('force_preview_tags')
    @classmethod
    def validate_tags(cls, v: Optional[list[str]]) -> Optional[list[str]]:
        if v is None:
            return None

        cleaned = [tag.strip().lstrip("#").strip() for tag in v]
        if any(not tag for tag in cleaned):
            raise ValueError("Force-preview tags cannot be empty strings.")

        return cleaned

    def changes(self) -> dict:
        """Return only the fields supplied by the caller."""
        return self.model_dump(exclude_none=True)

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"primary_tag": "project"},
                {"force_preview_tags": ["HOC", "MOC", "Archive"], "debounce_ms": 150}
            ]
        }
