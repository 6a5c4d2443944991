"""Data models for vault metadata, note paths, settings and resolution results."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from find_project_note.constants import (
    DEFAULT_DEBOUNCE_MS,
    DEFAULT_FLEETING_FOLDER_NAME,
    DEFAULT_FORCE_PREVIEW_TAGS,
    DEFAULT_PRIMARY_TAG,
    DEFAULT_SECONDARY_TAG,
    NOTE_SUFFIX,
)


class TagType(str, Enum):
    """Lookup type for ancestor resolution."""

    PRIMARY = "primary"
    SECONDARY = "secondary"


class ViewMode(str, Enum):
    """How a note is shown in the editor."""

    PREVIEW = "preview"
    SOURCE = "source"


class ResolutionStatus(str, Enum):
    FOUND = "found"
    FALLBACK = "fallback"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class VaultMetadata:
    """Normalized metadata describing an Obsidian vault."""

    name: str
    path: Path

    def as_payload(self) -> dict[str, Any]:
        """Return a serializable payload representation."""
        return {
            "name": self.name,
            "path": str(self.path),
            "exists": self.path.is_dir(),
        }


@dataclass(frozen=True)
class NotePath:
    """Vault-relative location of a note: folder segments plus a file name.

    Segment 0 is the top-level folder (or the file itself for root-level
    notes). Segments are never empty and never ``.`` or ``..``.
    """

    segments: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.segments:
            raise ValueError("Note path must contain at least one segment.")
        for segment in self.segments:
            if not segment or segment in {".", ".."}:
                raise ValueError(f"Invalid note path segment {segment!r} in {self.segments!r}.")

    @classmethod
    def from_posix(cls, relative: str) -> NotePath:
        """Build a path from a forward-slash separated vault-relative string."""
        return cls(tuple(relative.strip("/").split("/")))

    @classmethod
    def from_title(cls, title: str) -> NotePath:
        """Build a path from a note identifier without the ``.md`` suffix.

        Examples:
            >>> NotePath.from_title("Projects/Alpha").as_posix()
            'Projects/Alpha.md'
        """
        parts = title.strip("/").split("/")
        parts[-1] = f"{parts[-1]}{NOTE_SUFFIX}"
        return cls(tuple(parts))

    @property
    def name(self) -> str:
        return self.segments[-1]

    @property
    def folder(self) -> tuple[str, ...]:
        return self.segments[:-1]

    def as_posix(self) -> str:
        return "/".join(self.segments)

    def __str__(self) -> str:
        return self.as_posix()


@dataclass(frozen=True)
class AncestorCandidate:
    """A folder note that may represent one of a note's ancestor folders.

    A folder's note is named after the folder and lives inside it, so for
    ``level`` i the candidate is ``segments[:i] / (segments[i-1] + ".md")``.
    """

    level: int
    folder: tuple[str, ...]
    note_name: str

    @property
    def path(self) -> NotePath:
        return NotePath(self.folder + (self.note_name,))

    def is_self(self, note: NotePath) -> bool:
        """True when this candidate is the note the walk started from."""
        return self.level == len(note.segments) - 1 and self.note_name == note.name


@dataclass(frozen=True)
class ResolutionResult:
    """Outcome of an ancestor lookup. Recomputed per invocation, never stored."""

    status: ResolutionStatus
    tag: str
    note: Optional[NotePath] = None
    current_is_marked: bool = False

    @property
    def target(self) -> Optional[NotePath]:
        """The note to open, if any."""
        if self.status is ResolutionStatus.NOT_FOUND:
            return None
        return self.note

    @property
    def notice(self) -> Optional[str]:
        """Transient user message for an exhausted lookup."""
        if self.status is not ResolutionStatus.NOT_FOUND:
            return None
        return f"Project note with {self.tag} tag not found in the tags property."

    def as_payload(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "tag": self.tag,
            "note": self.note.as_posix() if self.note is not None else None,
            "current_is_marked": self.current_is_marked,
            "notice": self.notice,
        }


@dataclass(frozen=True)
class Settings:
    """Flat settings record persisted between sessions."""

    primary_tag: str = DEFAULT_PRIMARY_TAG
    secondary_tag: str = DEFAULT_SECONDARY_TAG
    force_preview_tags: frozenset[str] = field(default_factory=lambda: DEFAULT_FORCE_PREVIEW_TAGS)
    debounce_ms: int = DEFAULT_DEBOUNCE_MS
    fleeting_folder_name: str = DEFAULT_FLEETING_FOLDER_NAME

    def updated(self, **changes: Any) -> Settings:
        """Return a copy with ``changes`` applied."""
        if "force_preview_tags" in changes:
            changes["force_preview_tags"] = frozenset(changes["force_preview_tags"])
        return replace(self, **changes)

    def as_payload(self) -> dict[str, Any]:
        """Return a YAML/JSON friendly representation."""
        return {
            "primary_tag": self.primary_tag,
            "secondary_tag": self.secondary_tag,
            "force_preview_tags": sorted(self.force_preview_tags),
            "debounce_ms": self.debounce_ms,
            "fleeting_folder_name": self.fleeting_folder_name,
        }
