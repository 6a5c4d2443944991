"""Marker tag membership checks."""

from collections.abc import Iterable, Sequence

from find_project_note.data_models import Settings, TagType


def has_marker(tags: Sequence[str], marker: str) -> bool:
    """Exact, case-sensitive membership of ``marker`` in ``tags``."""
    return marker in tags


def has_any_marker(tags: Sequence[str], markers: Iterable[str]) -> bool:
    return any(marker in tags for marker in markers)


def marker_for(tag_type: TagType, settings: Settings) -> str:
    """Return the configured marker tag searched for by ``tag_type``."""
    if tag_type is TagType.PRIMARY:
        return settings.primary_tag
    return settings.secondary_tag
