"""Preview/source mode selection for notes as they become active."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from find_project_note.core.frontmatter_operations import read_note_tags
from find_project_note.core.tag_operations import has_any_marker
from find_project_note.core.vault_operations import VaultStore
from find_project_note.data_models import NotePath, Settings, ViewMode

logger = logging.getLogger(__name__)


class ViewPort(Protocol):
    """The editor view a note is shown in."""

    def get_mode(self) -> ViewMode: ...

    def set_mode(self, mode: ViewMode) -> None: ...

    def reopen(self) -> None: ...


@dataclass(frozen=True)
class NavigationOutcome:
    note: NotePath
    tags: list[str]
    mode: ViewMode
    changed: bool

    def as_payload(self) -> dict[str, Any]:
        return {
            "note": self.note.as_posix(),
            "tags": list(self.tags),
            "mode": self.mode.value,
            "changed": self.changed,
        }


def select_mode(tags: Sequence[str], force_preview_tags: Iterable[str]) -> ViewMode:
    """Preview when any force-preview tag is present, otherwise source."""
    if has_any_marker(tags, force_preview_tags):
        return ViewMode.PREVIEW
    return ViewMode.SOURCE


def apply_view_mode(view: ViewPort, mode: ViewMode) -> bool:
    """Switch ``view`` to ``mode`` and reopen it. No-op when already in ``mode``.

    Returns:
        True when the view was switched.
    """
    if view.get_mode() is mode:
        return False

    view.set_mode(mode)
    view.reopen()
    return True


def handle_note_activated(
    store: VaultStore,
    note: NotePath,
    settings: Settings,
    view: ViewPort,
) -> NavigationOutcome:
    """Run the mode pipeline for a note that just became active."""
    tags = read_note_tags(store, note)
    mode = select_mode(tags, settings.force_preview_tags)
    changed = apply_view_mode(view, mode)
    if changed:
        logger.info("Switched '%s' to %s mode", note, mode.value)
    return NavigationOutcome(note=note, tags=tags, mode=mode, changed=changed)
