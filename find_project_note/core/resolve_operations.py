"""Ancestor folder-note resolution.

A folder note is named after its folder and lives inside it, so the note
``Projects/Alpha/Design/Spec.md`` has the candidates, nearest first::

    Projects/Alpha/Design/Design.md
    Projects/Alpha/Alpha.md
    Projects/Projects.md

The first candidate that exists and carries the marker tag wins. When none
does, the vault-root ``README.md`` is used, and failing that the lookup is
reported as not found.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from find_project_note.constants import FALLBACK_NOTE_NAME, NOTE_SUFFIX
from find_project_note.core.frontmatter_operations import read_note_tags
from find_project_note.core.tag_operations import has_marker, marker_for
from find_project_note.core.vault_operations import VaultStore
from find_project_note.data_models import (
    AncestorCandidate,
    NotePath,
    ResolutionResult,
    ResolutionStatus,
    Settings,
    TagType,
)

logger = logging.getLogger(__name__)


def iter_ancestor_candidates(note: NotePath) -> Iterator[AncestorCandidate]:
    """Yield the folder-note candidates for ``note`` from nearest to farthest.

    A root-level note has no candidates.
    """
    segments = note.segments
    for level in range(len(segments) - 1, 0, -1):
        yield AncestorCandidate(
            level=level,
            folder=segments[:level],
            note_name=f"{segments[level - 1]}{NOTE_SUFFIX}",
        )


def resolve_ancestor(
    store: VaultStore,
    note: NotePath,
    tag_type: TagType,
    settings: Settings,
    skip_self_match: bool = True,
) -> ResolutionResult:
    """Find the nearest ancestor folder note carrying the marker for ``tag_type``.

    Args:
        store: File store of the vault holding ``note``.
        note: The note the lookup starts from.
        tag_type: Which configured marker to look for.
        settings: Settings supplying the marker tags.
        skip_self_match: When True and ``note`` is itself a marked folder note,
            walk past it instead of resolving to the note itself.

    Returns:
        A ``found`` result for the first marked candidate, otherwise a
        ``fallback`` result (see :func:`apply_fallback`).
    """
    marker = marker_for(tag_type, settings)
    current_is_marked = False

    for candidate in iter_ancestor_candidates(note):
        path = candidate.path
        if not store.exists(path):
            continue

        if not has_marker(read_note_tags(store, path), marker):
            continue

        if candidate.is_self(note):
            current_is_marked = True
            if skip_self_match:
                logger.debug("Note '%s' is itself tagged '%s'; continuing upward", note, marker)
                continue

        logger.info("Resolved '%s' to '%s' via tag '%s'", note, path, marker)
        return ResolutionResult(
            status=ResolutionStatus.FOUND,
            tag=marker,
            note=path,
            current_is_marked=current_is_marked,
        )

    return ResolutionResult(
        status=ResolutionStatus.FALLBACK,
        tag=marker,
        current_is_marked=current_is_marked,
    )


def apply_fallback(store: VaultStore, result: ResolutionResult) -> ResolutionResult:
    """Turn a ``fallback`` result into the root README or a ``not_found`` result."""
    if result.status is not ResolutionStatus.FALLBACK:
        return result

    readme = NotePath((FALLBACK_NOTE_NAME,))
    if store.exists(readme):
        return ResolutionResult(
            status=ResolutionStatus.FALLBACK,
            tag=result.tag,
            note=readme,
            current_is_marked=result.current_is_marked,
        )

    logger.info("No note tagged '%s' found and no %s at vault root", result.tag, FALLBACK_NOTE_NAME)
    return ResolutionResult(
        status=ResolutionStatus.NOT_FOUND,
        tag=result.tag,
        current_is_marked=result.current_is_marked,
    )


def resolve_project_note(
    store: VaultStore,
    note: NotePath,
    tag_type: TagType,
    settings: Settings,
    skip_self_match: bool = True,
) -> ResolutionResult:
    """Resolve the note to open for ``note``: marked ancestor, README, or nothing."""
    result = resolve_ancestor(store, note, tag_type, settings, skip_self_match=skip_self_match)
    return apply_fallback(store, result)
