"""Front-matter tag extraction.

Only one shape is supported: a ``---`` delimited block at the very start of
the note holding a ``tags:`` key followed by a flat list, one tag per line::

    ---
    tags:
    - HOC
    - project
    status: active
    ---

The block is scanned line by line instead of being handed to a YAML parser.
Inline lists (``tags: [a, b]``) and nested values are not recognized.
"""

from __future__ import annotations

import logging
import re
from enum import Enum, auto

from find_project_note.constants import FRONTMATTER_DELIMITER, TAGS_KEY_LINE
from find_project_note.core.vault_operations import VaultStore
from find_project_note.data_models import NotePath

logger = logging.getLogger(__name__)

# A line starting with a word character opens the next YAML key and ends the tag run.
_NEXT_KEY = re.compile(r"\w")
_LIST_MARKER = "- "


class _ScanState(Enum):
    BEFORE_BLOCK = auto()
    SEEKING_KEY = auto()
    IN_TAG_RUN = auto()
    DONE = auto()


def _clean_tag(line: str) -> str:
    tag = line.strip()
    if tag.startswith(_LIST_MARKER):
        tag = tag[len(_LIST_MARKER):]
    return tag


def extract_tags(text: str) -> list[str]:
    """Return the tags declared in the front matter of ``text``, in order.

    Args:
        text: Raw markdown text of a note.

    Returns:
        The tag strings of the ``tags:`` run. Empty when the text does not
        start with a closed front-matter block or the block has no ``tags:``
        line. Duplicates and empty strings are kept.
    """
    state = _ScanState.BEFORE_BLOCK
    run: list[str] = []

    for line in text.splitlines():
        if state is _ScanState.BEFORE_BLOCK:
            if line != FRONTMATTER_DELIMITER:
                return []
            state = _ScanState.SEEKING_KEY
        elif line == FRONTMATTER_DELIMITER:
            # closing delimiter also ends a tag run that is the last key
            return run
        elif state is _ScanState.SEEKING_KEY:
            if line == TAGS_KEY_LINE:
                state = _ScanState.IN_TAG_RUN
        elif state is _ScanState.IN_TAG_RUN:
            if _NEXT_KEY.match(line):
                state = _ScanState.DONE
            else:
                run.append(_clean_tag(line))

    # unclosed block
    return []


def read_note_tags(store: VaultStore, note: NotePath) -> list[str]:
    """Read ``note`` and extract its tags, treating unreadable notes as untagged.

    Missing, unreadable or non UTF-8 notes are logged and yield ``[]``.
    """
    try:
        text = store.read_text(note)
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        logger.warning("Could not read note '%s' in vault '%s': %s", note, store.vault.name, exc)
        return []

    return extract_tags(text)
