"""Vault file store: existence checks and note reads inside the vault root."""

from pathlib import Path

from find_project_note.data_models import NotePath, VaultMetadata


def ensure_vault_ready(vault: VaultMetadata) -> None:
    """Ensure the target vault directory is accessible before performing operations.

    Args:
        vault: Metadata describing the vault to use.

    Raises:
        FileNotFoundError: If the vault path does not exist or is not a directory.
    """
    if not vault.path.is_dir():
        raise FileNotFoundError(f"Vault '{vault.name}' is not accessible at {vault.path}")


def resolve_note_path(vault: VaultMetadata, note: NotePath) -> Path:
    """Resolve a vault-relative note path to an absolute path.

    Joins the vault root with the note's segments and enforces that the result
    stays inside the vault (symlinks included).

    Args:
        vault: Vault metadata.
        note: Vault-relative note path.

    Returns:
        The absolute :class:`Path` to the note inside ``vault``.

    Raises:
        OSError: If the path cannot be resolved (name too long, symlink loop).
        ValueError: If the resolved path escapes the vault root.
    """
    try:
        candidate = vault.path.joinpath(*note.segments).resolve(strict=False)
    except RuntimeError as exc:
        # Python < 3.13 reports symlink loops as RuntimeError
        raise OSError(f"Cannot resolve note path '{note}': {exc}") from exc
    vault_root = vault.path.resolve(strict=False)

    if not candidate.is_relative_to(vault_root):
        raise ValueError(f"Note path '{note}' escapes the configured vault.")

    return candidate


class VaultStore:
    """Read-only view of the notes in one vault."""

    def __init__(self, vault: VaultMetadata) -> None:
        self.vault = vault

    def exists(self, note: NotePath) -> bool:
        """True when ``note`` is a file in the vault. Unresolvable paths count as absent."""
        try:
            return resolve_note_path(self.vault, note).is_file()
        except (OSError, ValueError):
            return False

    def read_text(self, note: NotePath) -> str:
        """Read a note as UTF-8 text.

        Raises:
            OSError: If the note is missing, unreadable or cannot be resolved.
            UnicodeDecodeError: If the note is not UTF-8 encoded.
            ValueError: If the note path escapes the vault.
        """
        return resolve_note_path(self.vault, note).read_text(encoding="utf-8")
