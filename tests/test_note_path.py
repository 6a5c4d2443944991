import pytest

from find_project_note.data_models import NotePath, VaultMetadata
from find_project_note.core.vault_operations import VaultStore, resolve_note_path


def test_from_title_adds_suffix():
    assert NotePath.from_title("Projects/v1.4 Release").as_posix() == "Projects/v1.4 Release.md"


def test_from_posix_keeps_segments():
    note = NotePath.from_posix("A/B/C.md")
    assert note.segments == ("A", "B", "C.md")
    assert note.name == "C.md"
    assert note.folder == ("A", "B")


@pytest.mark.parametrize("relative", ["A//B.md", "../B.md", "A/./B.md"])
def test_invalid_segments_rejected(relative):
    with pytest.raises(ValueError):
        NotePath.from_posix(relative)


def test_resolve_rejects_escape_through_symlink(tmp_path):
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "secret.md").write_text("x", encoding="utf-8")
    vault_path = tmp_path / "vault"
    vault_path.mkdir()
    (vault_path / "link").symlink_to(outside, target_is_directory=True)
    vault = VaultMetadata(name="test", path=vault_path)

    with pytest.raises(ValueError):
        resolve_note_path(vault, NotePath.from_posix("link/secret.md"))
    assert not VaultStore(vault).exists(NotePath.from_posix("link/secret.md"))
