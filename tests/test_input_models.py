"""Tests for Pydantic input models."""

import pytest
from pydantic import ValidationError

from find_project_note.models import (
    ActivateNoteInput,
    OpenAncestorNoteInput,
    UpdateSettingsInput,
)


class TestNoteTitle:
    def test_nested_title(self):
        assert ActivateNoteInput(title="Projects/Alpha/Alpha").title == "Projects/Alpha/Alpha"

    def test_md_extension_is_stripped(self):
        assert ActivateNoteInput(title="Projects/Alpha/Alpha.md").title == "Projects/Alpha/Alpha"

    def test_dots_in_name_are_kept(self):
        assert ActivateNoteInput(title="Releases/v1.4 notes").title == "Releases/v1.4 notes"

    @pytest.mark.parametrize("title", ["", "   ", "../outside", "A/./B", "/abs/path", "A//B", ".md"])
    def test_invalid_titles(self, title):
        with pytest.raises(ValidationError):
            ActivateNoteInput(title=title)


class TestOpenAncestorNoteInput:
    def test_defaults(self):
        model = OpenAncestorNoteInput()
        assert model.title is None
        assert model.skip_self_match is True

    def test_title_is_validated(self):
        assert OpenAncestorNoteInput(title="A/A.md").title == "A/A"
        with pytest.raises(ValidationError):
            OpenAncestorNoteInput(title="../A")


class TestUpdateSettingsInput:
    def test_only_given_fields_are_changes(self):
        assert UpdateSettingsInput(primary_tag="project").changes() == {"primary_tag": "project"}

    def test_hash_prefix_is_stripped(self):
        model = UpdateSettingsInput(secondary_tag="#MOC", force_preview_tags=["#HOC", " MOC "])
        assert model.secondary_tag == "MOC"
        assert model.force_preview_tags == ["HOC", "MOC"]

    def test_folder_name_keeps_hash(self):
        assert UpdateSettingsInput(fleeting_folder_name=" #Inbox ").fleeting_folder_name == "#Inbox"

    def test_empty_folder_name_rejected(self):
        with pytest.raises(ValidationError):
            UpdateSettingsInput(fleeting_folder_name="   ")

    def test_empty_tag_rejected(self):
        with pytest.raises(ValidationError):
            UpdateSettingsInput(primary_tag="  ")
        with pytest.raises(ValidationError):
            UpdateSettingsInput(force_preview_tags=["HOC", "#"])

    def test_negative_debounce_rejected(self):
        with pytest.raises(ValidationError):
            UpdateSettingsInput(debounce_ms=-5)
