from find_project_note.core.tag_operations import has_any_marker, has_marker, marker_for
from find_project_note.data_models import Settings, TagType


def test_has_marker_exact_match():
    assert has_marker(["project", "HOC"], "HOC")


def test_has_marker_is_case_sensitive():
    assert not has_marker(["hoc"], "HOC")
    assert not has_marker([" HOC"], "HOC")


def test_has_marker_empty_tags():
    assert not has_marker([], "HOC")


def test_has_any_marker():
    assert has_any_marker(["Draft", "MOC"], {"HOC", "MOC"})
    assert not has_any_marker(["Draft"], {"HOC", "MOC"})
    assert not has_any_marker(["HOC"], set())


def test_marker_for_uses_configured_tags():
    settings = Settings(primary_tag="project", secondary_tag="index")
    assert marker_for(TagType.PRIMARY, settings) == "project"
    assert marker_for(TagType.SECONDARY, settings) == "index"
