import logging

from npm_audit_filter import allow_list
from npm_audit_filter.model.allow_list_entry import AllowListEntry

ADVISORY = "https://github.com/advisories/GHSA-xxxx"


def test_valid_repo_allow_list():
    assert allow_list.check_allow_list_sanity()


def test_repo_allowed_paths_match_entries():
    assert allow_list.get_allowed_paths() == {entry.path for entry in allow_list.ALLOW_LIST}


def test_valid_empty_allow_list():
    assert allow_list.check_allow_list_sanity([])
    assert allow_list.get_allowed_paths([]) == frozenset()


def test_multiple_entries_allow_list(caplog):
    entries = [
        AllowListEntry("a>b", ADVISORY, "first review"),
        AllowListEntry("x>y", ADVISORY, "other"),
        AllowListEntry("a>b", ADVISORY, "second review"),
    ]

    with caplog.at_level(logging.ERROR):
        assert not allow_list.check_allow_list_sanity(entries)

    assert "a>b" in caplog.text
    assert "x>y" not in caplog.text


def test_allowed_paths_deduplicate():
    entries = [AllowListEntry("a>b", ADVISORY, "first review"), AllowListEntry("a>b", ADVISORY, "second review")]

    assert allow_list.get_allowed_paths(entries) == frozenset({"a>b"})


def test_allowed_paths_are_immutable():
    assert isinstance(allow_list.get_allowed_paths(), frozenset)
