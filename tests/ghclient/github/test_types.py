"""Tests for the optional-field convention and query options."""

import io
import json

import pytest

from ghclient.github import (
    Gist,
    GistFile,
    ListOptions,
    Repository,
    UploadOptions,
    User,
    add_options,
    is_set,
)
from ghclient.github.types import is_raw_sink


# =============================================================================
# Optional fields
# =============================================================================


def test_unset_fields_are_omitted():
    repo = Repository(name="foo")
    assert repo.to_payload() == {"name": "foo"}


@pytest.mark.parametrize(
    "field,value",
    [
        ("private", False),
        ("private", True),
        ("forks_count", 0),
        ("description", ""),
        ("permissions", {}),
    ],
)
def test_zero_values_are_emitted(field, value):
    """Setting a field to its zero value is not the same as leaving it unset."""
    repo = Repository(**{field: value})
    assert repo.to_payload() == {field: value}
    assert is_set(repo, field)


def test_explicit_none_is_emitted_as_null():
    repo = Repository(name="foo", homepage=None)
    assert repo.to_payload() == {"name": "foo", "homepage": None}


def test_assignment_marks_field_set():
    repo = Repository()
    assert not is_set(repo, "private")

    repo.private = False

    assert is_set(repo, "private")
    assert repo.to_payload() == {"private": False}


def test_nested_resources_keep_their_own_set_fields():
    repo = Repository(name="foo", owner=User(login="octocat"))
    assert repo.to_payload() == {"name": "foo", "owner": {"login": "octocat"}}


def test_decoded_fields_are_set():
    user = User.model_validate({"login": "octocat", "site_admin": False, "unknown": 1})

    assert user.set_fields() == ["login", "site_admin"]
    assert is_set(user, "site_admin")
    assert not is_set(user, "email")
    assert user.email is None


def test_unset_and_zero_survive_a_round_trip():
    payload = json.dumps(Repository(name="foo", fork=False).to_payload())
    decoded = Repository.model_validate_json(payload)

    assert is_set(decoded, "fork")
    assert decoded.fork is False
    assert not is_set(decoded, "private")


def test_is_set_unknown_field():
    with pytest.raises(AttributeError, match="no field 'nope'"):
        is_set(User(), "nope")


def test_set_fields_in_declaration_order():
    user = User(email="a@b.c", login="octocat", id=0)
    assert user.set_fields() == ["login", "id", "email"]


def test_gist_file_can_be_deleted_with_none():
    gist = Gist(files={"old.txt": None, "new.txt": GistFile(content="hi")})
    assert gist.to_payload() == {"files": {"old.txt": None, "new.txt": {"content": "hi"}}}


def test_aliased_fields_use_wire_names():
    from ghclient.github import Tree, TreeEntry

    tree = Tree.model_validate({"sha": "abc", "tree": [{"path": "README", "mode": "100644"}]})

    assert tree.entries == [TreeEntry(path="README", mode="100644")]
    assert tree.to_payload() == {"sha": "abc", "tree": [{"path": "README", "mode": "100644"}]}
    assert Tree(entries=[]).to_payload() == {"tree": []}


# =============================================================================
# Query options
# =============================================================================


class IssueListOptions(ListOptions):
    state: str = ""
    labels: list[str] = []


@pytest.mark.parametrize(
    "url,options,expected",
    [
        ("repos", None, "repos"),
        ("repos", ListOptions(), "repos"),
        ("repos", ListOptions(page=2), "repos?page=2"),
        ("repos", ListOptions(page=2, per_page=50), "repos?page=2&per_page=50"),
        ("repos?type=all", ListOptions(per_page=10), "repos?type=all&per_page=10"),
        ("repos?page=1", ListOptions(page=3), "repos?page=3"),
        (
            "https://api.github.com/repos",
            ListOptions(page=2),
            "https://api.github.com/repos?page=2",
        ),
        (
            "issues",
            IssueListOptions(state="open", labels=["bug", "ui"]),
            "issues?state=open&labels=bug%2Cui",
        ),
        ("releases/1/assets", UploadOptions(name="a b.zip"), "releases/1/assets?name=a+b.zip"),
    ],
)
def test_add_options(url, options, expected):
    assert add_options(url, options) == expected


def test_add_options_does_not_modify_options():
    options = ListOptions(page=2)
    add_options("repos", options)
    assert options.page == 2


# =============================================================================
# Raw sinks
# =============================================================================


@pytest.mark.parametrize(
    "target,expected",
    [
        (io.BytesIO(), True),
        (open, False),
        (io.BytesIO, False),
        (Repository, False),
        (list[Repository], False),
        (None, False),
    ],
)
def test_is_raw_sink(target, expected):
    assert is_raw_sink(target) == expected
