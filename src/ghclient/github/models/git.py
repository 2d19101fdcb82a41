"""Git data: commits, trees, blobs and references."""

from pydantic import Field

from ..timestamp import Timestamp
from ..types import Resource


class CommitAuthor(Resource):
    """Author or committer of a commit."""

    date: Timestamp | None = None
    name: str | None = None
    email: str | None = None


class CommitStats(Resource):
    additions: int | None = None
    deletions: int | None = None
    total: int | None = None


class TreeEntry(Resource):
    sha: str | None = None
    path: str | None = None
    mode: str | None = None
    type: str | None = None
    size: int | None = None
    content: str | None = None


class Tree(Resource):
    sha: str | None = None
    entries: list[TreeEntry] | None = Field(default=None, alias="tree")


class Commit(Resource):
    """A git commit object."""

    sha: str | None = None
    author: CommitAuthor | None = None
    committer: CommitAuthor | None = None
    message: str | None = None
    tree: Tree | None = None
    parents: list["Commit"] | None = None
    stats: CommitStats | None = None
    url: str | None = None
    # Only populated by the Search API
    comment_count: int | None = None


class Blob(Resource):
    content: str | None = None
    encoding: str | None = None
    sha: str | None = None
    size: int | None = None
    url: str | None = None


class GitObject(Resource):
    """The object a reference points at."""

    type: str | None = None
    sha: str | None = None
    url: str | None = None


class Reference(Resource):
    ref: str | None = None
    url: str | None = None
    object: GitObject | None = None
