"""Issues, milestones, labels and pull requests."""

from ..timestamp import Timestamp
from ..types import Resource
from .repos import Repository
from .users import User


class Label(Resource):
    url: str | None = None
    name: str | None = None
    color: str | None = None


class Milestone(Resource):
    url: str | None = None
    number: int | None = None
    state: str | None = None
    title: str | None = None
    description: str | None = None
    creator: User | None = None
    open_issues: int | None = None
    closed_issues: int | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    due_on: Timestamp | None = None


class PullRequestLinks(Resource):
    """Present on issues that are actually pull requests."""

    url: str | None = None
    html_url: str | None = None
    diff_url: str | None = None
    patch_url: str | None = None


class Issue(Resource):
    id: int | None = None
    number: int | None = None
    state: str | None = None
    title: str | None = None
    body: str | None = None
    user: User | None = None
    labels: list[Label] | None = None
    assignee: User | None = None
    comments: int | None = None
    closed_at: Timestamp | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    url: str | None = None
    html_url: str | None = None
    milestone: Milestone | None = None
    pull_request: PullRequestLinks | None = None


class PullRequestBranch(Resource):
    label: str | None = None
    ref: str | None = None
    sha: str | None = None
    repo: Repository | None = None
    user: User | None = None


class PullRequest(Resource):
    id: int | None = None
    number: int | None = None
    state: str | None = None
    title: str | None = None
    body: str | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    closed_at: Timestamp | None = None
    merged_at: Timestamp | None = None
    user: User | None = None
    merged: bool | None = None
    mergeable: bool | None = None
    merged_by: User | None = None
    comments: int | None = None
    commits: int | None = None
    additions: int | None = None
    deletions: int | None = None
    changed_files: int | None = None
    url: str | None = None
    html_url: str | None = None
    issue_url: str | None = None
    statuses_url: str | None = None
    head: PullRequestBranch | None = None
    base: PullRequestBranch | None = None
