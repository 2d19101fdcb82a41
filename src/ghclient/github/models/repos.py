from typing import Any

from ..timestamp import Timestamp
from ..types import Resource
from .git import Commit
from .users import Organization, User


class Repository(Resource):
    """A GitHub repository.

    `parent` and `source` are only populated for forks.
    """

    id: int | None = None
    owner: User | None = None
    name: str | None = None
    full_name: str | None = None
    description: str | None = None
    homepage: str | None = None
    default_branch: str | None = None
    master_branch: str | None = None
    created_at: Timestamp | None = None
    pushed_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    html_url: str | None = None
    clone_url: str | None = None
    git_url: str | None = None
    mirror_url: str | None = None
    ssh_url: str | None = None
    svn_url: str | None = None
    language: str | None = None
    fork: bool | None = None
    forks_count: int | None = None
    network_count: int | None = None
    open_issues_count: int | None = None
    stargazers_count: int | None = None
    subscribers_count: int | None = None
    watchers_count: int | None = None
    size: int | None = None
    auto_init: bool | None = None
    parent: "Repository | None" = None
    source: "Repository | None" = None
    organization: Organization | None = None
    permissions: dict[str, bool] | None = None

    # Additional mutable fields when creating and editing a repository
    private: bool | None = None
    has_issues: bool | None = None
    has_wiki: bool | None = None
    has_downloads: bool | None = None
    # Creating an organization repository. Required for non-owners.
    team_id: int | None = None

    # API URLs
    url: str | None = None
    archive_url: str | None = None
    branches_url: str | None = None
    commits_url: str | None = None
    contents_url: str | None = None
    forks_url: str | None = None
    hooks_url: str | None = None
    issues_url: str | None = None
    pulls_url: str | None = None
    releases_url: str | None = None
    tags_url: str | None = None
    trees_url: str | None = None


class Branch(Resource):
    name: str | None = None
    commit: Commit | None = None


class Hook(Resource):
    """A repository or organization webhook."""

    id: int | None = None
    name: str | None = None
    events: list[str] | None = None
    active: bool | None = None
    config: dict[str, Any] | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None


class ReleaseAsset(Resource):
    id: int | None = None
    url: str | None = None
    name: str | None = None
    label: str | None = None
    state: str | None = None
    content_type: str | None = None
    size: int | None = None
    download_count: int | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    browser_download_url: str | None = None
    uploader: User | None = None


class RepositoryRelease(Resource):
    id: int | None = None
    tag_name: str | None = None
    target_commitish: str | None = None
    name: str | None = None
    body: str | None = None
    draft: bool | None = None
    prerelease: bool | None = None
    created_at: Timestamp | None = None
    published_at: Timestamp | None = None
    url: str | None = None
    html_url: str | None = None
    assets_url: str | None = None
    assets: list[ReleaseAsset] | None = None
    # Relative paths for new assets go against Client.upload_url
    upload_url: str | None = None
    zipball_url: str | None = None
    tarball_url: str | None = None
