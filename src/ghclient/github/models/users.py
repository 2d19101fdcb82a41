from ..timestamp import Timestamp
from ..types import Resource


class Plan(Resource):
    """A GitHub plan."""

    name: str | None = None
    space: int | None = None
    collaborators: int | None = None
    private_repos: int | None = None


class User(Resource):
    """A GitHub user."""

    login: str | None = None
    id: int | None = None
    avatar_url: str | None = None
    html_url: str | None = None
    gravatar_id: str | None = None
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    hireable: bool | None = None
    bio: str | None = None
    public_repos: int | None = None
    public_gists: int | None = None
    followers: int | None = None
    following: int | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    type: str | None = None
    site_admin: bool | None = None
    total_private_repos: int | None = None
    owned_private_repos: int | None = None
    private_gists: int | None = None
    disk_usage: int | None = None
    collaborators: int | None = None
    plan: Plan | None = None

    # API URLs
    url: str | None = None
    events_url: str | None = None
    following_url: str | None = None
    followers_url: str | None = None
    gists_url: str | None = None
    organizations_url: str | None = None
    received_events_url: str | None = None
    repos_url: str | None = None
    starred_url: str | None = None
    subscriptions_url: str | None = None


class Organization(Resource):
    """A GitHub organization."""

    login: str | None = None
    id: int | None = None
    avatar_url: str | None = None
    html_url: str | None = None
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    public_repos: int | None = None
    public_gists: int | None = None
    followers: int | None = None
    following: int | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    total_private_repos: int | None = None
    owned_private_repos: int | None = None
    private_gists: int | None = None
    disk_usage: int | None = None
    collaborators: int | None = None
    billing_email: str | None = None
    type: str | None = None
    plan: Plan | None = None

    # API URLs
    url: str | None = None
    events_url: str | None = None
    members_url: str | None = None
    public_members_url: str | None = None
    repos_url: str | None = None
