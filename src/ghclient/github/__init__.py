"""Typed client core for the GitHub v3 REST API.

The Client builds requests, sends them through a `requests.Session` you
provide (which is where authentication lives), turns failures into typed
errors and decodes JSON bodies into resource models. Every call also returns
a Response carrying pagination and rate limit metadata.

Example:
    import requests
    from ghclient.github import Client, ListOptions, Repository

    session = requests.Session()
    session.headers["Authorization"] = "Bearer ..."
    client = Client(session)

    # One page at a time
    repos, response = client.call(
        "GET", "orgs/github/repos", list[Repository], options=ListOptions(per_page=10)
    )
    print(response.next_page, response.last_page, response.rate)

    # Or every page
    for repo in client.paginate("orgs/github/repos", Repository):
        print(repo.full_name)

    # Only fields you set are sent
    client.call("POST", "user/repos", Repository, body=Repository(name="foo", private=True))
"""

from .core import Client, encode_body
from .errors import (
    APIError,
    DecodingError,
    EncodingError,
    ErrorCode,
    ErrorResponse,
    FieldError,
    GithubError,
    TransportError,
    check_response,
    sanitize_url,
)
from .models import (
    APIMeta,
    Blob,
    Branch,
    Commit,
    CommitAuthor,
    CommitStats,
    Gist,
    GistFile,
    GitObject,
    Hook,
    Issue,
    Label,
    Milestone,
    Notification,
    NotificationSubject,
    Organization,
    Plan,
    PullRequest,
    PullRequestBranch,
    PullRequestLinks,
    Reference,
    ReleaseAsset,
    Repository,
    RepositoryRelease,
    Tree,
    TreeEntry,
    User,
)
from .rate import RateCache, rate_cache
from .response import Response, parse_link_header, parse_rate
from .stringify import stringify
from .timestamp import Timestamp, format_timestamp, parse_timestamp
from .types import (
    MEDIA_TYPE_V3,
    WIRE_CONTEXT,
    ListOptions,
    Rate,
    RateLimits,
    RawSink,
    Resource,
    UploadOptions,
    add_options,
    is_set,
)

__all__ = [
    # Client
    "Client",
    "Response",
    "encode_body",
    "add_options",
    "check_response",
    "parse_link_header",
    "parse_rate",
    # Errors
    "GithubError",
    "TransportError",
    "EncodingError",
    "DecodingError",
    "APIError",
    "ErrorResponse",
    "FieldError",
    "ErrorCode",
    "sanitize_url",
    # Rate limits
    "Rate",
    "RateLimits",
    "RateCache",
    "rate_cache",
    # Types and helpers
    "Resource",
    "is_set",
    "ListOptions",
    "UploadOptions",
    "RawSink",
    "Timestamp",
    "parse_timestamp",
    "format_timestamp",
    "stringify",
    "MEDIA_TYPE_V3",
    "WIRE_CONTEXT",
    # Resources
    "APIMeta",
    "Blob",
    "Branch",
    "Commit",
    "CommitAuthor",
    "CommitStats",
    "Gist",
    "GistFile",
    "GitObject",
    "Hook",
    "Issue",
    "Label",
    "Milestone",
    "Notification",
    "NotificationSubject",
    "Organization",
    "Plan",
    "PullRequest",
    "PullRequestBranch",
    "PullRequestLinks",
    "Reference",
    "ReleaseAsset",
    "Repository",
    "RepositoryRelease",
    "Tree",
    "TreeEntry",
    "User",
]
