from .activity import APIMeta, Notification, NotificationSubject
from .gists import Gist, GistFile
from .git import (
    Blob,
    Commit,
    CommitAuthor,
    CommitStats,
    GitObject,
    Reference,
    Tree,
    TreeEntry,
)
from .issues import (
    Issue,
    Label,
    Milestone,
    PullRequest,
    PullRequestBranch,
    PullRequestLinks,
)
from .repos import Branch, Hook, ReleaseAsset, Repository, RepositoryRelease
from .users import Organization, Plan, User

__all__ = [
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
