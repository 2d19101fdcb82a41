"""Notifications and API metadata."""

from ..timestamp import Timestamp
from ..types import Resource
from .repos import Repository


class NotificationSubject(Resource):
    title: str | None = None
    url: str | None = None
    latest_comment_url: str | None = None
    type: str | None = None


class Notification(Resource):
    """A notification thread for the authenticated user."""

    # Thread ids are strings
    id: str | None = None
    repository: Repository | None = None
    subject: NotificationSubject | None = None
    # Why the user was notified: subscribed, manual, author, comment, mention...
    reason: str | None = None
    unread: bool | None = None
    updated_at: Timestamp | None = None
    last_read_at: Timestamp | None = None
    url: str | None = None


class APIMeta(Resource):
    # CIDR ranges that service hooks originate from
    hooks: list[str] | None = None
    # CIDR ranges of the Git servers
    git: list[str] | None = None
    # False on Enterprise instances using CAS or OAuth for authentication
    verifiable_password_authentication: bool | None = None
