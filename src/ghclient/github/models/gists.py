from ..timestamp import Timestamp
from ..types import Resource
from .users import User


class GistFile(Resource):
    size: int | None = None
    filename: str | None = None
    raw_url: str | None = None
    # Set to None when editing a gist to delete the file
    content: str | None = None


class Gist(Resource):
    # Gist ids are strings, unlike most other ids
    id: str | None = None
    description: str | None = None
    public: bool | None = None
    owner: User | None = None
    # Keyed by filename
    files: dict[str, GistFile | None] | None = None
    comments: int | None = None
    html_url: str | None = None
    git_pull_url: str | None = None
    git_push_url: str | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
