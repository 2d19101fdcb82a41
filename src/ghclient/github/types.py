"""GitHub API types and data structures."""

from typing import Any, Protocol, runtime_checkable
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict, ValidationInfo, model_validator

from .stringify import stringify
from .timestamp import Timestamp

# Stable v3 media type, sent as the Accept header on every request
MEDIA_TYPE_V3 = "application/vnd.github.v3+json"
JSON_CONTENT_TYPE = "application/json"

# Rate limit handling
RATE_LIMIT_LIMIT_HEADER = "X-RateLimit-Limit"
RATE_LIMIT_REMAINING_HEADER = "X-RateLimit-Remaining"
RATE_LIMIT_RESET_HEADER = "X-RateLimit-Reset"

LINK_HEADER = "Link"
PAGE_RELATIONS = ("next", "prev", "first", "last")

# Chunk size used when copying raw bodies into a RawSink
RAW_CHUNK_SIZE = 64 * 1024

# Validation context for payloads that came from the API
WIRE_CONTEXT = {"wire": True}


class Resource(BaseModel):
    """Base for every GitHub resource.

    Fields default to None and stay *unset* until assigned, either by the
    caller or by decoding a response. Unset fields are left out of request
    payloads entirely, while set fields are sent as-is, so `private=False`
    and "private not mentioned" stay distinguishable. Assigning None
    explicitly sends a JSON null, which the API reads as "clear this".

    A null in a response is treated as absent rather than as a caller's
    None, so re-sending a fetched resource never clears fields by accident.
    Decode with `context=WIRE_CONTEXT` to get that behaviour.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def drop_wire_nulls(cls, data: Any, info: ValidationInfo) -> Any:
        if isinstance(data, dict) and info.context and info.context.get("wire"):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict containing only the fields that were set."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def set_fields(self) -> list[str]:
        return [name for name in type(self).model_fields if name in self.model_fields_set]

    def __str__(self) -> str:
        return stringify(self)


def is_set(resource: BaseModel, name: str) -> bool:
    """Whether `name` was present on the wire or assigned by the caller."""
    if name not in type(resource).model_fields:
        raise AttributeError(f"{type(resource).__name__} has no field {name!r}")
    return name in resource.model_fields_set


class Rate(BaseModel):
    """Rate limit standing as reported by the most recent response."""

    model_config = ConfigDict(frozen=True)

    # Requests per window the client is currently limited to
    limit: int = 0
    # Requests left in the current window
    remaining: int = 0
    # When the current window rolls over
    reset: Timestamp | None = None

    def __str__(self) -> str:
        return stringify(self)


class RateLimits(BaseModel):
    """Rate limits for the current client, split by API family.

    Search has its own, much smaller, limit (per minute rather than per hour).
    """

    model_config = ConfigDict(frozen=True)

    core: Rate | None = None
    search: Rate | None = None

    def __str__(self) -> str:
        return stringify(self)


class ListOptions(BaseModel):
    """Pagination parameters accepted by every list endpoint.

    Endpoint-specific options subclass this and add their own fields.
    """

    model_config = ConfigDict(populate_by_name=True)

    # Page of results to retrieve
    page: int = 0
    # Number of results to include per page
    per_page: int = 0


class UploadOptions(BaseModel):
    name: str = ""


@runtime_checkable
class RawSink(Protocol):
    """Target that wants the raw response body instead of decoded JSON."""

    def write(self, data: bytes, /) -> Any: ...


def is_raw_sink(target: Any) -> bool:
    return not isinstance(target, type) and isinstance(target, RawSink)


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_query_value(v) for v in value)
    return str(value)


def add_options(url: str, options: BaseModel | None) -> str:
    """Add the set, non-empty fields of `options` to the url's query string.

    Existing query parameters are kept; an option with the same name wins.
    """
    if options is None:
        return url

    values = options.model_dump(mode="json", by_alias=True, exclude_none=True)
    params = {
        key: _query_value(value)
        for key, value in values.items()
        if value not in ("", 0, False, [], {})
    }
    if not params:
        return url

    parts = urlsplit(url)
    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k not in params]
    query.extend(params.items())
    return urlunsplit(parts._replace(query=urlencode(query)))
