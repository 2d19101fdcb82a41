"""Errors raised by the GitHub client.

Every failure of a call is exactly one of:

- TransportError: no HTTP response was obtained (DNS, TLS, reset, timeout)
- EncodingError: the request body could not be serialized to JSON
- ErrorResponse: non-2xx response whose body has GitHub's error shape
- APIError: any other non-2xx response
- DecodingError: 2xx response whose body did not fit the requested type

See http://developer.github.com/v3/#client-errors
"""

import json
import re
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, ValidationError

if TYPE_CHECKING:
    from .response import Response

CLIENT_SECRET_RE = re.compile(r"(client_secret=)[^&#]*")


def sanitize_url(url: str | None) -> str:
    """Redact the client secret from a url before it ends up in a message."""
    if not url:
        return ""
    return CLIENT_SECRET_RE.sub(r"\1REDACTED", url)


class ErrorCode(str, Enum):
    """Validation error codes GitHub documents.

    Unknown codes are passed through as plain strings.
    """

    MISSING = "missing"  # resource does not exist
    MISSING_FIELD = "missing_field"  # required field on a resource has not been set
    INVALID = "invalid"  # the formatting of a field is invalid
    ALREADY_EXISTS = "already_exists"  # another resource has the same value as this field
    CUSTOM = "custom"  # free-form, see `message`


class FieldError(BaseModel):
    """A single validation error from an API error response."""

    model_config = ConfigDict(extra="ignore")

    resource: str = ""  # resource on which the error occurred
    field: str = ""  # field on which the error occurred
    code: str = ""  # validation error code
    message: str = ""  # only present for custom errors

    def __str__(self) -> str:
        text = f"{self.code} error caused by {self.field} field on {self.resource} resource"
        if self.message:
            text += f": {self.message}"
        return text


class ErrorBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: str = ""
    errors: list[FieldError] = []
    documentation_url: str | None = None


class GithubError(Exception):
    """Base class for everything the client raises."""


class TransportError(GithubError):
    """The request never produced an HTTP response."""

    def __init__(self, message: str, method: str | None = None, url: str | None = None):
        super().__init__(message)
        self.method = method
        self.url = url


class EncodingError(GithubError):
    """The request body could not be encoded as JSON."""


class DecodingError(GithubError):
    """A successful response body could not be decoded into the target type."""

    def __init__(self, message: str, response: "Response"):
        super().__init__(message)
        self.response = response


class APIError(GithubError):
    """Non-2xx response without a recognizable error body."""

    def __init__(self, response: "Response"):
        self.response = response
        super().__init__(self._describe())

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def reason(self) -> str:
        return self.response.http.reason or ""

    def _prefix(self) -> str:
        request = self.response.http.request
        method = getattr(request, "method", None) or ""
        url = sanitize_url(getattr(request, "url", None) or self.response.http.url)
        return f"{method} {url}: {self.status_code}".strip()

    def _describe(self) -> str:
        return f"{self._prefix()} {self.reason}".rstrip()


class ErrorResponse(APIError):
    """Non-2xx response carrying GitHub's structured error body."""

    def __init__(
        self,
        response: "Response",
        message: str,
        errors: list[FieldError],
        documentation_url: str | None = None,
    ):
        self.message = message
        self.errors = errors
        self.documentation_url = documentation_url
        super().__init__(response)

    def _describe(self) -> str:
        errors = ", ".join(str(e) for e in self.errors)
        return f"{self._prefix()} {self.message} [{errors}]"


def parse_error_body(content: bytes) -> ErrorBody | None:
    """Decode GitHub's error shape, or None if the body is anything else."""
    if not content or not content.strip():
        return None
    try:
        data = json.loads(content)
    except ValueError:
        return None
    if not isinstance(data, dict) or not ("message" in data or "errors" in data):
        return None
    try:
        return ErrorBody.model_validate(data)
    except ValidationError:
        return None


def check_response(response: "Response") -> None:
    """Raise if the response is not a success.

    A response is an error if its status code is outside the 200 range. API
    error responses are expected to have either no body, or a JSON body that
    maps to ErrorBody; any other body is ignored and an opaque APIError is
    raised instead.
    """
    if 200 <= response.status_code <= 299:
        return

    body = parse_error_body(response.http.content)
    if body is None:
        raise APIError(response)
    raise ErrorResponse(
        response,
        message=body.message,
        errors=body.errors,
        documentation_url=body.documentation_url,
    )
