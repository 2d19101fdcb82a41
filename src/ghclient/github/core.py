"""Core GitHub client: building requests, sending them and decoding responses."""

import json
import logging
from datetime import datetime
from functools import lru_cache
from typing import Any, BinaryIO, Iterator
from urllib.parse import urlsplit

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from ghclient import settings
from .errors import (
    DecodingError,
    EncodingError,
    TransportError,
    check_response,
    sanitize_url,
)
from .models import APIMeta
from .rate import RateCache, rate_cache
from .response import Response
from .timestamp import format_timestamp
from .types import (
    JSON_CONTENT_TYPE,
    MEDIA_TYPE_V3,
    RAW_CHUNK_SIZE,
    WIRE_CONTEXT,
    ListOptions,
    Rate,
    RateLimits,
    add_options,
    is_raw_sink,
)

logger = logging.getLogger(__name__)


class RateLimitBody(BaseModel):
    resources: RateLimits | None = None
    # Older servers only report the core limit, under "rate"
    rate: Rate | None = None


def _encode_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_unset=True)
    if isinstance(value, datetime):
        return format_timestamp(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_body(body: Any) -> bytes:
    """Serialize a request body, leaving out unset resource fields."""
    try:
        return json.dumps(body, default=_encode_default, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError, RecursionError) as e:
        raise EncodingError(f"Could not encode request body: {e}") from e


@lru_cache(maxsize=256)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _check_base_url(url: str, name: str) -> str:
    if not url.endswith("/"):
        raise ValueError(f"{name} must have a trailing slash, but {url!r} does not")
    return url


class Client:
    """Manages communication with the GitHub API.

    Authentication is not handled here: pass a `requests.Session` that already
    carries it (an Authorization header, `session.auth`, an adapter...). Every
    call made through this client will use that session.

    Example:
        session = requests.Session()
        session.headers["Authorization"] = f"Bearer {token}"
        client = Client(session)

        repo, response = client.call("GET", "repos/octocat/Hello-World", Repository)
        print(repo.full_name, response.rate)
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        base_url: str | None = None,
        upload_url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
        cache: RateCache | None = None,
    ):
        self.session = session or requests.Session()
        self.base_url = _check_base_url(base_url or settings.GITHUB_API_URL, "base_url")
        self.upload_url = _check_base_url(
            upload_url or settings.GITHUB_UPLOAD_URL, "upload_url"
        )
        self.user_agent = user_agent or settings.GITHUB_USER_AGENT
        self.timeout = timeout if timeout is not None else settings.GITHUB_REQUEST_TIMEOUT
        self.rate_cache = cache if cache is not None else rate_cache

    @property
    def rate(self) -> Rate | None:
        """Rate limit as of the most recent call. May be stale."""
        return self.rate_cache.get()

    def _resolve(self, base: str, url: str) -> str:
        if urlsplit(url).scheme in ("http", "https"):
            return url
        if url.startswith("/"):
            raise ValueError(f"Relative url {url!r} must not start with a slash")
        return base + url

    def _headers(self) -> dict[str, str]:
        return {"Accept": MEDIA_TYPE_V3, "User-Agent": self.user_agent}

    def new_request(self, method: str, url: str, body: Any = None) -> requests.Request:
        """Create an API request.

        `url` is either absolute or relative to `base_url`, in which case it
        must not start with a slash. If `body` is given it is JSON encoded and
        sent as the request body.
        """
        headers = self._headers()
        data = None
        if body is not None:
            data = encode_body(body)
            headers["Content-Type"] = JSON_CONTENT_TYPE

        return requests.Request(
            method=method.upper(),
            url=self._resolve(self.base_url, url),
            headers=headers,
            data=data,
        )

    def new_upload_request(
        self, url: str, reader: BinaryIO, size: int, media_type: str
    ) -> requests.Request:
        """Create an upload request against `upload_url`.

        The body is streamed from `reader` as it is sent, so `size` must be
        its exact length in bytes.
        """
        if size < 0:
            raise ValueError(f"Upload size must not be negative, got {size}")

        headers = self._headers()
        headers["Content-Type"] = media_type
        headers["Content-Length"] = str(size)
        return requests.Request(
            method="POST",
            url=self._resolve(self.upload_url, url),
            headers=headers,
            data=reader,
        )

    def _send(self, request: requests.Request, stream: bool) -> requests.Response:
        prepared = self.session.prepare_request(request)
        if "Content-Length" in request.headers:
            # Uploads declare their own length; requests may have guessed otherwise
            prepared.headers["Content-Length"] = request.headers["Content-Length"]
            prepared.headers.pop("Transfer-Encoding", None)

        url = sanitize_url(prepared.url)
        log = logger.info if settings.LOG_REQUESTS else logger.debug
        log(f"{prepared.method} {url}")

        try:
            send_kwargs = self.session.merge_environment_settings(
                prepared.url, {}, stream, None, None
            )
            http = self.session.send(prepared, timeout=self.timeout, **send_kwargs)
        except requests.RequestException as e:
            logger.debug(f"{prepared.method} {url} failed: {e}")
            raise TransportError(
                f"{prepared.method} {url}: {e}", method=prepared.method, url=url
            ) from e

        log(f"{prepared.method} {url}: {http.status_code}")
        return http

    def do(self, request: requests.Request, target: Any = None) -> tuple[Any, Response]:
        """Send an API request and decode the response.

        `target` controls what happens to the body:
        - None: the body is not decoded
        - a RawSink (anything with `write(bytes)`): the raw body is copied into it
        - a type such as `Repository` or `list[Issue]`: the JSON body is decoded
          into it

        Returns the decoded value (or the sink) together with the Response.
        API errors are raised, with the Response attached, after the rate
        limit cache has been updated from the response headers.
        """
        sink = target if is_raw_sink(target) else None
        http = self._send(request, stream=sink is not None)
        try:
            response = Response.from_http(http)
            if response.rate is not None:
                self.rate_cache.record(response.rate)

            try:
                check_response(response)
                if sink is not None:
                    for chunk in http.iter_content(RAW_CHUNK_SIZE):
                        sink.write(chunk)
            except requests.RequestException as e:
                raise TransportError(
                    f"{request.method} {sanitize_url(http.url)}: {e}",
                    method=request.method,
                    url=sanitize_url(http.url),
                ) from e

            if sink is not None:
                return sink, response
            if target is None:
                return None, response
            return self._decode(response, target), response
        finally:
            http.close()

    def _decode(self, response: Response, target: Any) -> Any:
        content = response.http.content
        # An empty body is not an error, there is just nothing to decode
        if not content or not content.strip():
            return None
        try:
            return _adapter(target).validate_json(content, context=WIRE_CONTEXT)
        except ValidationError as e:
            raise DecodingError(
                f"Could not decode response from {sanitize_url(response.http.url)}: {e}",
                response,
            ) from e

    def call(
        self,
        method: str,
        url: str,
        target: Any = None,
        body: Any = None,
        options: BaseModel | None = None,
    ) -> tuple[Any, Response]:
        """Build, send and decode a request in one go."""
        request = self.new_request(method, add_options(url, options), body)
        return self.do(request, target)

    def paginate(
        self, url: str, item_type: Any, options: ListOptions | None = None
    ) -> Iterator[Any]:
        """Yield every item of a list endpoint, following pages until the last.

        The caller's `options` are not modified.
        """
        opts = options.model_copy() if options is not None else ListOptions()
        while True:
            items, response = self.call("GET", url, list[item_type], options=opts)
            yield from items or []

            if not response.next_page:
                return
            if response.next_page == opts.page:
                logger.debug(f"{url} points back to page {opts.page}, stopping")
                return
            opts = opts.model_copy(update={"page": response.next_page})

    def rate_limits(self) -> tuple[RateLimits, Response]:
        """Fetch the current rate limits from the server.

        Unlike `rate`, this is always up to date. The core limit is also
        stored in the rate cache.
        """
        body, response = self.call("GET", "rate_limit", RateLimitBody)
        limits = RateLimits()
        if body is not None:
            if body.resources is not None:
                limits = body.resources
            elif body.rate is not None:
                limits = RateLimits(core=body.rate)

        if limits.core is not None:
            self.rate_cache.record(limits.core)
        return limits, response

    def rate_limit(self) -> tuple[Rate | None, Response]:
        """Fetch the current core (non-search) rate limit."""
        limits, response = self.rate_limits()
        return limits.core, response

    def api_meta(self) -> tuple[APIMeta | None, Response]:
        """Information about the GitHub (or GitHub Enterprise) installation."""
        return self.call("GET", "meta", APIMeta)

    def list_emojis(self) -> tuple[dict[str, str] | None, Response]:
        """Emoji names mapped to their image URLs."""
        return self.call("GET", "emojis", dict[str, str])
