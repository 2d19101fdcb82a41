"""Response envelope: pagination and rate limit metadata for a call."""

import logging
from dataclasses import dataclass
from typing import Mapping
from urllib.parse import parse_qs, urlsplit

import requests
from requests.utils import parse_header_links

from ghclient import settings
from .timestamp import parse_timestamp
from .types import (
    LINK_HEADER,
    PAGE_RELATIONS,
    RATE_LIMIT_LIMIT_HEADER,
    RATE_LIMIT_REMAINING_HEADER,
    RATE_LIMIT_RESET_HEADER,
    Rate,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Response:
    """A GitHub API response.

    Wraps the `requests.Response` and adds the page numbers from the Link
    header and the rate limit from the X-RateLimit-* headers. A page number
    of 0 means there is no such page.
    """

    http: requests.Response
    next_page: int = 0
    prev_page: int = 0
    first_page: int = 0
    last_page: int = 0
    rate: Rate | None = None

    @classmethod
    def from_http(cls, http: requests.Response) -> "Response":
        pages = parse_link_header(http.headers.get(LINK_HEADER))
        return cls(
            http=http,
            next_page=pages.get("next", 0),
            prev_page=pages.get("prev", 0),
            first_page=pages.get("first", 0),
            last_page=pages.get("last", 0),
            rate=parse_rate(http.headers),
        )

    @property
    def status_code(self) -> int:
        return self.http.status_code

    @property
    def headers(self) -> Mapping[str, str]:
        return self.http.headers


def _page_of(link: dict[str, str]) -> tuple[str, int] | None:
    relation = link.get("rel")
    if relation not in PAGE_RELATIONS:
        return None

    try:
        pages = parse_qs(urlsplit(link.get("url", "")).query).get("page")
    except ValueError:
        return None
    if not pages:
        return None
    try:
        return relation, int(pages[0])
    except ValueError:
        return None


def parse_link_header(
    header: str | None,
    max_length: int | None = None,
    max_entries: int | None = None,
) -> dict[str, int]:
    """Extract page numbers for next/prev/first/last from a Link header.

    Malformed entries are skipped individually. The header is truncated to
    `max_length` characters and at most `max_entries` entries are examined.
    """
    if not header:
        return {}
    if max_length is None:
        max_length = settings.MAX_LINK_HEADER_LENGTH
    if max_entries is None:
        max_entries = settings.MAX_LINK_ENTRIES

    links = parse_header_links(header[:max_length])
    if len(links) > max_entries:
        logger.debug(f"Link header has {len(links)} entries, only parsing {max_entries}")
        links = links[:max_entries]

    pages: dict[str, int] = {}
    for link in links:
        parsed = _page_of(link)
        if parsed:
            relation, page = parsed
            pages[relation] = page
    return pages


def _int_header(headers: Mapping[str, str], name: str) -> int | None:
    value = headers.get(name)
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def parse_rate(headers: Mapping[str, str]) -> Rate | None:
    """Build a Rate from the X-RateLimit-* headers, or None if there are none."""
    names = (RATE_LIMIT_LIMIT_HEADER, RATE_LIMIT_REMAINING_HEADER, RATE_LIMIT_RESET_HEADER)
    if not any(name in headers for name in names):
        return None

    reset = None
    if (epoch := _int_header(headers, RATE_LIMIT_RESET_HEADER)) is not None:
        try:
            reset = parse_timestamp(epoch)
        except ValueError:
            logger.debug(f"Ignoring out of range rate limit reset: {epoch}")

    return Rate(
        limit=_int_header(headers, RATE_LIMIT_LIMIT_HEADER) or 0,
        remaining=_int_header(headers, RATE_LIMIT_REMAINING_HEADER) or 0,
        reset=reset,
    )
