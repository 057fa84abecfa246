"""Cursor pagination: list options and ``Link`` header parsing."""
import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from urllib.parse import parse_qs, urlsplit

from .errors import MalformedPaginationError

log = logging.getLogger(__name__)

PAGE_INFO_PARAM = "page_info"

# <https://shop.myshopify.com/admin/api/2024-10/orders.json?page_info=abc>; rel="next"; title="x"
_LINK_ENTRY = re.compile(r'^\s*<([^<>]*)>\s*;\s*rel="?([^";]*)"?\s*(?:;\s*[\w*-]+\s*=[^;]*)*$')


def format_param(value):
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return value


def options_to_params(options) -> dict:
    """Turn an options record, a plain dict or ``None`` into query params."""
    if options is None:
        return {}
    if hasattr(options, "to_params"):
        return options.to_params()
    if isinstance(options, dict):
        return {k: format_param(v) for k, v in options.items() if v is not None}
    raise TypeError(f"unsupported options type: {type(options).__name__}")


@dataclass
class ListOptions:
    """Query options shared by every list/count endpoint."""

    page_info: str = ""
    page: int = 0
    limit: int = 0
    since_id: int = 0
    created_at_min: datetime | None = None
    created_at_max: datetime | None = None
    updated_at_min: datetime | None = None
    updated_at_max: datetime | None = None
    order: str = ""
    fields: str = ""
    vendor: str = ""
    ids: list[int] = field(default_factory=list)

    def to_params(self) -> dict:
        params = {}
        for name in (
            "page_info", "page", "limit", "since_id",
            "created_at_min", "created_at_max", "updated_at_min", "updated_at_max",
            "order", "fields", "vendor", "ids",
        ):
            value = getattr(self, name)
            if value in (None, "", 0, []):
                continue
            params[name] = format_param(value)
        return params


@dataclass
class Pagination:
    next_page_options: ListOptions | None = None
    previous_page_options: ListOptions | None = None

    @property
    def next_page_info(self) -> str | None:
        return self.next_page_options.page_info if self.next_page_options else None

    @property
    def previous_page_info(self) -> str | None:
        return self.previous_page_options.page_info if self.previous_page_options else None


def _page_options(url: str) -> ListOptions:
    params = parse_qs(urlsplit(url).query)
    page_info = (params.get(PAGE_INFO_PARAM) or [""])[0]
    if not page_info:
        raise MalformedPaginationError(f"{PAGE_INFO_PARAM} is missing from link {url!r}")

    opts = ListOptions(page_info=page_info)
    limit = (params.get("limit") or [""])[0]
    if limit:
        try:
            opts.limit = int(limit)
        except ValueError as e:
            raise MalformedPaginationError(f"invalid limit {limit!r} in link {url!r}") from e
    return opts


def extract_pagination(link_header: str | None) -> Pagination:
    """Parse a ``Link`` response header into next/previous page options.

    An empty header means there are no further pages. Entries with a ``rel``
    other than ``next``/``previous`` are skipped, as are trailing ``; key=value``
    parameters; anything that does not look like ``<url>; rel="..."`` raises
    :class:`MalformedPaginationError`.
    """
    pagination = Pagination()
    if not link_header or not link_header.strip():
        return pagination

    for entry in link_header.split(","):
        m = _LINK_ENTRY.match(entry)
        if not m:
            raise MalformedPaginationError(f"could not parse link header entry {entry.strip()!r}")
        url, rel = m.groups()

        if rel == "next":
            pagination.next_page_options = _page_options(url)
        elif rel == "previous":
            pagination.previous_page_options = _page_options(url)
        else:
            log.debug("Skipping link with unsupported rel %r", rel)

    return pagination
