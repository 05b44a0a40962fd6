from __future__ import annotations

from datetime import datetime, timezone
import logging
import re
from typing import Iterable, List, Mapping, Optional

import feedparser
import requests

from ..errors import FeedError
from ..models import RawEntry
from .base import BaseFeedSource

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<[^>]+>")
_SPACE_RE = re.compile(r"\s+")


class RSSFeedSource(BaseFeedSource):
    """Downloads an RSS/Atom feed and maps its entries to ``RawEntry``."""

    USER_AGENT = "mr-news/0.1"

    def __init__(self, timeout: float = 15.0, session: Optional[requests.Session] = None) -> None:
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.setdefault("User-Agent", self.USER_AGENT)

    def fetch(self, url: str) -> Iterable[RawEntry]:
        try:
            response = self._session.get(url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise FeedError(url, str(exc)) from exc
        feed = feedparser.parse(response.content)
        entries = feed.entries or []
        if not entries and feed.get("bozo"):
            raise FeedError(url, f"unparseable feed: {feed.get('bozo_exception')}")
        logger.debug("Parsed %d entries from %s", len(entries), url)
        return [_to_raw_entry(entry) for entry in entries]


def _to_raw_entry(entry: Mapping[str, object]) -> RawEntry:
    content = _get_content(entry)
    summary = entry.get("summary")
    return RawEntry(
        title=_text(entry.get("title")),
        link=_text(entry.get("link")),
        iso_date=_parse_published(entry),
        pub_date=_text(entry.get("published") or entry.get("updated")),
        author=_text(entry.get("author")),
        content_snippet=_snippet(content or summary),
        content=content,
        summary=_text(summary),
    )


def _text(value: object) -> Optional[str]:
    return value if isinstance(value, str) and value else None


def _snippet(html: object) -> Optional[str]:
    if not isinstance(html, str):
        return None
    text = _SPACE_RE.sub(" ", _TAG_RE.sub(" ", html)).strip()
    return text or None


def _get_content(entry: Mapping[str, object]) -> Optional[str]:
    contents = entry.get("content")
    if contents:
        parts: List[str] = []
        for part in contents:
            if isinstance(part, Mapping):
                value = part.get("value")
                if isinstance(value, str):
                    parts.append(value)
        if parts:
            return "\n\n".join(parts)
    return None


def _parse_published(entry: Mapping[str, object]) -> Optional[datetime]:
    for key in ("published_parsed", "updated_parsed"):
        parsed = entry.get(key)
        if parsed:
            try:
                return datetime(*parsed[:6], tzinfo=timezone.utc)
            except (TypeError, ValueError):
                continue
    return None
