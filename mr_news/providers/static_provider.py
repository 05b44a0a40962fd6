from __future__ import annotations

from typing import Iterable, List, Mapping, Sequence, Union

from ..errors import FeedError
from ..models import RawEntry
from .base import BaseFeedSource

FeedPayload = Union[Sequence[RawEntry], Exception]


class StaticFeedSource(BaseFeedSource):
    """Serves canned entries per feed URL for offline runs.

    A URL mapped to an exception, or missing from the mapping, fails
    with ``FeedError`` the way an unreachable feed would.
    """

    def __init__(self, feeds: Mapping[str, FeedPayload]) -> None:
        self._feeds = dict(feeds)

    def fetch(self, url: str) -> Iterable[RawEntry]:
        payload = self._feeds.get(url)
        if payload is None:
            raise FeedError(url, "no such feed")
        if isinstance(payload, FeedError):
            raise payload
        if isinstance(payload, Exception):
            raise FeedError(url, str(payload)) from payload
        entries: List[RawEntry] = list(payload)
        return entries
