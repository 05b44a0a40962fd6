from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass(slots=True)
class RawEntry:
    """Raw feed entry as handed over by a feed source."""

    title: Optional[str] = None
    link: Optional[str] = None
    iso_date: Optional[datetime] = None
    pub_date: Optional[str] = None
    creator: Optional[str] = None
    author: Optional[str] = None
    content_snippet: Optional[str] = None
    content: Optional[str] = None
    summary: Optional[str] = None


@dataclass(slots=True)
class Item:
    """Normalized feed entry."""

    title: str
    link: str
    iso_date: datetime
    source: str
    raw_text: str = ""


@dataclass(slots=True)
class EnrichedItem:
    """Item with its synopsis and topic labels."""

    title: str
    link: str
    iso_date: datetime
    source: str
    raw_text: str
    summary: str
    topics: List[str] = field(default_factory=list)


@dataclass(slots=True)
class Hashtag:
    label: str
    url: str


@dataclass(slots=True)
class TickerEntry:
    text: str
    link: str


@dataclass(slots=True)
class OutputDocument:
    """The complete dashboard payload for one run."""

    generated_at: datetime
    topics_available: List[str]
    top_news: List[EnrichedItem]
    funding_ma: List[EnrichedItem]
    hashtags: List[Hashtag]
    ticker: List[TickerEntry]
