from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional, Sequence

from .hashtags import HashtagRanker
from .models import EnrichedItem, Hashtag, OutputDocument, TickerEntry


def assemble_document(
    items: Sequence[EnrichedItem],
    topics_available: Sequence[str],
    is_funding: Callable[[EnrichedItem], bool],
    ranker: HashtagRanker,
    top_news_limit: int = 50,
    funding_limit: int = 50,
    ticker_limit: int = 30,
    generated_at: Optional[datetime] = None,
) -> OutputDocument:
    """Compose the dashboard document from enriched, date-ordered items."""
    top_news = list(items[:top_news_limit])
    funding = [item for item in items if is_funding(item)][:funding_limit]
    ticker = [TickerEntry(text=item.title, link=item.link) for item in items[:ticker_limit]]
    return OutputDocument(
        generated_at=generated_at or datetime.now(timezone.utc),
        topics_available=list(topics_available),
        top_news=top_news,
        funding_ma=funding,
        hashtags=ranker.rank(top_news),
        ticker=ticker,
    )


def format_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def item_to_dict(item: EnrichedItem) -> Dict[str, Any]:
    return {
        "title": item.title,
        "link": item.link,
        "isoDate": format_timestamp(item.iso_date),
        "source": item.source,
        "summary": item.summary,
        "topics": list(item.topics),
    }


def _hashtag_to_dict(tag: Hashtag) -> Dict[str, str]:
    return {"label": tag.label, "url": tag.url}


def document_to_dict(document: OutputDocument) -> Dict[str, Any]:
    return {
        "generated_at": format_timestamp(document.generated_at),
        "topics_available": list(document.topics_available),
        "top_news": [item_to_dict(item) for item in document.top_news],
        "funding_ma": [item_to_dict(item) for item in document.funding_ma],
        "hashtags": [_hashtag_to_dict(tag) for tag in document.hashtags],
        "ticker": [{"text": entry.text, "link": entry.link} for entry in document.ticker],
    }
