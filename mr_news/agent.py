from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
import json
import logging
import os
from pathlib import Path
import tempfile
from typing import Iterable, List, Optional, Union

from .assembler import assemble_document, document_to_dict
from .classifier import FundingClassifier, classify_topics
from .config import PipelineConfig
from .dedup import dedupe_and_sort
from .errors import FeedError, OutputWriteError
from .hashtags import HashtagRanker
from .models import EnrichedItem, Item, OutputDocument
from .normalizer import normalize_entry
from .providers.base import BaseFeedSource
from .providers.rss_provider import RSSFeedSource
from .relevance import RelevanceFilter
from .summarizer import BaseSummarizer, build_summarizer, summarize_fallback

logger = logging.getLogger(__name__)


class NewsAgent:
    """Fetches, filters, enriches and assembles the market-research feed."""

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        source: Optional[BaseFeedSource] = None,
        summarizer: Optional[BaseSummarizer] = None,
    ) -> None:
        self.config = config or PipelineConfig.from_env()
        self.source = source or RSSFeedSource(timeout=self.config.feed_timeout)
        self.summarizer = summarizer or build_summarizer(self.config)
        self.relevance = RelevanceFilter(
            self.config.positive_terms,
            self.config.negative_terms,
            self.config.trusted_hosts,
        )
        self.funding = FundingClassifier(self.config.funding_pattern)
        self.ranker = HashtagRanker(
            self.config.stop_words,
            self.config.short_acronyms,
            search_url=self.config.hashtag_search_url,
            limit=self.config.hashtag_limit,
        )

    def run(self) -> OutputDocument:
        items = dedupe_and_sort(self.collect())
        relevant = [item for item in items if self.relevance.is_relevant(item)]
        logger.info("Kept %d of %d unique items after relevance filtering", len(relevant), len(items))
        enriched = self.enrich(relevant)
        return assemble_document(
            enriched,
            topics_available=list(self.config.topics),
            is_funding=self.is_funding,
            ranker=self.ranker,
            top_news_limit=self.config.top_news_limit,
            funding_limit=self.config.funding_limit,
            ticker_limit=self.config.ticker_limit,
        )

    def collect(self, feeds: Optional[Iterable[str]] = None) -> List[Item]:
        """Normalized items of every feed, in feed-list order.

        A failing feed is logged and contributes nothing.
        """
        captured_at = datetime.now(timezone.utc)
        items: List[Item] = []
        for url in feeds if feeds is not None else self.config.feeds:
            try:
                entries = list(self.source.fetch(url))
            except FeedError as exc:
                logger.warning("Feed failed, skipping: %s", exc)
                continue
            logger.info("Fetched %d entries from %s", len(entries), url)
            items.extend(normalize_entry(entry, captured_at) for entry in entries)
        return items

    def enrich(self, items: List[Item]) -> List[EnrichedItem]:
        if not items:
            return []
        texts = [_summary_input(item) for item in items]
        workers = max(1, min(self.config.summary_workers, len(items)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            summaries = list(executor.map(self.summarizer.summarize, texts))
        return [
            EnrichedItem(
                title=item.title,
                link=item.link,
                iso_date=item.iso_date,
                source=item.source,
                raw_text=item.raw_text,
                summary=summary,
                topics=classify_topics(f"{item.title} {item.raw_text}", self.config.topics),
            )
            for item, summary in zip(items, summaries)
        ]

    def is_funding(self, item: EnrichedItem) -> bool:
        if self.config.funding_uses_raw_text:
            return self.funding.is_funding(item.title, item.raw_text)
        return self.funding.is_funding(item.title, item.summary)


def _summary_input(item: Item) -> str:
    """Raw text to summarize, or the title when the text is only markup."""
    if item.raw_text and summarize_fallback(item.raw_text):
        return item.raw_text
    return item.title


def write_document(document: OutputDocument, path: Union[str, Path]) -> Path:
    """Atomically replace ``path`` with the JSON rendering of ``document``."""
    target = Path(path)
    tmp_name: Optional[str] = None
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            json.dump(document_to_dict(document), handle, ensure_ascii=False, indent=2)
            handle.write("\n")
        os.replace(tmp_name, target)
    except (OSError, ValueError) as exc:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise OutputWriteError(f"could not write {target}: {exc}") from exc
    logger.info("Wrote %d items to %s", len(document.top_news), target)
    return target
