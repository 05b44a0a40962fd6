from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from . import defaults


def _split_csv(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(slots=True)
class PipelineConfig:
    """Runtime configuration for the news pipeline."""

    feeds: List[str] = field(default_factory=lambda: list(defaults.FEEDS))
    topics: Dict[str, List[str]] = field(default_factory=lambda: {k: list(v) for k, v in defaults.TOPICS.items()})
    funding_pattern: str = defaults.FUNDING_PATTERN
    funding_uses_raw_text: bool = False
    positive_terms: List[str] = field(default_factory=lambda: list(defaults.POSITIVE_TERMS))
    negative_terms: List[str] = field(default_factory=lambda: list(defaults.NEGATIVE_TERMS))
    trusted_hosts: List[str] = field(default_factory=lambda: list(defaults.TRUSTED_HOSTS))
    stop_words: List[str] = field(default_factory=lambda: list(defaults.STOP_WORDS))
    short_acronyms: List[str] = field(default_factory=lambda: list(defaults.SHORT_ACRONYMS))
    hashtag_search_url: str = defaults.HASHTAG_SEARCH_URL
    summary_max_chars: int = defaults.SUMMARY_MAX_CHARS
    top_news_limit: int = defaults.TOP_NEWS_LIMIT
    funding_limit: int = defaults.FUNDING_LIMIT
    ticker_limit: int = defaults.TICKER_LIMIT
    hashtag_limit: int = defaults.HASHTAG_LIMIT
    openai_api_key: Optional[str] = None
    openai_url: str = defaults.OPENAI_URL
    openai_model: str = defaults.OPENAI_MODEL
    summary_timeout: float = 20.0
    summary_workers: int = 8
    feed_timeout: float = 15.0
    output_path: str = defaults.OUTPUT_PATH

    @classmethod
    def from_env(cls) -> "PipelineConfig":
        import os

        config = cls(
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            openai_url=os.getenv("MR_NEWS_OPENAI_URL", defaults.OPENAI_URL),
            openai_model=os.getenv("MR_NEWS_OPENAI_MODEL", defaults.OPENAI_MODEL),
            output_path=os.getenv("MR_NEWS_OUTPUT_PATH", defaults.OUTPUT_PATH),
            summary_timeout=_parse_positive_float("MR_NEWS_SUMMARY_TIMEOUT", os.getenv("MR_NEWS_SUMMARY_TIMEOUT"), 20.0),
            summary_workers=_parse_positive_int("MR_NEWS_SUMMARY_WORKERS", os.getenv("MR_NEWS_SUMMARY_WORKERS"), 8),
            feed_timeout=_parse_positive_float("MR_NEWS_FEED_TIMEOUT", os.getenv("MR_NEWS_FEED_TIMEOUT"), 15.0),
            funding_uses_raw_text=_parse_bool(os.getenv("MR_NEWS_FUNDING_USES_RAW_TEXT")),
        )
        feeds = _split_csv(os.getenv("MR_NEWS_FEEDS"))
        if feeds:
            config.feeds = feeds
        return config


def _parse_positive_int(name: str, value: Optional[str], default: int) -> int:
    if value is None or value.strip() == "":
        return default
    try:
        parsed = int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer if set") from None
    if parsed <= 0:
        raise ValueError(f"{name} must be positive")
    return parsed


def _parse_positive_float(name: str, value: Optional[str], default: float) -> float:
    if value is None or value.strip() == "":
        return default
    try:
        parsed = float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number if set") from None
    if parsed <= 0:
        raise ValueError(f"{name} must be positive")
    return parsed


def _parse_bool(value: Optional[str]) -> bool:
    if not value:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}
