"""Shared fixtures for the news pipeline tests."""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

import pytest

from mr_news.config import PipelineConfig
from mr_news.models import EnrichedItem, Item

BASE_TIME = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_item(link, title="Untitled", hours_ago=0, raw_text="", source="example.com"):
    return Item(
        title=title,
        link=link,
        iso_date=BASE_TIME - timedelta(hours=hours_ago),
        source=source,
        raw_text=raw_text,
    )


def make_enriched(link, title="Untitled", hours_ago=0, summary="", topics=None):
    return EnrichedItem(
        title=title,
        link=link,
        iso_date=BASE_TIME - timedelta(hours=hours_ago),
        source="example.com",
        raw_text=summary,
        summary=summary,
        topics=topics or ["(Other)"],
    )


@pytest.fixture
def small_config():
    """Config with tiny fixture vocabularies instead of the production lists."""
    return PipelineConfig(
        feeds=["https://feeds.example.com/a", "https://feeds.example.com/b"],
        topics={
            "CX": ["cx", "customer experience"],
            "Qual": ["focus group", "qualitative"],
        },
        positive_terms=["survey", "focus group", "customer experience"],
        negative_terms=["forecast", "cagr", "prnewswire"],
        trusted_hosts=["quirks.com"],
        stop_words=["the", "and", "growth", "market"],
        short_acronyms=["ai", "cx", "nps"],
        openai_api_key=None,
        summary_workers=4,
    )
