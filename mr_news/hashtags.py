from __future__ import annotations

from collections import Counter
import re
from typing import Iterable, List
from urllib.parse import quote

from .defaults import HASHTAG_LIMIT, HASHTAG_SEARCH_URL
from .models import EnrichedItem, Hashtag

_PUBLISHER_SUFFIX_RE = re.compile(r"\s+-\s+(?:(?!\s-\s).)*$")
_NON_TOKEN_RE = re.compile(r"[^a-z0-9#]+")
_DOMAIN_RE = re.compile(r"^[a-z0-9-]+\.[a-z]{2,}$")
_SUFFIX_FRAGMENT_RE = re.compile(r"^[a-z0-9]+(?:co|uk|in|us|eu|de|fr|it)$")
_NUMERIC_RE = re.compile(r"^\d+$")
_EDGE_PUNCTUATION = "\"'()[]{}<>,;:!?."


class HashtagRanker:
    """Trending hashtags from the most frequent title words."""

    def __init__(
        self,
        stop_words: Iterable[str],
        short_acronyms: Iterable[str],
        search_url: str = HASHTAG_SEARCH_URL,
        limit: int = HASHTAG_LIMIT,
    ) -> None:
        self._stop_words = {word.lower() for word in stop_words}
        self._acronyms = {word.lower() for word in short_acronyms}
        self._search_url = search_url
        self._limit = limit

    def rank(self, items: Iterable[EnrichedItem]) -> List[Hashtag]:
        counts: Counter[str] = Counter()
        for item in items:
            counts.update(token for token in tokenize_title(item.title) if self._is_candidate(token))
        ranked = sorted(counts.items(), key=lambda pair: (-pair[1], pair[0]))
        selected = [token for token, _ in ranked if len(token) >= 4 or token in self._acronyms]
        return [self._render(token) for token in selected[: self._limit]]

    def _is_candidate(self, token: str) -> bool:
        if len(token) < 3 and token not in self._acronyms:
            return False
        if token in self._stop_words:
            return False
        if _SUFFIX_FRAGMENT_RE.match(token):
            return False
        return not _NUMERIC_RE.match(token)

    def _render(self, token: str) -> Hashtag:
        label = f"#{token.upper()}" if token in self._acronyms else f"#{token}"
        return Hashtag(label=label, url=self._search_url + quote(f"#{token}", safe=""))


def tokenize_title(title: str) -> List[str]:
    """Lowercased words of a headline without its " - Publisher" suffix.

    Bare domain names ("quirks.com") are dropped before punctuation is
    turned into spaces.
    """
    stripped = _PUBLISHER_SUFFIX_RE.sub("", title or "")
    tokens: List[str] = []
    for word in stripped.lower().split():
        if _DOMAIN_RE.match(word.strip(_EDGE_PUNCTUATION)):
            continue
        tokens.extend(part.strip("#") for part in _NON_TOKEN_RE.sub(" ", word).split() if part.strip("#"))
    return tokens
