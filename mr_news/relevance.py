from __future__ import annotations

from typing import Iterable, Tuple

from .models import Item
from .normalizer import bare_hostname


class RelevanceFilter:
    """Decides whether an item is genuine market-research news.

    Negative terms veto an item outright, even from a trusted host.
    Trusted hosts skip the positive-term requirement.
    """

    def __init__(
        self,
        positive_terms: Iterable[str],
        negative_terms: Iterable[str],
        trusted_hosts: Iterable[str],
    ) -> None:
        self._positive: Tuple[str, ...] = tuple(term.lower() for term in positive_terms)
        self._negative: Tuple[str, ...] = tuple(term.lower() for term in negative_terms)
        self._trusted = {_strip_www(host.lower()) for host in trusted_hosts}

    def is_relevant(self, item: Item) -> bool:
        text = f"{item.title.lower()} {item.raw_text.lower()}"
        if any(term in text for term in self._negative):
            return False
        if bare_hostname(item.link) in self._trusted:
            return True
        return any(term in text for term in self._positive)


def _strip_www(host: str) -> str:
    return host[4:] if host.startswith("www.") else host
