from __future__ import annotations

import re
from typing import List, Mapping, Optional, Sequence

from .defaults import OTHER_TOPIC


def classify_topics(text: str, taxonomy: Mapping[str, Sequence[str]]) -> List[str]:
    """Topic labels whose keywords occur in ``text``, in taxonomy order."""
    lowered = text.lower()
    topics = [
        topic
        for topic, keywords in taxonomy.items()
        if any(keyword.lower() in lowered for keyword in keywords)
    ]
    return topics or [OTHER_TOPIC]


class FundingClassifier:
    """Flags funding, investment and M&A stories."""

    def __init__(self, pattern: str) -> None:
        self._pattern = re.compile(pattern, re.IGNORECASE)

    def is_funding(self, title: Optional[str], summary: Optional[str]) -> bool:
        return bool(self._pattern.search(title or "")) or bool(self._pattern.search(summary or ""))
