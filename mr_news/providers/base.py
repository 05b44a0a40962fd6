from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from ..models import RawEntry


class BaseFeedSource(ABC):
    """Abstract base class for feed sources."""

    @abstractmethod
    def fetch(self, url: str) -> Iterable[RawEntry]:
        """Return the ``RawEntry`` objects of one feed, or raise ``FeedError``."""
