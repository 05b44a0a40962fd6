from __future__ import annotations

from typing import Iterable, List

from .models import Item


def dedupe_and_sort(items: Iterable[Item]) -> List[Item]:
    """Keep the first item per link, newest first.

    Items without a link are dropped. ``sorted`` is stable with
    ``reverse=True`` too, so equal timestamps keep their input order.
    """
    seen_links: set[str] = set()
    kept: List[Item] = []
    for item in items:
        if not item.link or item.link in seen_links:
            continue
        seen_links.add(item.link)
        kept.append(item)
    return sorted(kept, key=lambda item: item.iso_date, reverse=True)
