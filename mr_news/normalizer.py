from __future__ import annotations

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional
from urllib.parse import urlparse

from .models import Item, RawEntry


def hostname(url: Optional[str]) -> Optional[str]:
    """Lowercased hostname of ``url``, or ``None`` when it has none."""
    if not url:
        return None
    try:
        host = urlparse(url).hostname
    except ValueError:
        return None
    return host.lower() if host else None


def bare_hostname(url: Optional[str]) -> Optional[str]:
    host = hostname(url)
    if host and host.startswith("www."):
        host = host[4:]
    return host or None


def normalize_entry(raw: RawEntry, captured_at: datetime) -> Item:
    return Item(
        title=(raw.title or "").strip() or "Untitled",
        link=(raw.link or "").strip(),
        iso_date=_resolve_date(raw, captured_at),
        source=bare_hostname(raw.link) or raw.creator or raw.author or "",
        raw_text=raw.content_snippet or raw.content or raw.summary or "",
    )


def _resolve_date(raw: RawEntry, captured_at: datetime) -> datetime:
    if raw.iso_date is not None:
        return _as_utc(raw.iso_date)
    parsed = _parse_date(raw.pub_date)
    if parsed is not None:
        return parsed
    return _as_utc(captured_at)


def _parse_date(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    value = value.strip()
    try:
        return _as_utc(parsedate_to_datetime(value))
    except (TypeError, ValueError, IndexError):
        pass
    try:
        return _as_utc(datetime.fromisoformat(value.replace("Z", "+00:00")))
    except ValueError:
        return None


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
