from datetime import datetime, timezone

from mr_news.models import RawEntry
from mr_news.normalizer import bare_hostname, hostname, normalize_entry

CAPTURED = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)


def test_hostname_lowercases_and_rejects_garbage():
    assert hostname("https://WWW.Quirks.com/articles/1") == "www.quirks.com"
    assert hostname("not a url") is None
    assert hostname("") is None
    assert hostname(None) is None


def test_bare_hostname_strips_www_prefix():
    assert bare_hostname("https://www.research-live.com/article/x") == "research-live.com"
    assert bare_hostname("https://news.google.com/rss/articles/abc") == "news.google.com"


def test_missing_fields_receive_defaults():
    item = normalize_entry(RawEntry(), CAPTURED)

    assert item.title == "Untitled"
    assert item.link == ""
    assert item.iso_date == CAPTURED
    assert item.source == ""
    assert item.raw_text == ""


def test_source_falls_back_to_creator_then_author():
    with_creator = normalize_entry(RawEntry(link="garbage", creator="Jane", author="Desk"), CAPTURED)
    with_author = normalize_entry(RawEntry(author="Desk"), CAPTURED)

    assert with_creator.source == "Jane"
    assert with_author.source == "Desk"


def test_raw_text_prefers_snippet_then_content_then_summary():
    entry = RawEntry(content="<p>Full</p>", summary="Short")
    assert normalize_entry(entry, CAPTURED).raw_text == "<p>Full</p>"

    entry = RawEntry(content_snippet="Snippet", content="<p>Full</p>", summary="Short")
    assert normalize_entry(entry, CAPTURED).raw_text == "Snippet"

    assert normalize_entry(RawEntry(summary="Short"), CAPTURED).raw_text == "Short"


def test_pub_date_parsed_when_iso_date_missing():
    rfc = normalize_entry(RawEntry(pub_date="Mon, 01 Jan 2024 10:00:00 GMT"), CAPTURED)
    iso = normalize_entry(RawEntry(pub_date="2024-01-02T08:00:00Z"), CAPTURED)
    bad = normalize_entry(RawEntry(pub_date="yesterday-ish"), CAPTURED)

    assert rfc.iso_date == datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)
    assert iso.iso_date == datetime(2024, 1, 2, 8, 0, tzinfo=timezone.utc)
    assert bad.iso_date == CAPTURED


def test_naive_iso_date_is_treated_as_utc():
    item = normalize_entry(RawEntry(iso_date=datetime(2024, 2, 2, 2, 2)), CAPTURED)
    assert item.iso_date == datetime(2024, 2, 2, 2, 2, tzinfo=timezone.utc)
