import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from mr_news.config import PipelineConfig
from mr_news.summarizer import (
    LocalSummarizer,
    OpenAISummarizer,
    build_summarizer,
    summarize_fallback,
)


def _response(payload=None, status=200, body=None):
    response = MagicMock()
    response.status_code = status
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status} error")
    if body is None:
        body = json.dumps(payload).encode("utf-8")
    response.iter_content.return_value = [body[:16], body[16:]]
    return response


def _reply(text):
    return {"choices": [{"message": {"role": "assistant", "content": text}}]}


def _summarizer():
    return OpenAISummarizer(api_key="sk-test", url="https://llm.example.com/v1/chat", model="tiny", timeout=3)


def test_fallback_keeps_first_two_sentences_and_strips_tags():
    text = "<p>First point.</p>\n\n<p>Second   point!  Third point? Fourth.</p>"
    assert summarize_fallback(text) == "First point. Second point!"


def test_fallback_empty_text():
    assert summarize_fallback("") == ""
    assert summarize_fallback(None) == ""


@pytest.mark.parametrize(
    "text",
    [
        "word " * 200,
        "A" * 1000,
        "Short one. " + "x" * 500 + ".",
        "<div>" + "Sentence without end " * 30 + "</div>",
    ],
)
def test_fallback_never_exceeds_cap(text):
    summary = summarize_fallback(text)
    assert len(summary) <= 240


def test_fallback_truncates_with_ellipsis():
    summary = summarize_fallback("A" * 500, max_chars=50)
    assert len(summary) == 50
    assert summary.endswith("…")


def test_local_summarizer_uses_configured_cap():
    assert len(LocalSummarizer(max_chars=20).summarize("B" * 100)) == 20


def test_backend_reply_is_cleaned_and_capped():
    long_reply = "<b>Insight</b> " + "y" * 400
    with patch("mr_news.summarizer.requests.post", return_value=_response(_reply(long_reply))) as post:
        summary = _summarizer().summarize("Original blurb about a survey.")

    assert summary.startswith("Insight y")
    assert len(summary) == 240
    _, kwargs = post.call_args
    assert kwargs["timeout"] == 3
    assert kwargs["headers"]["Authorization"] == "Bearer sk-test"
    assert kwargs["json"]["model"] == "tiny"
    assert "Original blurb about a survey." in kwargs["json"]["messages"][0]["content"]


def test_empty_backend_reply_falls_back_to_raw_text():
    with patch("mr_news.summarizer.requests.post", return_value=_response(_reply("   "))):
        assert _summarizer().summarize("Raw text. More. Even more.") == "Raw text. More."


@pytest.mark.parametrize(
    "outcome",
    [
        requests.ConnectionError("boom"),
        requests.Timeout("slow"),
        _response(status=500),
        _response(body=b"not json"),
        _response({"choices": []}),
        _response({"unexpected": True}),
        _response(_reply(42)),
    ],
)
def test_backend_failures_use_local_summary(outcome, caplog):
    kwargs = {"side_effect": outcome} if isinstance(outcome, Exception) else {"return_value": outcome}
    with patch("mr_news.summarizer.requests.post", **kwargs):
        summary = _summarizer().summarize("Local one. Local two. Local three.")

    assert summary == "Local one. Local two."
    assert "Summarization backend failed" in caplog.text


def test_openai_summarizer_requires_key():
    with pytest.raises(ValueError):
        OpenAISummarizer(api_key="", url="https://x", model="m")


def test_build_summarizer_selects_backend_only_with_key():
    assert isinstance(build_summarizer(PipelineConfig(openai_api_key=None)), LocalSummarizer)
    assert isinstance(build_summarizer(PipelineConfig(openai_api_key="sk")), OpenAISummarizer)
    assert isinstance(build_summarizer(PipelineConfig(openai_api_key="sk"), use_backend=False), LocalSummarizer)


def test_slow_backend_reply_hits_call_deadline(caplog):
    response = _response(_reply("Never used."))
    response.iter_content.return_value = [b"{", b'"choices"', b": []", b"}"]
    clock = iter([100.0, 101.0, 102.5, 104.0, 105.0])
    with patch("mr_news.summarizer.requests.post", return_value=response), patch(
        "mr_news.summarizer.monotonic", side_effect=lambda: next(clock)
    ):
        summary = _summarizer().summarize("Local one. Local two. Local three.")

    assert summary == "Local one. Local two."
    assert "exceeded the call timeout" in caplog.text
    response.close.assert_called_once()


def test_broken_stream_uses_local_summary():
    response = _response(_reply("Never used."))
    response.iter_content.side_effect = requests.exceptions.ChunkedEncodingError("reset")
    with patch("mr_news.summarizer.requests.post", return_value=response):
        assert _summarizer().summarize("Only sentence.") == "Only sentence."


def test_backend_call_is_streamed_and_closed():
    response = _response(_reply("Backend synopsis."))
    with patch("mr_news.summarizer.requests.post", return_value=response) as post:
        assert _summarizer().summarize("Raw.") == "Backend synopsis."

    assert post.call_args.kwargs["stream"] is True
    response.close.assert_called_once()
