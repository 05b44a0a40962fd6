from __future__ import annotations

from abc import ABC, abstractmethod
import json
import logging
import re
from time import monotonic
from typing import List, Optional

import requests

from .config import PipelineConfig
from .defaults import SUMMARY_MAX_CHARS
from .errors import SummarizationBackendError

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"</?[^>]+(>|$)")
_SPACE_RE = re.compile(r"\s+")

PROMPT_TEMPLATE = (
    "Summarize this news blurb for a market research dashboard in 2 crisp lines "
    "(max ~240 characters total). No fluff, just the key point:\n\n\"\"\"{text}\"\"\""
)


def summarize_fallback(text: Optional[str], max_chars: int = SUMMARY_MAX_CHARS) -> str:
    """First one or two sentences of ``text`` as plain text, capped at ``max_chars``."""
    if not text:
        return ""
    clean = _SPACE_RE.sub(" ", _TAG_RE.sub(" ", text)).strip()
    base = " ".join(_split_sentences(clean)[:2]) or clean
    if len(base) > max_chars:
        return base[: max_chars - 1] + "…"
    return base


def _split_sentences(text: str) -> List[str]:
    split = re.split(r"(?<=[.!?])\s+", text.strip())
    return [sentence.strip() for sentence in split if sentence.strip()]


class BaseSummarizer(ABC):
    """Turns an item's raw text into a short synopsis."""

    def __init__(self, max_chars: int = SUMMARY_MAX_CHARS) -> None:
        self.max_chars = max_chars

    @abstractmethod
    def summarize(self, text: str) -> str:
        """Return a synopsis of at most ``max_chars`` characters."""


class LocalSummarizer(BaseSummarizer):
    """Sentence truncation, no external calls."""

    def summarize(self, text: str) -> str:
        return summarize_fallback(text, self.max_chars)


class OpenAISummarizer(BaseSummarizer):
    """Summaries from an OpenAI-compatible chat completions endpoint.

    Backend failures never propagate: the item gets the local summary
    instead and the failure is logged.
    """

    def __init__(
        self,
        api_key: str,
        url: str,
        model: str,
        timeout: float = 20.0,
        max_chars: int = SUMMARY_MAX_CHARS,
    ) -> None:
        if not api_key:
            raise ValueError("OpenAISummarizer requires an API key")
        super().__init__(max_chars)
        self._api_key = api_key
        self._url = url
        self._model = model
        self._timeout = timeout

    def summarize(self, text: str) -> str:
        try:
            reply = self.complete(text)
        except SummarizationBackendError as exc:
            logger.warning("Summarization backend failed, using local summary: %s", exc)
            return summarize_fallback(text, self.max_chars)
        if not reply:
            return summarize_fallback(text, self.max_chars)
        return summarize_fallback(reply, self.max_chars)

    def complete(self, text: str) -> str:
        payload = {
            "model": self._model,
            "messages": [{"role": "user", "content": PROMPT_TEMPLATE.format(text=text)}],
            "temperature": 0.2,
            "max_tokens": 120,
        }
        deadline = monotonic() + self._timeout
        try:
            response = requests.post(
                self._url,
                json=payload,
                headers={"Authorization": f"Bearer {self._api_key}"},
                timeout=self._timeout,
                stream=True,
            )
            try:
                response.raise_for_status()
                body = _read_until(response, deadline)
            finally:
                response.close()
        except requests.RequestException as exc:
            raise SummarizationBackendError(str(exc)) from exc
        try:
            data = json.loads(body)
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise SummarizationBackendError(f"malformed response: {exc!r}") from exc
        if content is None:
            return ""
        if not isinstance(content, str):
            raise SummarizationBackendError("malformed response: non-text content")
        return content.strip()


def build_summarizer(config: PipelineConfig, use_backend: bool = True) -> BaseSummarizer:
    if use_backend and config.openai_api_key:
        return OpenAISummarizer(
            api_key=config.openai_api_key,
            url=config.openai_url,
            model=config.openai_model,
            timeout=config.summary_timeout,
            max_chars=config.summary_max_chars,
        )
    return LocalSummarizer(config.summary_max_chars)


def _read_until(response: requests.Response, deadline: float) -> bytes:
    """Read the whole body, giving up once ``deadline`` has passed.

    ``timeout=`` in requests bounds each socket wait, not the whole call.
    """
    chunks: List[bytes] = []
    for chunk in response.iter_content(chunk_size=4096):
        if monotonic() > deadline:
            raise SummarizationBackendError("backend reply exceeded the call timeout")
        chunks.append(chunk)
    return b"".join(chunks)
