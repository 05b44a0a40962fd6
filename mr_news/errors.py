from __future__ import annotations


class FeedError(Exception):
    """A single feed could not be retrieved or parsed."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class SummarizationBackendError(Exception):
    """The text-generation backend failed or returned an unusable reply."""


class OutputWriteError(Exception):
    """The output document could not be written."""
