"""Market-research news feed aggregator."""

from .agent import NewsAgent, write_document
from .config import PipelineConfig

__all__ = ["NewsAgent", "PipelineConfig", "write_document"]
