from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from .agent import NewsAgent, write_document
from .config import PipelineConfig
from .errors import OutputWriteError
from .summarizer import build_summarizer

logger = logging.getLogger("mr_news")


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Build the market-research news feed JSON")
    p.add_argument("--output", help="Path of the JSON document (default: data/news.json)")
    p.add_argument("--feed", action="append", dest="feeds", help="Feed URL; repeat to replace the feed list")
    p.add_argument("--no-ai", action="store_true", help="Use local summaries even if an API key is set")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.getenv("MR_NEWS_LOG_LEVEL", "INFO"),
        help="Logging level (default: $MR_NEWS_LOG_LEVEL or INFO)",
    )
    args = p.parse_args(argv)
    # argparse converts string defaults but never checks them against choices
    if args.log_level not in LOG_LEVELS:
        p.error(f"invalid MR_NEWS_LOG_LEVEL: {args.log_level!r}")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = PipelineConfig.from_env()
    if args.feeds:
        config.feeds = list(args.feeds)
    if args.output:
        config.output_path = args.output
    agent = NewsAgent(config, summarizer=build_summarizer(config, use_backend=not args.no_ai))
    logger.info("Summarizing with %s", type(agent.summarizer).__name__)
    document = agent.run()
    try:
        write_document(document, config.output_path)
    except OutputWriteError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
