"""Compiled-in defaults for the market-research news pipeline.

Everything here can be overridden through :class:`mr_news.config.PipelineConfig`.
"""

from __future__ import annotations

from typing import Dict, List

FEEDS: List[str] = [
    "https://www.research-live.com/rss",
    "https://www.quirks.com/rss",
    "https://www.mrweb.com/drno/rssdailynews.xml",
    # Broad Google News query, filtered heavily downstream
    "https://news.google.com/rss/search?q=%22market%20research%22%20OR%20%22consumer%20insights%22"
    "%20OR%20%22customer%20experience%22%20OR%20%22focus%20group%22%20OR%20%22survey%22"
    "&hl=en-IN&gl=IN&ceid=IN:en",
]

# Survey, methodology, qual/quant and CX vocabulary
POSITIVE_TERMS: List[str] = [
    "market research", "consumer insight", "consumer insights", "mrx",
    "survey", "surveys", "questionnaire", "panel", "panellist", "sample",
    "focus group", "fgd", "qualitative", "quantitative", "ethnography", "idi", "in-depth interview",
    "discussion guide", "concept test", "copy test", "ad test", "ad testing", "conjoint", "segmentation",
    "maxdiff", "van westendorp", "gabor granger", "cx", "customer experience", "nps", "csat",
    "esomar", "gritm", "insight platform", "fieldwork", "cati", "cawi", "capi", "online community",
    "diary study", "usability test", "card sort", "tree test",
]

# Forecast/CAGR press-release boilerplate and wire distributors
NEGATIVE_TERMS: List[str] = [
    "forecast", "forecasts", "cagr", "market size", "usd", "billion", "million",
    "2024", "2025", "2026", "2027", "2028", "2029", "2030",
    "researchandmarkets", "openpr", "industrytoday", "globenewswire", "prnewswire",
    "financialcontent", "yahoo finance", "seeking alpha",
]

TRUSTED_HOSTS: List[str] = [
    "research-live.com",
    "quirks.com",
    "mrweb.com",
]

TOPICS: Dict[str, List[str]] = {
    "AI in MR": [
        "ai", "artificial intelligence", "genai", "gpt", "generative", "llm", "machine learning",
        "ml", "nlp", "langchain", "vector db", "rag", "openai", "anthropic", "gemini",
    ],
    "CX": [
        "cx", "customer experience", "nps", "csat", "customer satisfaction", "customer service",
        "contact center", "call center", "journey", "touchpoint",
    ],
    "Ad testing": [
        "ad test", "ad testing", "copy test", "creative test", "ad effectiveness", "brand lift",
        "pre-test", "pretest", "pre testing", "ad recall",
    ],
    "B2B": [
        "b2b", "enterprise", "decision maker", "procurement", "it decision maker", "idm",
    ],
    "Healthcare": [
        "healthcare", "pharma", "patient", "hcp", "clinical", "medical device", "medtech",
    ],
    "Innovation in MR": [
        "innovation", "new methodology", "new method", "experimental", "agile", "mobile ethnography",
        "automation", "synthetic data", "digital behavior", "behavioral",
    ],
    "Qualitative Research": [
        "qualitative", "focus group", "depth interview", "idi", "ethnography", "co-creation",
        "discussion guide", "transcript", "thematic",
    ],
}

OTHER_TOPIC = "(Other)"

FUNDING_PATTERN = (
    r"(funding|raises|raised|seed|series\s+[a-e]\b|acquire|acquisition|merger|m&a|buyout"
    r"|invest|investment|venture|vc)"
)

STOP_WORDS: List[str] = [
    "the", "and", "for", "are", "but", "not", "you", "all", "any", "can", "had", "her", "was",
    "one", "our", "out", "has", "have", "his", "how", "its", "may", "new", "now", "old", "see",
    "two", "way", "who", "why", "did", "get", "got", "let", "say", "says", "said", "she", "too",
    "use", "with", "from", "into", "over", "than", "that", "this", "these", "those", "then",
    "they", "them", "their", "there", "what", "when", "where", "which", "while", "will", "would",
    "could", "should", "about", "after", "before", "more", "most", "just", "also", "only",
    "your", "yours", "been", "being", "were", "here", "some", "such", "very", "each", "other",
    "amid", "via", "per", "top", "best", "first", "last", "next", "year", "years", "week",
    "today", "news", "report", "reports", "study", "market", "markets", "research", "growth",
    "industry", "global", "company", "companies", "business", "launch", "launches", "announces",
    "com", "www", "http", "https", "html",
]

SHORT_ACRONYMS: List[str] = [
    "ai", "cx", "ux", "mr", "hr", "ml", "vr", "ar", "b2b", "b2c", "nps", "llm", "gpt", "csat",
    "idi", "fgd", "mrx", "kpi", "roi", "esg", "dei", "seo", "api", "ceo", "cmo",
]

HASHTAG_SEARCH_URL = "https://www.google.com/search?q="

SUMMARY_MAX_CHARS = 240
TOP_NEWS_LIMIT = 50
FUNDING_LIMIT = 50
TICKER_LIMIT = 30
HASHTAG_LIMIT = 20

OPENAI_URL = "https://api.openai.com/v1/chat/completions"
OPENAI_MODEL = "gpt-4o-mini"

OUTPUT_PATH = "data/news.json"
