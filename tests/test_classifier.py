from mr_news import defaults
from mr_news.classifier import FundingClassifier, classify_topics

TAXONOMY = {
    "CX": ["cx", "customer experience"],
    "Qual": ["focus group", "qualitative"],
    "Healthcare": ["pharma", "patient"],
}


def test_topics_follow_taxonomy_order():
    text = "Pharma firm runs a focus group on Customer Experience"
    assert classify_topics(text, TAXONOMY) == ["CX", "Qual", "Healthcare"]


def test_each_topic_listed_once():
    text = "qualitative focus group with qualitative follow-up"
    assert classify_topics(text, TAXONOMY) == ["Qual"]


def test_no_match_falls_back_to_other():
    assert classify_topics("Weather is nice today", TAXONOMY) == ["(Other)"]
    assert classify_topics("", TAXONOMY) == ["(Other)"]


def test_funding_examples():
    funding = FundingClassifier(defaults.FUNDING_PATTERN)

    assert funding.is_funding("Acme raises $10M Series B", "") is True
    assert funding.is_funding("Global CX Market to Reach $5B by 2030", "") is False


def test_funding_matches_summary_and_is_case_insensitive():
    funding = FundingClassifier(defaults.FUNDING_PATTERN)

    assert funding.is_funding("Panel provider news", "The deal marks its second ACQUISITION this year.") is True
    assert funding.is_funding("Quiet week", None) is False
    assert funding.is_funding(None, "Rumoured MERGER talks") is True
