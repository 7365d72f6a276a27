from datetime import timedelta

from tripwise.services.safety_classifier import (
    MAX_HEADLINES,
    RECOMMENDATIONS,
    classify_articles,
    decide_severity,
    ArticleHits,
    KeywordHit,
)


def _article(title, days_ago, now, description=""):
    return {
        "title": title,
        "description": description,
        "publishedAt": (now - timedelta(days=days_ago)).isoformat().replace("+00:00", "Z"),
    }


def test_recent_airstrike_is_high(fixed_now):
    articles = [_article("Airstrike hits outskirts of the city", 5, fixed_now)]
    verdict = classify_articles(articles, destination="Testville", now=fixed_now)
    assert verdict is not None
    assert verdict.has_concerns is True
    assert verdict.severity_level == "high"
    assert verdict.recommendations == list(RECOMMENDATIONS["high"])
    assert verdict.headlines[0]["title"] == "Airstrike hits outskirts of the city"


def test_empty_articles_return_none(fixed_now):
    assert classify_articles([], now=fixed_now) is None
    assert classify_articles(None, now=fixed_now) is None


def test_no_keyword_matches_return_none(fixed_now):
    articles = [_article("New museum opens downtown", 2, fixed_now)]
    assert classify_articles(articles, now=fixed_now) is None


def test_old_riot_only_is_low(fixed_now):
    articles = [_article("Riot breaks out near the stadium", 40, fixed_now)]
    verdict = classify_articles(articles, now=fixed_now)
    assert verdict.severity_level == "low"


def test_recent_protest_is_medium(fixed_now):
    articles = [_article("Large protest planned at main square", 3, fixed_now)]
    verdict = classify_articles(articles, now=fixed_now)
    assert verdict.severity_level == "medium"
    assert "civil unrest/riot" in verdict.main_concern


def test_two_recent_natural_disasters_are_high(fixed_now):
    articles = [
        _article("Flood warnings issued", 1, fixed_now),
        _article("Cyclone expected to make landfall", 2, fixed_now),
    ]
    verdict = classify_articles(articles, now=fixed_now)
    assert verdict.severity_level == "high"
    assert "natural disaster" in verdict.main_concern


def test_two_stale_hits_stay_low(fixed_now):
    articles = [
        _article("Protest in the old town", 30, fixed_now),
        _article("Clashes reported last month", 35, fixed_now),
    ]
    assert classify_articles(articles, now=fixed_now).severity_level == "low"


def test_undated_articles_count_as_stale(fixed_now):
    articles = [{"title": "Riot reported", "description": None, "publishedAt": None}]
    verdict = classify_articles(articles, now=fixed_now)
    assert verdict.severity_level == "low"
    assert verdict.headlines[0]["date"] == ""


def test_headlines_are_newest_first_and_capped(fixed_now):
    articles = [_article(f"Protest number {i}", i, fixed_now) for i in range(10, 0, -1)]
    verdict = classify_articles(articles, now=fixed_now)
    assert len(verdict.headlines) == MAX_HEADLINES
    assert verdict.headlines[0]["title"] == "Protest number 1"
    assert verdict.news_sources_checked == 10


def test_keywords_match_description_too(fixed_now):
    articles = [_article("City update", 1, fixed_now, description="Missile strike reported")]
    assert classify_articles(articles, now=fixed_now).severity_level == "high"


def test_decide_severity_two_recent_without_high_is_medium():
    hit = KeywordHit("storm", "low", "weather")
    matches = [ArticleHits({}, [hit], 1), ArticleHits({}, [hit], 2)]
    assert decide_severity(matches) == "medium"


def test_verdict_serializes_camel_case(fixed_now):
    verdict = classify_articles([_article("Bomb scare", 1, fixed_now)], "X", now=fixed_now)
    data = verdict.to_dict()
    assert data["hasConcerns"] is True
    assert data["severityLevel"] == "high"
    assert data["newsHeadlines"][0]["date"] == "Nov 11, 2024"
