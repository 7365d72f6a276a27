"""Keyword safety classifier — deterministic verdict from recent news articles.

Runs before any model-based assessment. A non-null verdict is authoritative:
clear, recent, keyword-evident dangers must not be diluted by model hedging.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone

logger = logging.getLogger(__name__)

HIGH_IMPACT_KEYWORDS: tuple[str, ...] = (
    "invasion", "airstrike", "shelling", "bomb", "killed", "massacre", "siege",
    "evacuat", "curfew", "state of emergency", "attack", "occupied", "missile",
    "rocket", "heavy fighting", "battle", "casualties",
)
MEDIUM_IMPACT_KEYWORDS: tuple[str, ...] = (
    "riot", "protest", "unrest", "clashes", "looting", "arson", "explosion",
    "terrorist", "suspected attack",
)
NATURAL_DISASTER_KEYWORDS: tuple[str, ...] = (
    "earthquake", "flood", "cyclone", "hurricane", "tsunami", "landslide",
    "wildfire", "storm", "monsoon", "mudslide", "avalanche",
)

RECENT_DAYS = 14
UNDATED_AGE_DAYS = 3650
MAX_HEADLINES = 6

CONCERN_NATURAL = "natural disaster"
CONCERN_CONFLICT = "armed conflict/attack"
CONCERN_UNREST = "civil unrest/riot"

RECOMMENDATIONS: dict[str, tuple[str, ...]] = {
    "high": (
        "High risk detected — travel NOT recommended. Postpone non-essential travel.",
        "Check official government travel advisories and contact your embassy/consulate.",
        "If you must travel, register with your embassy and have evacuation plans.",
    ),
    "medium": (
        "Exercise caution — monitor local news and avoid known hotspots.",
        "Follow local authority guidance and consider travel insurance with evacuation coverage.",
    ),
    "low": (
        "Low-level concerns found — stay informed and avoid large gatherings.",
    ),
}


@dataclass(frozen=True)
class KeywordHit:
    keyword: str
    severity: str
    concern: str


@dataclass
class ArticleHits:
    article: dict
    hits: list[KeywordHit]
    days_ago: int

    @property
    def has_high(self) -> bool:
        return any(h.severity == "high" for h in self.hits)

    @property
    def has_medium(self) -> bool:
        return any(h.severity == "medium" for h in self.hits)


@dataclass
class SafetyVerdict:
    destination: str | None
    has_concerns: bool
    severity_level: str
    main_concern: str | None
    headlines: list[dict] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    last_updated: str = ""
    news_sources_checked: int = 0
    processing_time_ms: int = 0

    def to_dict(self) -> dict:
        return {
            "destination": self.destination,
            "hasConcerns": self.has_concerns,
            "severityLevel": self.severity_level,
            "mainConcern": self.main_concern,
            "newsHeadlines": self.headlines,
            "recommendations": self.recommendations,
            "lastUpdated": self.last_updated,
            "newsSourcesChecked": self.news_sources_checked,
            "processingTimeMs": self.processing_time_ms,
        }


def parse_published(value) -> datetime | None:
    """Parse an ISO-8601 publish timestamp; None when missing or malformed."""
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def age_in_days(published: datetime | None, now: datetime) -> int:
    if published is None:
        return UNDATED_AGE_DAYS
    return round((now - published).total_seconds() / 86400)


def format_headline_date(published: datetime | None) -> str:
    """Short display date, e.g. 'Nov 7, 2024'."""
    if published is None:
        return ""
    return f"{published.strftime('%b')} {published.day}, {published.year}"


def match_keywords(text: str) -> list[KeywordHit]:
    """Every keyword present in ``text``, once per keyword."""
    hits = [KeywordHit(kw, "high", CONCERN_CONFLICT) for kw in HIGH_IMPACT_KEYWORDS if kw in text]
    hits += [KeywordHit(kw, "medium", CONCERN_UNREST) for kw in MEDIUM_IMPACT_KEYWORDS if kw in text]
    # Natural disasters rank as high severity but get their own messaging.
    hits += [KeywordHit(kw, "high", CONCERN_NATURAL) for kw in NATURAL_DISASTER_KEYWORDS if kw in text]
    return hits


def decide_severity(matches: list[ArticleHits]) -> str:
    """Severity from recency-partitioned hits.

    Exactly two stale hits and nothing recent stays "low".
    """
    recent = [m for m in matches if m.days_ago <= RECENT_DAYS]
    recent_high = sum(1 for m in recent if m.has_high)
    recent_medium = sum(1 for m in recent if m.has_medium)

    if recent_high >= 1 and len(recent) >= 1:
        return "high"
    if recent_medium >= 1 or (len(recent) >= 2 and recent_high == 0):
        return "medium"
    return "low"


def compose_main_concern(matches: list[ArticleHits]) -> str:
    concerns: list[str] = []
    for m in matches:
        for hit in m.hits:
            if hit.concern not in concerns:
                concerns.append(hit.concern)
    return (
        f"Recent news indicates {' and '.join(concerns)} activity. "
        "See headlines for details."
    )


def classify_articles(
    articles: list[dict] | None,
    destination: str | None = None,
    now: datetime | None = None,
) -> SafetyVerdict | None:
    """Classify news articles into a safety verdict.

    Returns None when there are no articles or nothing matched, meaning the
    caller should defer to the model-based assessment.
    """
    if not articles:
        return None

    now = now or datetime.now(timezone.utc)
    matches: list[ArticleHits] = []

    for article in articles:
        if not isinstance(article, dict):
            continue
        title = (article.get("title") or "").lower()
        description = (article.get("description") or "").lower()
        hits = match_keywords(f"{title} {description}")
        if hits:
            published = parse_published(article.get("publishedAt"))
            matches.append(ArticleHits(article, hits, age_in_days(published, now)))

    if not matches:
        return None

    severity = decide_severity(matches)
    ordered = sorted(matches, key=lambda m: m.days_ago)

    headlines = [
        {
            "title": m.article.get("title") or "",
            "summary": m.article.get("description") or "",
            "date": format_headline_date(parse_published(m.article.get("publishedAt"))),
        }
        for m in ordered[:MAX_HEADLINES]
    ]

    logger.info(
        f"Keyword classifier: {len(matches)}/{len(articles)} articles matched, severity={severity}"
    )

    return SafetyVerdict(
        destination=destination,
        has_concerns=True,
        severity_level=severity,
        main_concern=compose_main_concern(ordered),
        headlines=headlines,
        recommendations=list(RECOMMENDATIONS[severity]),
        last_updated=now.isoformat(),
        news_sources_checked=len(articles),
    )
