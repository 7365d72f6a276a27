"""Destination safety check — keyword classifier first, grounded LLM assessment second."""

import logging
import time
from datetime import datetime, timezone

from tripwise.errors import CredentialMissingError, RecoveryFailure
from tripwise.services.llm_client import SAFETY_PRESET, LLMClient, llm_client
from tripwise.services.news_client import NewsClient, news_client
from tripwise.services.prompts import SAFETY_SYSTEM, build_safety_prompt
from tripwise.services.safety_classifier import classify_articles
from tripwise.services.text_recovery import recover_json
from tripwise.services.validation import require_fields

logger = logging.getLogger(__name__)

SEVERITY_LEVELS = ("none", "low", "medium", "high")


def _clean_headlines(value) -> list[dict]:
    if not isinstance(value, list):
        return []
    return [
        {
            "title": str(h.get("title") or ""),
            "summary": str(h.get("summary") or ""),
            "date": str(h.get("date") or ""),
        }
        for h in value
        if isinstance(h, dict)
    ]


def normalize_verdict(raw: dict, destination: str, now: datetime) -> dict:
    """Coerce a model verdict into the SafetyVerdict shape."""
    severity = str(raw.get("severityLevel") or "").strip().lower()
    has_concerns = raw.get("hasConcerns") is True
    if severity not in SEVERITY_LEVELS:
        severity = "low" if has_concerns else "none"
    if severity == "none":
        has_concerns = False

    recommendations = raw.get("recommendations")
    if not isinstance(recommendations, list):
        recommendations = []

    return {
        "destination": raw.get("destination") or destination,
        "hasConcerns": has_concerns,
        "severityLevel": severity,
        "mainConcern": (raw.get("mainConcern") or None) if has_concerns else None,
        "newsHeadlines": _clean_headlines(raw.get("newsHeadlines")),
        "recommendations": [str(r) for r in recommendations if r],
        "lastUpdated": raw.get("lastUpdated") or now.isoformat(),
    }


class SafetyService:
    def __init__(self, llm: LLMClient | None = None, news: NewsClient | None = None):
        self.llm = llm or llm_client
        self.news = news or news_client

    async def check(self, payload: dict, now: datetime | None = None) -> dict:
        require_fields(payload, ("destination",), "Destination is required")
        destination = str(payload["destination"]).strip()

        if not self.llm.is_configured:
            raise CredentialMissingError("OpenAI")

        start = time.monotonic()
        now = now or datetime.now(timezone.utc)
        logger.info(f"Checking safety for {destination}")

        articles = await self.news.search_recent(destination, today=now.date())
        sources_checked = len(articles or [])

        verdict = classify_articles(articles, destination=destination, now=now)
        if verdict is not None and verdict.headlines:
            verdict.processing_time_ms = round((time.monotonic() - start) * 1000)
            logger.info(f"Classifier verdict for {destination}: {verdict.severity_level}")
            return {"success": True, "data": verdict.to_dict()}

        text = await self.llm.complete_with(
            SAFETY_PRESET, SAFETY_SYSTEM, build_safety_prompt(destination, articles, now)
        )
        result = recover_json(text, expect="object")
        if not result.ok:
            raise RecoveryFailure(result.error or "unparseable safety assessment")

        data = normalize_verdict(result.value, destination, now)
        data["newsSourcesChecked"] = sources_checked
        data["processingTimeMs"] = round((time.monotonic() - start) * 1000)
        logger.info(f"LLM verdict for {destination}: {data['severityLevel']}")
        return {"success": True, "data": data}


safety_service = SafetyService()
