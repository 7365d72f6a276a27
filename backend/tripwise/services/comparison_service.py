"""Destination comparison — LLM ranking with default records for any gaps."""

import logging
from datetime import datetime, timezone

from tripwise.errors import CredentialMissingError, InputValidationError, ProviderUnavailable
from tripwise.services.fallback_synthesizer import backfill_comparisons, clean_comparisons
from tripwise.services.llm_client import COMPARISON_PRESET, LLMClient, llm_client
from tripwise.services.prompts import COMPARISON_SYSTEM, build_comparison_prompt
from tripwise.services.text_recovery import recover_json

logger = logging.getLogger(__name__)

NOT_SPECIFIED = "Not specified"


def _names(values) -> list[str]:
    if not isinstance(values, list):
        return []
    return [v.strip() for v in values if isinstance(v, str) and v.strip()]


class ComparisonService:
    def __init__(self, llm: LLMClient | None = None):
        self.llm = llm or llm_client

    async def compare(self, payload: dict) -> dict:
        destinations = _names(payload.get("destinations"))
        priorities = _names(payload.get("priorities"))

        missing = []
        if len(destinations) < 2:
            missing.append("destinations")
        if not priorities:
            missing.append("priorities")
        if missing:
            raise InputValidationError(
                "Please provide at least 2 destinations and 1 priority", missing=missing
            )

        if not self.llm.is_configured:
            raise CredentialMissingError("OpenAI")

        logger.info(f"Comparing {len(destinations)} destinations: {', '.join(destinations)}")
        live = await self._live_comparisons(
            destinations,
            priorities,
            payload.get("budget") or NOT_SPECIFIED,
            payload.get("duration") or NOT_SPECIFIED,
            payload.get("month") or NOT_SPECIFIED,
        )

        if live is None:
            comparisons = backfill_comparisons([], destinations)
            source = "offline"
        else:
            comparisons = backfill_comparisons(live, destinations)
            source = "live" if len(comparisons) == len(live) else "partial"

        return {
            "success": True,
            "comparisons": comparisons,
            "metadata": {
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "destinationCount": len(comparisons),
                "model": self.llm.model_name,
                "source": source,
            },
        }

    async def _live_comparisons(self, destinations, priorities, budget, duration, month):
        prompt = build_comparison_prompt(destinations, priorities, budget, duration, month)
        try:
            text = await self.llm.complete_with(COMPARISON_PRESET, COMPARISON_SYSTEM, prompt)
        except ProviderUnavailable as e:
            logger.warning(f"LLM unavailable, using default comparisons: {e}")
            return None

        result = recover_json(text, expect="array")
        if not result.ok:
            logger.warning(f"Could not recover comparisons ({result.error}), using defaults")
            return None

        cleaned = clean_comparisons(result.value)
        if not cleaned:
            logger.warning("No usable comparison entries in response, using defaults")
            return None
        return cleaned


comparison_service = ComparisonService()
