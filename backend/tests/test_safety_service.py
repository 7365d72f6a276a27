import json
from datetime import timedelta

import pytest

from tripwise.errors import CredentialMissingError, InputValidationError, ProviderUnavailable, RecoveryFailure
from tripwise.services.llm_client import SAFETY_PRESET
from tripwise.services.safety_service import SafetyService, normalize_verdict

from conftest import FakeLLM, FakeNews, unavailable


def _article(title, days_ago, now):
    return {
        "title": title,
        "description": "",
        "publishedAt": (now - timedelta(days=days_ago)).isoformat(),
    }


async def test_destination_is_required():
    with pytest.raises(InputValidationError):
        await SafetyService(llm=FakeLLM(), news=FakeNews()).check({"destination": ""})


async def test_credential_checked_before_news():
    news = FakeNews()
    with pytest.raises(CredentialMissingError):
        await SafetyService(llm=FakeLLM(configured=False), news=news).check({"destination": "Goa"})
    assert news.queries == []


async def test_classifier_verdict_skips_llm(fixed_now):
    llm = FakeLLM()
    news = FakeNews([_article("Airstrike reported near border town", 5, fixed_now)])
    result = await SafetyService(llm=llm, news=news).check({"destination": "Testville"}, now=fixed_now)

    data = result["data"]
    assert data["severityLevel"] == "high"
    assert data["hasConcerns"] is True
    assert data["newsSourcesChecked"] == 1
    assert llm.calls == []


async def test_no_news_asks_llm(fixed_now):
    verdict = {
        "destination": "Goa",
        "hasConcerns": False,
        "severityLevel": "none",
        "mainConcern": None,
        "newsHeadlines": [],
        "recommendations": [],
    }
    llm = FakeLLM(responses=[json.dumps(verdict)])
    result = await SafetyService(llm=llm, news=FakeNews(None)).check({"destination": "Goa"}, now=fixed_now)

    data = result["data"]
    assert data["severityLevel"] == "none"
    assert data["hasConcerns"] is False
    assert data["newsSourcesChecked"] == 0
    assert data["lastUpdated"] == fixed_now.isoformat()
    assert llm.calls[0]["preset"] == SAFETY_PRESET
    assert "No recent news articles found" in llm.calls[0]["user"]


async def test_unmatched_news_is_passed_to_llm(fixed_now):
    articles = [_article("Goa celebrates carnival", 2, fixed_now)]
    llm = FakeLLM(responses=['{"hasConcerns": false, "severityLevel": "none"}'])
    result = await SafetyService(llm=llm, news=FakeNews(articles)).check({"destination": "Goa"}, now=fixed_now)
    assert "Goa celebrates carnival" in llm.calls[0]["user"]
    assert result["data"]["newsSourcesChecked"] == 1


async def test_unparseable_llm_verdict_is_an_error(fixed_now):
    service = SafetyService(llm=FakeLLM(responses=["I think it is fine."]), news=FakeNews())
    with pytest.raises(RecoveryFailure):
        await service.check({"destination": "Goa"}, now=fixed_now)


async def test_llm_outage_is_surfaced(fixed_now):
    service = SafetyService(llm=FakeLLM(error=unavailable("LLM")), news=FakeNews())
    with pytest.raises(ProviderUnavailable):
        await service.check({"destination": "Goa"}, now=fixed_now)


def test_normalize_verdict_constrains_severity(fixed_now):
    data = normalize_verdict(
        {"hasConcerns": True, "severityLevel": "EXTREME", "mainConcern": "Floods", "recommendations": "x"},
        "Goa",
        fixed_now,
    )
    assert data["severityLevel"] == "low"
    assert data["hasConcerns"] is True
    assert data["recommendations"] == []
    assert data["destination"] == "Goa"


def test_normalize_verdict_none_clears_concern(fixed_now):
    data = normalize_verdict(
        {"hasConcerns": True, "severityLevel": "none", "mainConcern": "Something"}, "Goa", fixed_now
    )
    assert data["hasConcerns"] is False
    assert data["mainConcern"] is None
