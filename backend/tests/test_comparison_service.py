import json

import pytest

from tripwise.errors import CredentialMissingError, InputValidationError
from tripwise.services.comparison_service import ComparisonService
from tripwise.services.fallback_synthesizer import default_comparison

from conftest import FakeLLM, unavailable

PAYLOAD = {
    "destinations": ["Paris", "Atlantis"],
    "priorities": ["culture", "food"],
    "budget": 150000,
    "duration": 7,
    "month": "October",
}


async def test_requires_two_destinations_and_a_priority():
    service = ComparisonService(llm=FakeLLM())
    with pytest.raises(InputValidationError) as exc:
        await service.compare({"destinations": ["Paris"], "priorities": []})
    assert exc.value.missing == ["destinations", "priorities"]


async def test_requires_llm_credential():
    service = ComparisonService(llm=FakeLLM(configured=False))
    with pytest.raises(CredentialMissingError):
        await service.compare(PAYLOAD)


async def test_missing_destination_is_backfilled():
    live = [{"destination": "Paris", "matchScore": 88, "overview": "Art and cafes"}]
    llm = FakeLLM(responses=["```json\n" + json.dumps(live) + "\n```"])
    result = await ComparisonService(llm=llm).compare(PAYLOAD)

    assert result["success"] is True
    comparisons = result["comparisons"]
    assert len(comparisons) == 2
    assert comparisons[0]["matchScore"] == 88
    assert comparisons[1] == default_comparison("Atlantis")
    assert result["metadata"]["source"] == "partial"
    assert result["metadata"]["destinationCount"] == 2
    assert "- Atlantis" in llm.calls[0]["user"]


async def test_complete_response_is_live():
    live = [{"destination": "paris"}, {"destination": "ATLANTIS", "matchScore": 12}]
    llm = FakeLLM(responses=[json.dumps(live)])
    result = await ComparisonService(llm=llm).compare(PAYLOAD)
    assert result["metadata"]["source"] == "live"
    assert len(result["comparisons"]) == 2


async def test_trailing_prose_after_array_is_dropped():
    text = '[{"destination": "Paris", "matchScore": 70}]\nLet me know if you need more details.'
    result = await ComparisonService(llm=FakeLLM(responses=[text])).compare(PAYLOAD)
    names = [c["destination"] for c in result["comparisons"]]
    assert names == ["Paris", "Atlantis"]
    assert result["comparisons"][0]["matchScore"] == 70


@pytest.mark.parametrize("llm", [FakeLLM(error=unavailable("LLM")), FakeLLM(responses=["no json"])])
async def test_failures_return_default_records(llm):
    result = await ComparisonService(llm=llm).compare(PAYLOAD)
    assert result["metadata"]["source"] == "offline"
    assert result["comparisons"] == [default_comparison("Paris"), default_comparison("Atlantis")]
