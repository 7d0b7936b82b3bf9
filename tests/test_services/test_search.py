"""Tests for SearchService."""

import json
from datetime import date

import httpx
import pytest
import respx
from httpx import Response

from app.exceptions.custom import YelpAIError, YelpFusionError
from app.services.hours_enrichment import HoursEnrichmentService
from app.services.search import SearchService, build_search_query
from app.services.yelp_ai import CHAT_URL, YelpAIService
from app.services.yelp_fusion import DETAILS_URL, YelpFusionService

HOURS = [
    {
        "day_of_week": "Wednesday",
        "business_hours": [{"open_time": "2025-12-17 17:00:00", "close_time": "2025-12-17 22:00:00"}],
        "special_hours_applied": False,
    }
]


def _raw(id_, name, hours=None, **extra) -> dict:
    raw = {
        "id": id_,
        "name": name,
        "url": f"https://www.yelp.com/biz/{id_}",
        "rating": 4.5,
        "review_count": 300,
        "location": {"formatted_address": f"{id_} street"},
        "categories": [{"alias": "italian", "title": "Italian"}],
    }
    if hours is not None:
        raw["contextual_info"] = {"business_hours": hours}
    raw.update(extra)
    return raw


@pytest.fixture
def service():
    client = httpx.AsyncClient()
    yelp_ai = YelpAIService(client, "test-ai-key")
    return SearchService(
        yelp_ai,
        HoursEnrichmentService(yelp_ai),
        YelpFusionService(client, "test-fusion-key"),
    )


def test_build_search_query():
    query = build_search_query("pasta", 3)
    assert query.startswith("pasta\n\n")
    assert "Return exactly 3 restaurants" in query


@respx.mock
@pytest.mark.asyncio
async def test_search_enriches_missing_hours(service):
    first = {
        "chat_id": "c1",
        "response": {"text": "Here are some spots"},
        "entities": [{"businesses": [_raw("a", "Nopa", HOURS), _raw("b", "Zuni")]}],
    }
    second = {"chat_id": "c1", "businesses": [_raw("b", "Zuni", HOURS)]}
    route = respx.post(CHAT_URL).mock(
        side_effect=[Response(200, json=first), Response(200, json=second)]
    )

    result = await service.search("pasta", 37.7, -122.4)

    assert result.chat_id == "c1"
    assert result.ai_text == "Here are some spots"
    assert [p.id for p in result.providers] == ["a", "b"]
    assert result.providers[1].business_hours is not None
    assert result.providers[1].business_hours.day("Wednesday").business_hours
    assert route.call_count == 2
    assert json.loads(route.calls[1].request.content)["chat_id"] == "c1"


@respx.mock
@pytest.mark.asyncio
async def test_search_caps_results(service):
    payload = {
        "chat_id": "c1",
        "businesses": [_raw(str(i), f"Place {i}", HOURS) for i in range(5)],
    }
    route = respx.post(CHAT_URL).mock(return_value=Response(200, json=payload))

    result = await service.search("pasta", 37.7, -122.4)

    assert [p.id for p in result.providers] == ["0", "1", "2"]
    assert route.call_count == 1


@respx.mock
@pytest.mark.asyncio
async def test_search_keeps_results_when_enrichment_fails(service):
    first = {"chat_id": "c1", "businesses": [_raw("b", "Zuni")]}
    respx.post(CHAT_URL).mock(
        side_effect=[Response(200, json=first), Response(500, text="boom")]
    )

    result = await service.search("pasta", 37.7, -122.4)

    assert [p.id for p in result.providers] == ["b"]
    assert result.providers[0].business_hours is None


@respx.mock
@pytest.mark.asyncio
async def test_search_keeps_incoming_chat_id(service):
    respx.post(CHAT_URL).mock(return_value=Response(200, json={"response": {"text": "none"}}))

    result = await service.search("pasta", 37.7, -122.4, chat_id="existing")

    assert result.chat_id == "existing"
    assert result.providers == []


@respx.mock
@pytest.mark.asyncio
async def test_search_propagates_first_call_failure(service):
    respx.post(CHAT_URL).mock(return_value=Response(500, text="boom"))

    with pytest.raises(YelpAIError):
        await service.search("pasta", 37.7, -122.4)


@respx.mock
@pytest.mark.asyncio
async def test_business_hours(service):
    respx.get(f"{DETAILS_URL}/nopa").mock(
        return_value=Response(
            200,
            json={
                "id": "nopa",
                "hours": [{"open": [
                    {"day": 0, "start": "1700", "end": "2200", "is_overnight": False},
                    {"day": 4, "start": "1800", "end": "0200", "is_overnight": True},
                ]}],
            },
        )
    )

    result = await service.business_hours("nopa", today=date(2025, 12, 17))

    schedule = result.contextual_info.business_hours
    assert len(schedule.days) == 7
    assert result.meta.has_hours is True
    assert result.meta.yelp_hours_present is True
    friday = schedule.day("Friday").business_hours[0]
    assert friday.close_time.day == 18
    dumped = result.model_dump(mode="json")
    monday = dumped["contextual_info"]["business_hours"][0]
    assert monday["business_hours"][0]["open_time"] == "2025-12-17 17:00:00"


@respx.mock
@pytest.mark.asyncio
async def test_business_hours_without_hours(service):
    respx.get(f"{DETAILS_URL}/nopa").mock(return_value=Response(200, json={"id": "nopa"}))

    result = await service.business_hours("nopa")

    assert result.meta.has_hours is False
    assert result.meta.yelp_hours_present is False
    assert len(result.contextual_info.business_hours.days) == 7


@respx.mock
@pytest.mark.asyncio
async def test_business_hours_upstream_error(service):
    respx.get(f"{DETAILS_URL}/nopa").mock(return_value=Response(500, text="boom"))

    with pytest.raises(YelpFusionError):
        await service.business_hours("nopa")


@respx.mock
@pytest.mark.asyncio
async def test_search_keeps_chat_id_from_partial_reply(service):
    first = {"chat_id": "c1", "response": "plain text", "businesses": [_raw("b", "Zuni", categories=None)]}
    second = {"chat_id": "c1", "businesses": [_raw("b", "Zuni", HOURS)]}
    route = respx.post(CHAT_URL).mock(
        side_effect=[Response(200, json=first), Response(200, json=second)]
    )

    result = await service.search("pasta", 37.7, -122.4)

    assert result.chat_id == "c1"
    assert result.ai_text == ""
    assert route.call_count == 2
    assert result.providers[0].categories == []
    assert result.providers[0].business_hours is not None
