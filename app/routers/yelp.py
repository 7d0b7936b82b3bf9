import logging

from fastapi import APIRouter, HTTPException

from app.dependencies import FollowupDep, SearchDep, require, require_location
from app.schemas.requests import HoursRequest, QuoteRequest, SearchRequest
from app.schemas.responses import HoursResponse, QuoteResponse, SearchResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.post("/get-business-hours", response_model=HoursResponse)
async def get_business_hours(
    service: SearchDep,
    request: HoursRequest | None = None,
) -> HoursResponse:
    business_id = require(request.business_id if request else None, "businessId")
    logger.info("Hours lookup for %s", business_id)
    return await service.business_hours(business_id)


@router.post("/yelp-search", response_model=SearchResponse)
async def yelp_search(
    service: SearchDep,
    request: SearchRequest | None = None,
) -> SearchResponse:
    request = request or SearchRequest()
    user_text = require(request.user_text, "userText")
    latitude, longitude = require_location(request.latitude, request.longitude)
    logger.info("Search request (%d chars, chat_id=%s)", len(user_text), request.chat_id)
    return await service.search(user_text, latitude, longitude, chat_id=request.chat_id)


@router.post("/yelp-quote", response_model=QuoteResponse, response_model_exclude_none=True)
async def yelp_quote(
    service: FollowupDep,
    request: QuoteRequest | None = None,
) -> QuoteResponse:
    request = request or QuoteRequest()
    chat_id = require(request.chat_id, "chatId")
    if not (request.provider_name or "").strip() or not (request.provider_url or "").strip():
        raise HTTPException(status_code=400, detail="providerName and providerUrl are required")
    logger.info("Quote request for %s (chat_id=%s)", request.provider_name, chat_id)
    return await service.generate(
        chat_id,
        request.provider_name.strip(),
        request.provider_url.strip(),
        preferred_time=request.preferred_time,
        user_notes=request.user_notes,
    )
