import logging

from fastapi import APIRouter, HTTPException

from app.dependencies import ToolsDep, require, require_location
from app.mappers.allergy_safety import COMMON_ALLERGIES, normalize_allergies
from app.mappers.date_plan import VIBE_OPTIONS, normalize_vibe
from app.mappers.true_price import is_service_query
from app.schemas.date_plan import DatePlan
from app.schemas.requests import (
    DateStackRequest,
    QuickFindRequest,
    SafeEatsRequest,
    ToolRequest,
    TruePriceRequest,
    WaitWiseRequest,
)
from app.schemas.responses import (
    QuickFindResponse,
    SafeEatsResponse,
    SoloSafeResponse,
    TruePriceResponse,
    WaitWiseResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tools")


@router.post("/trueprice", response_model=TruePriceResponse)
async def true_price(service: ToolsDep, request: TruePriceRequest | None = None) -> TruePriceResponse:
    request = request or TruePriceRequest()
    latitude, longitude = require_location(request.latitude, request.longitude)
    query = require(request.query, "query")
    if is_service_query(query):
        logger.info("TruePrice rejected service query: %s", query)
        raise HTTPException(
            status_code=400,
            detail="TruePrice is for restaurants only! For services, try QuickFind instead.",
        )
    return await service.true_price(query, latitude, longitude, request.budget)


@router.post("/safeeats", response_model=SafeEatsResponse)
async def safe_eats(service: ToolsDep, request: SafeEatsRequest | None = None) -> SafeEatsResponse:
    request = request or SafeEatsRequest()
    latitude, longitude = require_location(request.latitude, request.longitude)
    query = require(request.query, "query")
    allergies, unsupported = normalize_allergies(request.allergies)
    if unsupported:
        choices = ", ".join(COMMON_ALLERGIES)
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported allergies: {', '.join(unsupported)}. Choose from: {choices}",
        )
    if not allergies:
        raise HTTPException(status_code=400, detail="allergies is required")
    return await service.safe_eats(query, latitude, longitude, allergies)


@router.post("/waitwise", response_model=WaitWiseResponse)
async def wait_wise(service: ToolsDep, request: WaitWiseRequest | None = None) -> WaitWiseResponse:
    request = request or WaitWiseRequest()
    latitude, longitude = require_location(request.latitude, request.longitude)
    query = require(request.query, "query")
    return await service.wait_wise(query, latitude, longitude, max(1, request.party_size))


@router.post("/solosafe", response_model=SoloSafeResponse)
async def solo_safe(service: ToolsDep, request: ToolRequest | None = None) -> SoloSafeResponse:
    request = request or ToolRequest()
    latitude, longitude = require_location(request.latitude, request.longitude)
    query = require(request.query, "query")
    return await service.solo_safe(query, latitude, longitude)


@router.post("/datestack", response_model=DatePlan)
async def date_stack(service: ToolsDep, request: DateStackRequest | None = None) -> DatePlan:
    request = request or DateStackRequest()
    latitude, longitude = require_location(request.latitude, request.longitude)
    vibe = normalize_vibe(request.vibe)
    if vibe is None:
        raise HTTPException(
            status_code=400,
            detail=f"vibe must be one of: {', '.join(VIBE_OPTIONS)}",
        )
    plan = await service.date_stack(
        latitude, longitude, request.budget, vibe, request.date
    )
    if plan is None:
        logger.info("DateStack found nothing within $%s (%s)", request.budget, request.vibe)
        raise HTTPException(
            status_code=404,
            detail="No options found within budget. Try increasing your budget!",
        )
    return plan


@router.post("/quickfind", response_model=QuickFindResponse)
async def quick_find(service: ToolsDep, request: QuickFindRequest | None = None) -> QuickFindResponse:
    request = request or QuickFindRequest()
    user_text = require(request.user_text, "userText")
    latitude, longitude = require_location(request.latitude, request.longitude)
    return await service.quick_find(
        user_text,
        latitude,
        longitude,
        chat_id=request.chat_id,
        session_id=request.session_id,
        prefs=request.prefs,
    )
