from __future__ import annotations

from pydantic import BaseModel

from app.schemas.hours import WeeklySchedule
from app.schemas.providers import Provider
from app.schemas.scoring import (
    AllergySafetyResult,
    OpenStatus,
    ScoreResult,
    SoloSafetyResult,
    TruePrice,
    WaitEstimate,
)


class SearchResponse(BaseModel):
    chat_id: str | None = None
    ai_text: str = ""
    providers: list[Provider] = []


class ContextualHours(BaseModel):
    business_hours: WeeklySchedule


class HoursMeta(BaseModel):
    has_hours: bool
    yelp_hours_present: bool


class HoursResponse(BaseModel):
    contextual_info: ContextualHours
    meta: HoursMeta


class UpstreamError(BaseModel):
    status: int | None = None
    raw: str | None = None


class QuestionNote(BaseModel):
    question: str
    why: str


class QuoteResponse(BaseModel):
    chat_id: str
    provider_name: str
    provider_url: str
    quote_message: str
    questions: list[str] = []
    question_notes: list[QuestionNote] = []
    next_steps: list[str] = []
    ai_text: str | None = None
    yelp_error: UpstreamError | None = None


class PricedProvider(Provider):
    true_price: TruePrice


class AllergyScoredProvider(Provider):
    safety: AllergySafetyResult
    staff_question: str


class WaitScoredProvider(Provider):
    wait: WaitEstimate
    open_status: OpenStatus
    best_time: str
    time_of_day: str


class SoloScoredProvider(Provider):
    safety: SoloSafetyResult


class QuickFindProvider(Provider):
    confidence: ScoreResult
    pitfalls: list[str] = []
    action_label: str
    alternatives_query: str


class TruePriceResponse(BaseModel):
    chat_id: str | None = None
    budget: float
    providers: list[PricedProvider] = []


class SafeEatsResponse(BaseModel):
    chat_id: str | None = None
    allergies: list[str]
    providers: list[AllergyScoredProvider] = []


class WaitWiseResponse(BaseModel):
    chat_id: str | None = None
    party_size: int
    providers: list[WaitScoredProvider] = []


class SoloSafeResponse(BaseModel):
    chat_id: str | None = None
    providers: list[SoloScoredProvider] = []


class QuickFindResponse(BaseModel):
    chat_id: str | None = None
    ai_text: str = ""
    query: str
    detected_service: str | None = None
    providers: list[QuickFindProvider] = []
