import logging
import random
from collections.abc import Callable
from datetime import datetime

from pydantic import ValidationError

from app.mappers.allergy_safety import allergy_question, analyze_allergy_safety
from app.mappers.confidence import compute_confidence
from app.mappers.date_plan import activity_query, build_date_plan, dinner_query
from app.mappers.open_status import evaluate_open_status, open_status_rank
from app.mappers.quickfind import (
    action_label,
    alternatives_query,
    detect_service,
    pitfalls_for,
    rewrite_query,
)
from app.mappers.solo_safety import analyze_solo_safety
from app.mappers.true_price import estimate_true_price, within_budget
from app.mappers.wait_time import best_time_tip, predict_wait, time_of_day
from app.schemas.date_plan import DatePlan
from app.schemas.responses import (
    AllergyScoredProvider,
    PricedProvider,
    QuickFindProvider,
    QuickFindResponse,
    SafeEatsResponse,
    SoloSafeResponse,
    SoloScoredProvider,
    TruePriceResponse,
    WaitScoredProvider,
    WaitWiseResponse,
)
from app.schemas.scoring import ScoringPrefs
from app.services.search import SearchService
from app.store import PREFS_KEY, SessionStore

logger = logging.getLogger(__name__)


def wait_sort_key(item: WaitScoredProvider) -> tuple[int, int]:
    return open_status_rank(item.open_status), item.wait.min_minutes


class ToolsService:
    """Search + scoring pipelines for each tool page."""

    def __init__(
        self,
        search: SearchService,
        store: SessionStore,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._search = search
        self._store = store
        self._rng = rng or random.Random()
        self._clock = clock

    async def true_price(
        self, query: str, latitude: float, longitude: float, budget: float
    ) -> TruePriceResponse:
        result = await self._search.search(query, latitude, longitude)
        priced = [
            PricedProvider(**p.model_dump(), true_price=estimate_true_price(p, self._rng))
            for p in result.providers
        ]
        affordable = [p for p in priced if within_budget(p.true_price, budget)]
        logger.info("TruePrice: %d of %d within $%s", len(affordable), len(priced), budget)
        return TruePriceResponse(chat_id=result.chat_id, budget=budget, providers=affordable)

    async def safe_eats(
        self, query: str, latitude: float, longitude: float, allergies: list[str]
    ) -> SafeEatsResponse:
        result = await self._search.search(query, latitude, longitude)
        question = allergy_question(allergies)
        scored = [
            AllergyScoredProvider(
                **p.model_dump(),
                safety=analyze_allergy_safety(p, allergies),
                staff_question=question,
            )
            for p in result.providers
        ]
        scored.sort(key=lambda p: p.safety.score, reverse=True)
        return SafeEatsResponse(chat_id=result.chat_id, allergies=allergies, providers=scored)

    async def wait_wise(
        self, query: str, latitude: float, longitude: float, party_size: int
    ) -> WaitWiseResponse:
        result = await self._search.search(query, latitude, longitude)
        now = self._clock()
        scored = [
            WaitScoredProvider(
                **p.model_dump(),
                wait=predict_wait(p.review_count, p.rating, now, party_size),
                open_status=evaluate_open_status(p.business_hours, now),
                best_time=best_time_tip(now),
                time_of_day=time_of_day(now),
            )
            for p in result.providers
        ]
        scored.sort(key=wait_sort_key)
        return WaitWiseResponse(chat_id=result.chat_id, party_size=party_size, providers=scored)

    async def solo_safe(self, query: str, latitude: float, longitude: float) -> SoloSafeResponse:
        result = await self._search.search(query, latitude, longitude)
        scored = [
            SoloScoredProvider(**p.model_dump(), safety=analyze_solo_safety(p))
            for p in result.providers
        ]
        scored.sort(key=lambda p: p.safety.score, reverse=True)
        return SoloSafeResponse(chat_id=result.chat_id, providers=scored)

    async def date_stack(
        self,
        latitude: float,
        longitude: float,
        budget: float,
        vibe: str,
        plan_date: str | None = None,
    ) -> DatePlan | None:
        # Sequential on purpose: one outbound call at a time per request.
        dinners = await self._search.search(dinner_query(vibe), latitude, longitude)
        activities = await self._search.search(activity_query(vibe), latitude, longitude)
        return build_date_plan(
            dinners.providers, activities.providers, budget, vibe, plan_date
        )

    def _prefs_for(self, session_id: str | None, explicit: ScoringPrefs | None) -> ScoringPrefs:
        if explicit is not None:
            if session_id:
                self._store.set(session_id, PREFS_KEY, explicit.model_dump())
            return explicit
        if session_id:
            stored = self._store.get(session_id, PREFS_KEY)
            if isinstance(stored, dict):
                try:
                    return ScoringPrefs.model_validate(stored)
                except ValidationError:
                    logger.warning("Ignoring unreadable stored prefs for session %s", session_id)
        return ScoringPrefs()

    async def quick_find(
        self,
        user_text: str,
        latitude: float,
        longitude: float,
        chat_id: str | None = None,
        session_id: str | None = None,
        prefs: ScoringPrefs | None = None,
    ) -> QuickFindResponse:
        prefs = self._prefs_for(session_id, prefs)
        if session_id:
            self._store.record_search(session_id, user_text)

        query = rewrite_query(user_text)
        result = await self._search.search(query, latitude, longitude, chat_id=chat_id)
        providers = [
            QuickFindProvider(
                **p.model_dump(),
                confidence=compute_confidence(p, user_text, result.ai_text, prefs),
                pitfalls=pitfalls_for(p, user_text),
                action_label=action_label(p),
                alternatives_query=alternatives_query(p),
            )
            for p in result.providers
        ]
        return QuickFindResponse(
            chat_id=result.chat_id,
            ai_text=result.ai_text,
            query=query,
            detected_service=detect_service(user_text),
            providers=providers,
        )
