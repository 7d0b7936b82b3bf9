import logging
from datetime import date

from app.mappers.business_extractor import extract_businesses, extract_reply
from app.mappers.provider_mapper import to_providers
from app.mappers.schedule_normalizer import has_fusion_hours, normalize_fusion_hours
from app.schemas.responses import ContextualHours, HoursMeta, HoursResponse, SearchResponse
from app.services.hours_enrichment import HoursEnrichmentService
from app.services.yelp_ai import YelpAIService
from app.services.yelp_fusion import YelpFusionService

logger = logging.getLogger(__name__)

DEFAULT_MAX_PROVIDERS = 3


def build_search_query(user_text: str, count: int = DEFAULT_MAX_PROVIDERS) -> str:
    return (
        f"{user_text}\n\n"
        f"Return exactly {count} restaurants near my location.\n"
        "For EACH restaurant, include weekly hours in contextual_info.business_hours "
        "(7 days, each day has business_hours slots with open_time and close_time).\n"
    )


class SearchService:
    def __init__(
        self,
        yelp_ai: YelpAIService,
        enrichment: HoursEnrichmentService,
        fusion: YelpFusionService,
        max_providers: int = DEFAULT_MAX_PROVIDERS,
    ):
        self._yelp_ai = yelp_ai
        self._enrichment = enrichment
        self._fusion = fusion
        self._max_providers = max_providers

    async def search(
        self,
        user_text: str,
        latitude: float | None = None,
        longitude: float | None = None,
        chat_id: str | None = None,
    ) -> SearchResponse:
        """First query, optional hours enrichment, projection, cap.

        Upstream errors from the first call propagate; enrichment never does.
        """
        data = await self._yelp_ai.chat(
            build_search_query(user_text, self._max_providers),
            chat_id=chat_id,
            latitude=latitude,
            longitude=longitude,
        )
        first = extract_reply(data)
        businesses = extract_businesses(data)
        logger.info("Search returned %d businesses", len(businesses))

        session_id = first.chat_id or chat_id
        businesses = await self._enrichment.enrich(
            businesses, session_id, latitude=latitude, longitude=longitude
        )

        providers = to_providers(businesses)[: self._max_providers]
        return SearchResponse(chat_id=session_id, ai_text=first.text, providers=providers)

    async def business_hours(self, business_id: str, today: date | None = None) -> HoursResponse:
        details = await self._fusion.get_business(business_id)
        schedule = normalize_fusion_hours(details, today=today)
        return HoursResponse(
            contextual_info=ContextualHours(business_hours=schedule),
            meta=HoursMeta(
                has_hours=schedule.has_any_slots(),
                yelp_hours_present=has_fusion_hours(details),
            ),
        )
