import logging

from app.exceptions.custom import RateLimitError, YelpAIError
from app.mappers.business_extractor import extract_businesses
from app.mappers.schedule_normalizer import has_hours
from app.schemas.yelp import YelpBusiness, YelpContextualInfo
from app.services.yelp_ai import YelpAIService

logger = logging.getLogger(__name__)


def match_key(name: str | None, address: str | None) -> str:
    return f"{(name or '').strip().lower()}|{(address or '').strip().lower()}"


def build_hours_query(missing: list[YelpBusiness]) -> str:
    lines = "\n".join(
        f"{i}. {b.name or ''} — {b.formatted_address}"
        for i, b in enumerate(missing, start=1)
    )
    return (
        "For the following businesses, return ONLY weekly hours as contextual_info.business_hours "
        "(7 days, each day has business_hours with open_time and close_time). "
        f"Keep the same business name and address.\n\n{lines}"
    )


def _with_hours(business: YelpBusiness, hours: list) -> YelpBusiness:
    info = business.contextual_info or YelpContextualInfo()
    return business.model_copy(
        update={"contextual_info": info.model_copy(update={"business_hours": hours})}
    )


def merge_hours(
    businesses: list[YelpBusiness], enriched: list[YelpBusiness]
) -> list[YelpBusiness]:
    """Copy business_hours from ``enriched`` onto records that have none.

    Matching is case-insensitive exact name+address. Records that already
    have hours are never touched.
    """
    by_key: dict[str, YelpBusiness] = {}
    for e in enriched:
        by_key[match_key(e.name, e.formatted_address)] = e

    merged: list[YelpBusiness] = []
    for b in businesses:
        if has_hours(b.raw_business_hours):
            merged.append(b)
            continue
        hit = by_key.get(match_key(b.name, b.formatted_address))
        hours = hit.raw_business_hours if hit else None
        merged.append(_with_hours(b, hours) if has_hours(hours) else b)
    return merged


class HoursEnrichmentService:
    def __init__(self, yelp_ai: YelpAIService):
        self._yelp_ai = yelp_ai

    async def enrich(
        self,
        businesses: list[YelpBusiness],
        chat_id: str | None,
        latitude: float | None = None,
        longitude: float | None = None,
    ) -> list[YelpBusiness]:
        """Fill missing hours with one follow-up query in the same chat.

        Never raises: on any upstream failure the input is returned as-is.
        """
        missing = [b for b in businesses if not has_hours(b.raw_business_hours)]
        if not missing:
            return businesses
        if not chat_id:
            logger.info("Skipping hours enrichment for %d businesses: no chat_id", len(missing))
            return businesses

        logger.info("Enriching hours for %d businesses", len(missing))
        try:
            data = await self._yelp_ai.chat(
                build_hours_query(missing),
                chat_id=chat_id,
                latitude=latitude,
                longitude=longitude,
            )
        except (YelpAIError, RateLimitError) as exc:
            logger.warning("Hours enrichment failed: %s", exc)
            return businesses

        merged = merge_hours(businesses, extract_businesses(data))
        filled = sum(
            1 for before, after in zip(businesses, merged)
            if not has_hours(before.raw_business_hours) and has_hours(after.raw_business_hours)
        )
        logger.info("Hours enrichment filled %d of %d", filled, len(missing))
        return merged
