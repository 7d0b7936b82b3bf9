import logging
from typing import Any

from app.schemas.yelp import YelpAIResponse, YelpBusiness

logger = logging.getLogger(__name__)


def _entity_businesses(payload: dict) -> list:
    out: list = []
    entities = payload.get("entities")
    if not isinstance(entities, list):
        return out
    for entity in entities:
        if isinstance(entity, dict) and isinstance(entity.get("businesses"), list):
            out.extend(entity["businesses"])
    return out


def _top_level_businesses(payload: dict) -> list:
    businesses = payload.get("businesses")
    return businesses if isinstance(businesses, list) else []


def _data_businesses(payload: dict) -> list:
    data = payload.get("data")
    if not isinstance(data, dict):
        return []
    businesses = data.get("businesses")
    return businesses if isinstance(businesses, list) else []


# Probed in priority order; results are combined, not alternatives.
_EXTRACTION_PATHS = (_entity_businesses, _top_level_businesses, _data_businesses)


def extract_businesses(payload: Any) -> list[YelpBusiness]:
    """Collect businesses from every known response shape, deduplicated by id.

    First occurrence wins; records without an id are discarded. Bad optional
    fields are dropped on the record itself, the business is kept.
    """
    if not isinstance(payload, dict):
        return []

    candidates: list = []
    for path in _EXTRACTION_PATHS:
        candidates.extend(path(payload))

    seen: set[str] = set()
    businesses: list[YelpBusiness] = []
    for raw in candidates:
        if not isinstance(raw, dict):
            continue
        business_id = raw.get("id")
        if not isinstance(business_id, str) or not business_id or business_id in seen:
            continue
        seen.add(business_id)
        businesses.append(YelpBusiness.model_validate(raw))

    logger.debug("Extracted %d businesses from %d candidates", len(businesses), len(candidates))
    return businesses


def extract_reply(payload: Any) -> YelpAIResponse:
    """chat_id and assistant text; each falls back to empty on its own."""
    if not isinstance(payload, dict):
        logger.warning("Unexpected chat response shape; ignoring chat_id/text")
        return YelpAIResponse()
    return YelpAIResponse.model_validate(payload)
