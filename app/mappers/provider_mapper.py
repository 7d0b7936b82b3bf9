from app.mappers.schedule_normalizer import normalize_contextual_hours
from app.schemas.providers import Provider
from app.schemas.yelp import YelpBusiness

_PRICE_RANGE_KEY = "RestaurantsPriceRange2"


def _price_tier(business: YelpBusiness) -> str | None:
    """Price tier as "$".."$$$$", preferring the numeric attribute."""
    if business.attributes:
        level = business.attributes.get(_PRICE_RANGE_KEY)
        if isinstance(level, int) and not isinstance(level, bool) and 1 <= level <= 4:
            return "$" * level
    if business.price and business.price.strip():
        return business.price.strip()
    return None


def to_provider(business: YelpBusiness) -> Provider:
    """Map a raw Yelp business into the stable Provider shape."""
    info = business.contextual_info
    photo = None
    if info and info.photos:
        photo = info.photos[0].original_url

    return Provider(
        id=business.id or "",
        name=business.name or "",
        url=business.url or "",
        rating=business.rating or 0.0,
        review_count=business.review_count or 0,
        phone=business.phone or "",
        address=business.formatted_address,
        categories=[c.title for c in business.categories if c.title],
        photo=photo,
        short_summary=business.summaries.short if business.summaries else None,
        accepts_reservations=bool(info and info.accepts_reservations_through_yelp),
        price=_price_tier(business),
        business_hours=normalize_contextual_hours(business.raw_business_hours),
    )


def to_providers(businesses: list[YelpBusiness]) -> list[Provider]:
    return [to_provider(b) for b in businesses]
