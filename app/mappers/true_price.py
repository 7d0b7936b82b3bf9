import random

from app.mappers.scoring_utils import round_half_up, text_of
from app.schemas.providers import Provider
from app.schemas.scoring import TruePrice

DEFAULT_MENU_PRICE = 25
TAX_RATE = 0.08
TIP_RATE = 0.20
PARKING_FEE = 5

PRICE_TIERS = {"$": 15, "$$": 25, "$$$": 40, "$$$$": 60}

SERVICE_KEYWORDS = ("plumber", "electrician", "mover", "handyman", "repair", "hvac", "locksmith", "contractor")


def is_service_query(query: str) -> bool:
    q = query.lower()
    return any(k in q for k in SERVICE_KEYWORDS)


def _keyword_menu_price(provider: Provider) -> float:
    name = provider.name.lower()
    categories = text_of(*provider.categories)
    summary = text_of(provider.short_summary)

    if (
        "steakhouse" in name or "prime" in name
        or "steakhouse" in categories or "fine dining" in categories
        or "upscale" in summary or "elegant" in summary
    ):
        return 55
    if (
        "trattoria" in name or "bistro" in name
        or "wine bar" in categories or "seafood" in categories
        or "fresh" in summary or "artisan" in summary
    ):
        return 35
    if (
        "pizza" in name or "taco" in name
        or "fast food" in categories or "cafe" in categories or "pizza" in categories
    ):
        return 18
    if any(c in categories for c in ("italian", "american", "mexican", "asian")):
        return 28
    return DEFAULT_MENU_PRICE


def _rating_factor(rating: float) -> float:
    if rating >= 4.5:
        return 1.15
    if rating >= 4.0:
        return 1.05
    if rating < 3.5:
        return 0.85
    return 1.0


def estimate_menu_price(
    provider: Provider, rng: random.Random | None = None
) -> tuple[float, str]:
    """Per-person menu price and where it came from.

    An explicit price tier is used as-is. Otherwise the keyword tier is
    adjusted for rating and jittered by +/-15% so similar places don't all
    show the same number.
    """
    tier = PRICE_TIERS.get((provider.price or "").strip())
    if tier is not None:
        return tier, "price_tier"

    rng = rng or random.Random()
    estimate = _keyword_menu_price(provider) * _rating_factor(provider.rating)
    variance = 0.85 + rng.random() * 0.3
    return round_half_up(estimate * variance), "estimated"


def calculate_true_price(menu_price: float, source: str = "price_tier") -> TruePrice:
    tax = menu_price * TAX_RATE
    tip = menu_price * TIP_RATE
    return TruePrice(
        menu=round(menu_price, 2),
        tax=round(tax, 2),
        tip=round(tip, 2),
        parking=PARKING_FEE,
        total=round(menu_price + tax + tip + PARKING_FEE, 2),
        source=source,
    )


def estimate_true_price(provider: Provider, rng: random.Random | None = None) -> TruePrice:
    menu, source = estimate_menu_price(provider, rng)
    return calculate_true_price(menu, source)


def within_budget(price: TruePrice, budget: float) -> bool:
    return price.total <= budget
