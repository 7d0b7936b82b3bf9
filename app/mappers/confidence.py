from app.mappers.scoring_utils import (
    clamp_score,
    label_for,
    round_half_up,
    text_of,
    unique_reasons,
)
from app.schemas.providers import Provider
from app.schemas.scoring import ScoreResult, ScoringPrefs

_DINING_KEYS = ("restaurant", "bar", "cafe", "bistro", "steak", "pizza", "sushi", "diner", "bakery", "dessert")
_HOME_SERVICE_KEYS = ("plumbing", "electric", "hvac", "appliance", "handyman", "roof", "clean", "locksmith", "pest", "moving")

_ROMANTIC_WORDS = ("romantic", "date", "candle", "intimate", "cozy", "wine", "fine")
_QUIET_WORDS = ("quiet", "calm", "low noise", "intimate", "cozy")
_URGENT_WORDS = ("same-day", "24/7", "emergency")

_THRESHOLDS = ((80, "HIGH"), (60, "MEDIUM"))


def is_dining_provider(provider: Provider) -> bool:
    cats = text_of(*provider.categories)
    return any(k in cats for k in _DINING_KEYS)


def is_home_service_provider(provider: Provider) -> bool:
    cats = text_of(*provider.categories)
    return any(k in cats for k in _HOME_SERVICE_KEYS)


def compute_confidence(
    provider: Provider,
    user_text: str,
    ai_text: str,
    prefs: ScoringPrefs,
) -> ScoreResult:
    """How well a provider fits the request, 0-100 with HIGH/MEDIUM/LOW."""
    score = 0
    reasons: list[str] = []

    rating = max(0.0, min(5.0, provider.rating))
    score += round_half_up(rating * 12)
    if rating >= 4.7:
        reasons.append("High average rating")

    reviews = max(0, provider.review_count)
    score += min(30, round_half_up(reviews / 20))
    if reviews >= 200:
        reasons.append("Strong review volume")

    if provider.accepts_reservations:
        score += 10
        reasons.append("Supports Yelp reservations")

    text = text_of(user_text, ai_text)
    summary = text_of(provider.short_summary)
    dining = is_dining_provider(provider)
    home = is_home_service_provider(provider)

    if prefs.vibe == "romantic" and dining:
        if any(w in text or w in summary for w in _ROMANTIC_WORDS):
            score += 12
            reasons.append("Matches romantic/date-night intent")

    if prefs.vibe == "quiet":
        if any(w in text or w in summary for w in _QUIET_WORDS):
            score += 8
            reasons.append("Likely a quieter option")

    if prefs.urgency == "same_day" and home:
        if any(w in summary for w in _URGENT_WORDS):
            score += 10
            reasons.append("Mentions same-day / emergency availability")

    if prefs.mode == "dining" and dining:
        score += 8
        reasons.append("Category aligns with dining")
    if prefs.mode == "home" and home:
        score += 8
        reasons.append("Category aligns with home service")

    if prefs.budget != "any":
        reasons.append("Budget preference noted (verify pricing)")

    score = clamp_score(score)
    return ScoreResult(
        score=score,
        label=label_for(score, _THRESHOLDS, "LOW"),
        reasons=unique_reasons(reasons),
    )
