from app.mappers.scoring_utils import clamp_score, label_for, text_of, unique_reasons
from app.schemas.providers import Provider
from app.schemas.scoring import SoloSafetyResult

BASE_SCORE = 70

_BAR_SEATING_WORDS = ("bar seating", "counter", "chef's counter", "sushi bar")
_FRIENDLY_WORDS = ("friendly", "casual", "welcoming", "laid-back", "solo")
_NIGHTLIFE_CATEGORIES = ("nightlife", "club", "lounge", "dance", "hookah")
_DIM_WORDS = ("dim", "dimly", "dark", "candlelit", "speakeasy")

_THRESHOLDS = ((80, "high"), (60, "medium"))


def analyze_solo_safety(provider: Provider) -> SoloSafetyResult:
    """Comfort/safety heuristic for dining alone."""
    summary = text_of(provider.short_summary)
    categories = text_of(*provider.categories)
    reviews = max(0, provider.review_count)

    score = BASE_SCORE
    reasons: list[str] = []

    # "Bars", "Sushi Bars", "Wine Bars"... but not "Barbeque"
    bar_seating = any(w in summary for w in _BAR_SEATING_WORDS) or any(
        c.lower().endswith("bars") for c in provider.categories
    )
    if bar_seating:
        score += 10
        reasons.append("Bar or counter seating")

    well_trafficked = reviews >= 200
    if well_trafficked:
        score += 5
        reasons.append("Busy, well-trafficked spot")

    if any(w in summary for w in _FRIENDLY_WORDS):
        score += 5
        reasons.append("Friendly, casual atmosphere")

    if any(c in categories for c in _NIGHTLIFE_CATEGORIES):
        score -= 10
        reasons.append("Nightlife venue - can get rowdy late")

    well_lit = not any(w in summary for w in _DIM_WORDS)
    if not well_lit:
        score -= 10
        reasons.append("Dim lighting mentioned")

    if reviews < 20:
        score -= 10
        reasons.append("Few reviews to go on")

    score = clamp_score(score)
    return SoloSafetyResult(
        score=score,
        label=label_for(score, _THRESHOLDS, "low"),
        reasons=unique_reasons(reasons),
        bar_seating=bar_seating,
        well_lit=well_lit,
        well_trafficked=well_trafficked,
        solo_friendly=score >= 80,
    )
