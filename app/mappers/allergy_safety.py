"""Allergy-safety heuristic for SafeEats.

Scores start at 70 and move with textual "X-free" mentions, bare allergen
mentions and cuisine-level cross-contamination risks.
"""

from app.mappers.scoring_utils import clamp_score, label_for, text_of, unique_reasons
from app.schemas.providers import Provider
from app.schemas.scoring import AllergySafetyResult

BASE_SCORE = 70

COMMON_ALLERGIES = (
    "Peanuts",
    "Tree Nuts",
    "Dairy",
    "Eggs",
    "Soy",
    "Wheat/Gluten",
    "Shellfish",
    "Fish",
)

_THRESHOLDS = ((80, "safe"), (60, "caution"))


def normalize_allergies(allergies: list[str]) -> tuple[list[str], list[str]]:
    """Split requested labels into (canonical known allergies, unsupported labels)."""
    by_lower = {a.lower(): a for a in COMMON_ALLERGIES}
    known: list[str] = []
    unknown: list[str] = []
    for label in allergies:
        label = label.strip()
        if not label:
            continue
        canonical = by_lower.get(label.lower())
        if canonical is None:
            unknown.append(label)
        elif canonical not in known:
            known.append(canonical)
    return known, unknown


def _allergen_terms(allergy: str) -> list[str]:
    """Split combined labels such as Wheat/Gluten into lowercase terms."""
    return [t.strip().lower() for t in allergy.split("/") if t.strip()]


def analyze_allergy_safety(
    provider: Provider, allergies: list[str]
) -> AllergySafetyResult:
    summary = text_of(provider.short_summary)
    categories = text_of(*provider.categories)
    selected = set(allergies)

    score = BASE_SCORE
    positives: list[str] = []
    warnings: list[str] = []

    for allergy in allergies:
        terms = _allergen_terms(allergy)
        if any(f"{t}-free" in summary or f"no {t}" in summary for t in terms):
            score += 10
            positives.append(f"{allergy}-free mentioned")
        if any(t in summary or t in categories for t in terms):
            if "free" not in summary:
                warnings.append(f"{allergy} present in menu")
                score -= 5

    if "Shellfish" in selected and "seafood" in categories:
        warnings.append("Seafood restaurant - high cross-contamination risk")
        score -= 15
    if "Wheat/Gluten" in selected and "pizza" in categories:
        warnings.append("Pizza place - gluten everywhere")
        score -= 10
    if "Peanuts" in selected and ("thai" in categories or "asian" in categories):
        warnings.append("Asian cuisine often uses peanuts")
        score -= 10

    if "vegan" in categories and ("Dairy" in selected or "Eggs" in selected):
        score += 20
        positives.append("Vegan menu available")
    if "gluten-free" in categories and "Wheat/Gluten" in selected:
        score += 20
        positives.append("Gluten-free options")

    if provider.rating >= 4.5:
        score += 5

    score = clamp_score(score)
    positives = list(dict.fromkeys(positives))
    warnings = list(dict.fromkeys(warnings))
    return AllergySafetyResult(
        score=score,
        label=label_for(score, _THRESHOLDS, "risky"),
        reasons=unique_reasons(positives + warnings),
        positives=positives,
        warnings=warnings,
    )


def allergy_question(allergies: list[str]) -> str:
    """Script the diner can read to staff before ordering."""
    return (
        f"Hi, I have severe {', '.join(allergies)} allergies. "
        "Can you accommodate this safely? "
        "Do you have dedicated prep areas to avoid cross-contamination?"
    )
