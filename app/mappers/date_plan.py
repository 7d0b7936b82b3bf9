from datetime import date

from app.schemas.date_plan import DatePlan, PlanStop
from app.schemas.providers import Provider

VIBE_OPTIONS = ("Romantic", "Fun", "Chill", "Adventurous")

_ACTIVITY_QUERIES = {
    "Romantic": "wine bar or live music",
    "Fun": "arcade or bowling",
    "Chill": "coffee shop or bookstore",
}
_DEFAULT_ACTIVITY_QUERY = "escape room or mini golf"

DINNER_SHARE = 0.6
ACTIVITY_SHARE = 0.4


def normalize_vibe(vibe: str) -> str | None:
    """Canonical vibe label, matched case-insensitively; None when unsupported."""
    wanted = vibe.strip().lower()
    return next((v for v in VIBE_OPTIONS if v.lower() == wanted), None)


def dinner_query(vibe: str) -> str:
    return f"{vibe.lower()} restaurant for date night"


def activity_query(vibe: str) -> str:
    return _ACTIVITY_QUERIES.get(vibe, _DEFAULT_ACTIVITY_QUERY)


def dinner_cost(provider: Provider) -> int:
    return 35 if provider.rating >= 4 else 25


def activity_cost(provider: Provider) -> int:
    return 25 if provider.rating >= 4 else 15


def _stop(provider: Provider, time: str, duration: str, cost: int) -> PlanStop:
    return PlanStop(
        id=provider.id,
        name=provider.name,
        url=provider.url,
        rating=provider.rating,
        categories=provider.categories,
        address=provider.address,
        time=time,
        duration=duration,
        cost=cost,
    )


def build_date_plan(
    dinners: list[Provider],
    activities: list[Provider],
    budget: float,
    vibe: str,
    plan_date: str | None = None,
) -> DatePlan | None:
    """Pick the first dinner and activity that fit a 60/40 budget split.

    Returns None when either half has nothing within budget.
    """
    dinner = next((p for p in dinners if dinner_cost(p) <= budget * DINNER_SHARE), None)
    activity = next((p for p in activities if activity_cost(p) <= budget * ACTIVITY_SHARE), None)
    if dinner is None or activity is None:
        return None

    d_cost, a_cost = dinner_cost(dinner), activity_cost(activity)
    return DatePlan(
        dinner=_stop(dinner, "7:00 PM", "1.5 hours", d_cost),
        activity=_stop(activity, "9:00 PM", "2 hours", a_cost),
        total=d_cost + a_cost,
        vibe=vibe,
        date=plan_date or date.today().isoformat(),
    )
