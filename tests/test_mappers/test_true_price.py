import random

from app.mappers.true_price import (
    calculate_true_price,
    estimate_menu_price,
    estimate_true_price,
    is_service_query,
    within_budget,
)
from app.schemas.providers import Provider


def _provider(**kwargs) -> Provider:
    return Provider(id="p", **kwargs)


def test_explicit_tier_total_is_exact():
    price = estimate_true_price(_provider(price="$$", rating=4.9))
    assert price.menu == 25
    assert price.tax == 2.00
    assert price.tip == 5.00
    assert price.parking == 5
    assert price.total == 37.00
    assert price.source == "price_tier"


def test_each_tier():
    for tier, menu in (("$", 15), ("$$", 25), ("$$$", 40), ("$$$$", 60)):
        assert estimate_menu_price(_provider(price=tier)) == (menu, "price_tier")


class _FixedRandom:
    def __init__(self, value: float):
        self._value = value

    def random(self) -> float:
        return self._value


# 0.5 -> variance factor exactly 1.0
NO_JITTER = _FixedRandom(0.5)


def test_keyword_tiers():
    cases = [
        (_provider(name="Prime Cuts", rating=3.7), 55),
        (_provider(categories=["Seafood"], rating=3.7), 35),
        (_provider(name="Taco Town", rating=3.7), 18),
        (_provider(categories=["Mexican"], rating=3.7), 28),
        (_provider(categories=["Bakeries"], rating=3.7), 25),
    ]
    for provider, expected in cases:
        assert estimate_menu_price(provider, NO_JITTER) == (expected, "estimated")


def test_rating_adjustment():
    base = _provider(categories=["Italian"])
    assert estimate_menu_price(base.model_copy(update={"rating": 4.6}), NO_JITTER)[0] == 32  # 28 * 1.15
    assert estimate_menu_price(base.model_copy(update={"rating": 4.2}), NO_JITTER)[0] == 29  # 28 * 1.05
    assert estimate_menu_price(base.model_copy(update={"rating": 3.0}), NO_JITTER)[0] == 24  # 28 * 0.85


def test_variance_bounds():
    provider = _provider(categories=["Steakhouses"], rating=3.7)
    low = estimate_menu_price(provider, _FixedRandom(0.0))[0]
    high = estimate_menu_price(provider, _FixedRandom(0.999999))[0]
    assert low == 47   # 55 * 0.85 = 46.75
    assert high == 63  # 55 * ~1.15 = 63.25


def test_seeded_rng_is_reproducible():
    provider = _provider(categories=["American"], rating=4.1)
    assert estimate_true_price(provider, random.Random(7)) == estimate_true_price(provider, random.Random(7))


def test_calculate_true_price_rounds_to_cents():
    price = calculate_true_price(33)
    assert price.tax == 2.64
    assert price.tip == 6.6
    assert price.total == 47.24


def test_budget_filter():
    assert within_budget(calculate_true_price(25), 37)
    assert not within_budget(calculate_true_price(25), 36.99)


def test_service_queries():
    assert is_service_query("need a Plumber asap")
    assert not is_service_query("sushi for two")
