"""Wait-time prediction for WaitWise.

Popularity (review_count x rating) is scaled by time-of-day, weekend and
party-size multipliers and bucketed into fixed minute ranges. Deterministic
for a given (reviews, rating, now, party size).
"""

from datetime import datetime

from app.schemas.scoring import WaitEstimate

PEAK_MULTIPLIER = 1.8
SHOULDER_MULTIPLIER = 1.3
OFF_PEAK_MULTIPLIER = 0.5
WEEKEND_MULTIPLIER = 1.3

# (popularity lower bound, min minutes, max minutes, busy)
_WAIT_BANDS = (
    (2000, 60, 120, True),
    (1000, 30, 60, True),
    (500, 15, 30, False),
)
_QUIET_BAND = (5, 15, False)


def time_multiplier(hour: int) -> float:
    if 12 <= hour <= 14 or 18 <= hour <= 20:
        return PEAK_MULTIPLIER
    if hour == 11 or hour == 17:
        return SHOULDER_MULTIPLIER
    if hour >= 21 or hour <= 10:
        return OFF_PEAK_MULTIPLIER
    return 1.0


def party_size_multiplier(party_size: int) -> float:
    if party_size >= 6:
        return 1.5
    if party_size >= 4:
        return 1.2
    return 1.0


def predict_wait(
    review_count: int,
    rating: float,
    now: datetime,
    party_size: int = 2,
) -> WaitEstimate:
    popularity = max(0, review_count) * max(0.0, rating)

    multiplier = time_multiplier(now.hour)
    if now.weekday() >= 5:
        multiplier *= WEEKEND_MULTIPLIER
    adjusted = popularity * multiplier * party_size_multiplier(party_size)

    for bound, low, high, busy in _WAIT_BANDS:
        if adjusted > bound:
            return WaitEstimate(min_minutes=low, max_minutes=high, busy=busy, popularity=adjusted)
    low, high, busy = _QUIET_BAND
    return WaitEstimate(min_minutes=low, max_minutes=high, busy=busy, popularity=adjusted)


def best_time_tip(now: datetime) -> str:
    hour = now.hour
    if 18 <= hour <= 20:
        return "Come at 5:30 PM or after 8:30 PM to avoid the rush"
    if 12 <= hour <= 14:
        return "Come at 11:30 AM or after 2:00 PM for shorter wait"
    if hour == 17:
        return "Peak time starting soon! Arrive now or wait until 8:30 PM"
    return "Good time to visit now - minimal wait expected!"


def time_of_day(now: datetime) -> str:
    if now.hour < 12:
        return "morning"
    if now.hour < 17:
        return "afternoon"
    if now.hour < 21:
        return "evening"
    return "late night"
