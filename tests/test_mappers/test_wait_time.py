from datetime import datetime

from app.mappers.wait_time import (
    best_time_tip,
    party_size_multiplier,
    predict_wait,
    time_multiplier,
    time_of_day,
)

# 2025-12-17 is a Wednesday, 2025-12-20 a Saturday
WEEKDAY_3PM = datetime(2025, 12, 17, 15, 0)
WEEKDAY_7PM = datetime(2025, 12, 17, 19, 0)
SATURDAY_7PM = datetime(2025, 12, 20, 19, 0)


def test_time_multiplier_bands():
    assert time_multiplier(12) == 1.8
    assert time_multiplier(14) == 1.8
    assert time_multiplier(19) == 1.8
    assert time_multiplier(11) == 1.3
    assert time_multiplier(17) == 1.3
    assert time_multiplier(9) == 0.5
    assert time_multiplier(22) == 0.5
    assert time_multiplier(15) == 1.0
    assert time_multiplier(16) == 1.0


def test_party_size_multiplier():
    assert party_size_multiplier(2) == 1.0
    assert party_size_multiplier(4) == 1.2
    assert party_size_multiplier(6) == 1.5
    assert party_size_multiplier(12) == 1.5


def test_quiet_band():
    wait = predict_wait(100, 4.0, WEEKDAY_3PM)
    assert (wait.min_minutes, wait.max_minutes, wait.busy) == (5, 15, False)


def test_bands_by_popularity():
    # popularity x 1.0 at 3pm on a weekday
    assert predict_wait(130, 4.0, WEEKDAY_3PM).min_minutes == 15   # 520
    assert predict_wait(260, 4.0, WEEKDAY_3PM).min_minutes == 30   # 1040
    busiest = predict_wait(600, 4.0, WEEKDAY_3PM)                 # 2400
    assert (busiest.min_minutes, busiest.max_minutes, busiest.busy) == (60, 120, True)


def test_peak_weekend_and_party_size_stack():
    # 100 * 4 = 400 -> x1.8 peak x1.3 weekend x1.5 party = 1404
    wait = predict_wait(100, 4.0, SATURDAY_7PM, party_size=6)
    assert (wait.min_minutes, wait.max_minutes, wait.busy) == (30, 60, True)
    assert predict_wait(100, 4.0, WEEKDAY_7PM, party_size=2).min_minutes == 15  # 720


def test_deterministic_for_same_inputs():
    a = predict_wait(250, 4.3, SATURDAY_7PM, party_size=4)
    b = predict_wait(250, 4.3, SATURDAY_7PM, party_size=4)
    assert (a.min_minutes, a.max_minutes, a.busy) == (b.min_minutes, b.max_minutes, b.busy)


def test_negative_inputs_do_not_go_below_quiet_band():
    wait = predict_wait(-500, -4.0, WEEKDAY_7PM)
    assert wait.popularity == 0
    assert wait.min_minutes == 5


def test_best_time_tip_and_time_of_day():
    assert "5:30 PM" in best_time_tip(WEEKDAY_7PM)
    assert "11:30 AM" in best_time_tip(datetime(2025, 12, 17, 13, 0))
    assert best_time_tip(WEEKDAY_3PM).startswith("Good time")
    assert time_of_day(datetime(2025, 12, 17, 8, 0)) == "morning"
    assert time_of_day(WEEKDAY_3PM) == "afternoon"
    assert time_of_day(WEEKDAY_7PM) == "evening"
    assert time_of_day(datetime(2025, 12, 17, 22, 0)) == "late night"
