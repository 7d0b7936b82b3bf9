from datetime import date, datetime, timedelta

from app.mappers.schedule_normalizer import (
    has_fusion_hours,
    normalize_contextual_hours,
    normalize_fusion_hours,
)
from app.schemas.hours import DAY_NAMES

TODAY = date(2025, 12, 17)


def _fusion(*slots):
    return {"hours": [{"open": list(slots), "hours_type": "REGULAR"}]}


def _slot(day, start, end, overnight=False):
    return {"day": day, "start": start, "end": end, "is_overnight": overnight}


# --- normalize_fusion_hours ---


def test_always_seven_days_in_order():
    schedule = normalize_fusion_hours(_fusion(_slot(2, "0900", "1700")), today=TODAY)
    assert [d.day_of_week for d in schedule.days] == list(DAY_NAMES)


def test_missing_structure_gives_empty_week():
    for payload in (None, {}, {"hours": []}, {"hours": [{}]}, {"hours": "nope"}, []):
        schedule = normalize_fusion_hours(payload, today=TODAY)
        assert len(schedule.days) == 7
        assert all(d.business_hours == [] for d in schedule.days)


def test_slot_anchored_to_today():
    schedule = normalize_fusion_hours(_fusion(_slot(0, "0900", "1730")), today=TODAY)
    slot = schedule.day("Monday").business_hours[0]
    assert slot.open_time == datetime(2025, 12, 17, 9, 0)
    assert slot.close_time == datetime(2025, 12, 17, 17, 30)


def test_overnight_close_moves_to_next_day():
    schedule = normalize_fusion_hours(_fusion(_slot(4, "1800", "0200", overnight=True)), today=TODAY)
    slot = schedule.day("Friday").business_hours[0]
    assert slot.close_time.date() == slot.open_time.date() + timedelta(days=1)
    assert slot.open_time < slot.close_time


def test_close_before_open_without_flag_still_ordered():
    schedule = normalize_fusion_hours(_fusion(_slot(5, "2200", "0100")), today=TODAY)
    slot = schedule.day("Saturday").business_hours[0]
    assert slot.open_time < slot.close_time


def test_multiple_slots_keep_source_order():
    schedule = normalize_fusion_hours(
        _fusion(_slot(1, "1700", "2200"), _slot(1, "1100", "1400")), today=TODAY
    )
    tuesday = schedule.day("Tuesday").business_hours
    assert [s.open_time.hour for s in tuesday] == [17, 11]


def test_incomplete_slots_are_dropped():
    schedule = normalize_fusion_hours(
        _fusion(
            {"start": "0900", "end": "1700"},
            {"day": 1, "end": "1700"},
            {"day": 2, "start": "0900"},
            {"day": "3", "start": "0900", "end": "1700"},
            {"day": 9, "start": "0900", "end": "1700"},
            {"day": 4, "start": "9am", "end": "1700"},
            _slot(6, "1000", "1500"),
        ),
        today=TODAY,
    )
    with_slots = [d.day_of_week for d in schedule.days if d.business_hours]
    assert with_slots == ["Sunday"]


def test_special_hours_flag_always_false():
    schedule = normalize_fusion_hours(_fusion(_slot(0, "0900", "1700")), today=TODAY)
    assert not any(d.special_hours_applied for d in schedule.days)


def test_has_fusion_hours():
    assert has_fusion_hours(_fusion()) is True
    assert has_fusion_hours({"hours": []}) is False
    assert has_fusion_hours({}) is False


def test_serialized_slot_format():
    schedule = normalize_fusion_hours(_fusion(_slot(0, "0900", "1700")), today=TODAY)
    dumped = schedule.model_dump(mode="json")
    assert dumped[0]["business_hours"][0] == {
        "open_time": "2025-12-17 09:00:00",
        "close_time": "2025-12-17 17:00:00",
    }


# --- normalize_contextual_hours ---


def test_contextual_absent_is_none():
    assert normalize_contextual_hours(None) is None
    assert normalize_contextual_hours([]) is None
    assert normalize_contextual_hours({"day_of_week": "Monday"}) is None
    assert normalize_contextual_hours([{"day_of_week": "Someday"}]) is None


def test_contextual_fills_missing_days():
    schedule = normalize_contextual_hours([
        {
            "day_of_week": "Wednesday",
            "business_hours": [
                {"open_time": "2025-12-17 11:00:00", "close_time": "2025-12-17 22:00:00"}
            ],
            "special_hours_applied": False,
        }
    ])
    assert schedule is not None
    assert len(schedule.days) == 7
    assert len(schedule.day("Wednesday").business_hours) == 1
    assert schedule.day("Monday").business_hours == []


def test_contextual_overnight_close_advanced():
    schedule = normalize_contextual_hours([
        {
            "day_of_week": "Friday",
            "business_hours": [
                {"open_time": "2025-12-19 20:00:00", "close_time": "2025-12-19 02:00:00"}
            ],
        }
    ])
    slot = schedule.day("Friday").business_hours[0]
    assert slot.close_time == datetime(2025, 12, 20, 2, 0)


def test_contextual_drops_unparseable_slots_and_merges_repeated_days():
    schedule = normalize_contextual_hours([
        {"day_of_week": "Monday", "business_hours": [{"open_time": "soon", "close_time": "later"}]},
        {"day_of_week": "Monday", "business_hours": [
            {"open_time": "2025-12-15 09:00:00", "close_time": "2025-12-15 12:00:00"}
        ]},
        {"day_of_week": "Monday", "business_hours": [
            {"open_time": "2025-12-15 13:00:00", "close_time": "2025-12-15 18:00:00"}
        ]},
    ])
    monday = schedule.day("Monday").business_hours
    assert [s.open_time.hour for s in monday] == [9, 13]


def test_contextual_day_with_no_slots_is_kept_empty():
    schedule = normalize_contextual_hours([{"day_of_week": "Sunday", "business_hours": []}])
    assert schedule is not None
    assert schedule.day("Sunday").business_hours == []
