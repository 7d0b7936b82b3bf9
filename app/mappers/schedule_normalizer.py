"""Turn provider hours payloads into a canonical 7-day WeeklySchedule.

Two source shapes exist:
  - Fusion detail: {"hours": [{"open": [{day, start, end, is_overnight}]}]}
    with day 0=Monday..6=Sunday and "HHMM" clock times.
  - Chat contextual_info: [{day_of_week, business_hours: [{open_time,
    close_time}], special_hours_applied}] with "YYYY-MM-DD HH:MM:SS" strings.

Nothing here raises on bad input. Malformed slots are dropped.
"""

import logging
from datetime import date, datetime, time, timedelta
from typing import Any

from app.schemas.hours import DAY_NAMES, DaySchedule, TimeSlot, WeeklySchedule

logger = logging.getLogger(__name__)


def day_index_to_name(index: int) -> str:
    return DAY_NAMES[index]


def _parse_hhmm(value: Any) -> time | None:
    if not isinstance(value, str) or len(value) != 4 or not value.isdigit():
        return None
    hour, minute = int(value[:2]), int(value[2:])
    if hour > 23 or minute > 59:
        return None
    return time(hour, minute)


def _parse_slot_datetime(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    # Only clock comparison is needed downstream.
    return parsed.replace(tzinfo=None)


def _make_slot(opens: datetime, closes: datetime, overnight: bool = False) -> TimeSlot:
    if overnight or closes <= opens:
        closes += timedelta(days=1)
    return TimeSlot(open_time=opens, close_time=closes)


def empty_schedule() -> WeeklySchedule:
    return WeeklySchedule([DaySchedule(day_of_week=name) for name in DAY_NAMES])


def _fusion_open_slots(payload: Any) -> list:
    if not isinstance(payload, dict):
        return []
    hours = payload.get("hours")
    if not isinstance(hours, list) or not hours or not isinstance(hours[0], dict):
        return []
    slots = hours[0].get("open")
    return slots if isinstance(slots, list) else []


def has_fusion_hours(payload: Any) -> bool:
    """True when the detail payload carries the expected open-slot list."""
    if not isinstance(payload, dict):
        return False
    hours = payload.get("hours")
    return (
        isinstance(hours, list)
        and bool(hours)
        and isinstance(hours[0], dict)
        and isinstance(hours[0].get("open"), list)
    )


def normalize_fusion_hours(payload: Any, today: date | None = None) -> WeeklySchedule:
    """Build a WeeklySchedule from a Fusion business-detail payload.

    Every slot is anchored to ``today``; overnight slots close on the
    following calendar day. Only source order is kept within a day.
    """
    anchor = today or date.today()

    by_day: dict[int, list[TimeSlot]] = {}
    for raw in _fusion_open_slots(payload):
        if not isinstance(raw, dict):
            continue
        day = raw.get("day")
        if not isinstance(day, int) or isinstance(day, bool) or not 0 <= day <= 6:
            continue
        start = _parse_hhmm(raw.get("start"))
        end = _parse_hhmm(raw.get("end"))
        if start is None or end is None:
            logger.debug("Dropping slot with bad clock times: %s", raw)
            continue
        slot = _make_slot(
            datetime.combine(anchor, start),
            datetime.combine(anchor, end),
            overnight=bool(raw.get("is_overnight")),
        )
        by_day.setdefault(day, []).append(slot)

    return WeeklySchedule([
        DaySchedule(
            day_of_week=day_index_to_name(day),
            business_hours=by_day.get(day, []),
            special_hours_applied=False,
        )
        for day in range(7)
    ])


def normalize_contextual_hours(payload: Any) -> WeeklySchedule | None:
    """Canonicalize the chat endpoint's day list.

    Returns None when no usable day entries exist (hours unknown).
    """
    if not isinstance(payload, list) or not payload:
        return None

    slots_by_day: dict[str, list[TimeSlot]] = {}
    special: dict[str, bool] = {}
    for entry in payload:
        if not isinstance(entry, dict):
            continue
        label = entry.get("day_of_week")
        if label not in DAY_NAMES:
            continue
        day_slots = slots_by_day.setdefault(label, [])
        special[label] = special.get(label, False) or bool(entry.get("special_hours_applied"))

        raw_slots = entry.get("business_hours")
        if not isinstance(raw_slots, list):
            continue
        for raw in raw_slots:
            if not isinstance(raw, dict):
                continue
            opens = _parse_slot_datetime(raw.get("open_time"))
            closes = _parse_slot_datetime(raw.get("close_time"))
            if opens is None or closes is None:
                continue
            day_slots.append(_make_slot(opens, closes))

    if not slots_by_day:
        return None

    return WeeklySchedule([
        DaySchedule(
            day_of_week=name,
            business_hours=slots_by_day.get(name, []),
            special_hours_applied=special.get(name, False),
        )
        for name in DAY_NAMES
    ])


def has_hours(raw_hours: Any) -> bool:
    """Whether a raw contextual hours payload is present and non-empty."""
    return isinstance(raw_hours, list) and len(raw_hours) > 0
