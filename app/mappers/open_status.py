from datetime import datetime, timedelta

from app.schemas.hours import DAY_NAMES, TimeSlot, WeeklySchedule
from app.schemas.scoring import OpenState, OpenStatus

_STATE_ORDER = {OpenState.open: 0, OpenState.closed: 1, OpenState.unknown: 2}


def format_clock(moment: datetime) -> str:
    """9:00 AM / 5:30 PM"""
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {suffix}"


def _anchor(slot: TimeSlot, now: datetime) -> tuple[datetime, datetime]:
    # Keep the slot's clock time and length, move it onto today's date.
    opens = datetime.combine(now.date(), slot.open_time.time())
    return opens, opens + (slot.close_time - slot.open_time)


def evaluate_open_status(
    schedule: WeeklySchedule | None, now: datetime | None = None
) -> OpenStatus:
    """Open/closed/unknown for ``now``, using the first slot of each day."""
    if schedule is None or not schedule.days:
        return OpenStatus(state=OpenState.unknown, message="Hours unknown")

    now = now or datetime.now()
    today = schedule.day(DAY_NAMES[now.weekday()])
    if today is None or not today.business_hours:
        return OpenStatus(state=OpenState.closed, message="Closed today")

    opens, closes = _anchor(today.business_hours[0], now)
    if opens <= now < closes:
        return OpenStatus(state=OpenState.open, message=f"Open until {format_clock(closes)}")
    if now < opens:
        return OpenStatus(state=OpenState.closed, message=f"Opens at {format_clock(opens)}")

    tomorrow = schedule.day(DAY_NAMES[(now + timedelta(days=1)).weekday()])
    if tomorrow and tomorrow.business_hours:
        next_open = tomorrow.business_hours[0].open_time
        return OpenStatus(
            state=OpenState.closed,
            message=f"Closed • Opens {format_clock(next_open)}",
        )
    return OpenStatus(state=OpenState.closed, message="Closed")


def open_status_rank(status: OpenStatus) -> int:
    return _STATE_ORDER[status.state]
