from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, RootModel, field_serializer

DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

SLOT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class TimeSlot(BaseModel):
    open_time: datetime
    close_time: datetime

    @field_serializer("open_time", "close_time", when_used="json")
    def _serialize_time(self, value: datetime) -> str:
        return value.strftime(SLOT_TIME_FORMAT)


class DaySchedule(BaseModel):
    day_of_week: str
    business_hours: list[TimeSlot] = []
    special_hours_applied: bool = False


class WeeklySchedule(RootModel[list[DaySchedule]]):
    """Seven DaySchedules, Monday first."""

    @property
    def days(self) -> list[DaySchedule]:
        return self.root

    def day(self, name: str) -> DaySchedule | None:
        for entry in self.root:
            if entry.day_of_week == name:
                return entry
        return None

    def has_any_slots(self) -> bool:
        return any(entry.business_hours for entry in self.root)
