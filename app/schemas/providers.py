from pydantic import BaseModel

from app.schemas.hours import WeeklySchedule


class Provider(BaseModel):
    id: str
    name: str = ""
    url: str = ""
    rating: float = 0.0
    review_count: int = 0
    phone: str = ""
    address: str = ""
    categories: list[str] = []
    photo: str | None = None
    short_summary: str | None = None
    accepts_reservations: bool = False
    price: str | None = None
    business_hours: WeeklySchedule | None = None
