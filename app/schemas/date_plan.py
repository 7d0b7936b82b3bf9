from pydantic import BaseModel


class PlanStop(BaseModel):
    id: str
    name: str
    url: str
    rating: float
    categories: list[str]
    address: str
    time: str
    duration: str
    cost: int


class DatePlan(BaseModel):
    dinner: PlanStop
    activity: PlanStop
    total: int
    timeline: str = "7:00 PM - 11:00 PM"
    vibe: str
    date: str
