from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, computed_field


class ScoreResult(BaseModel):
    score: int
    label: str
    reasons: list[str] = []


class AllergySafetyResult(ScoreResult):
    positives: list[str] = []
    warnings: list[str] = []


class SoloSafetyResult(ScoreResult):
    bar_seating: bool = False
    well_lit: bool = True
    well_trafficked: bool = False
    solo_friendly: bool = False


class WaitEstimate(BaseModel):
    min_minutes: int
    max_minutes: int
    busy: bool
    popularity: float = 0.0


class TruePrice(BaseModel):
    menu: float
    tax: float
    tip: float
    parking: float
    total: float
    source: str  # "price_tier" | "estimated"


class OpenState(StrEnum):
    open = "open"
    closed = "closed"
    unknown = "unknown"


class OpenStatus(BaseModel):
    state: OpenState
    message: str

    @computed_field
    @property
    def is_open(self) -> bool | None:
        if self.state == OpenState.unknown:
            return None
        return self.state == OpenState.open


class ScoringPrefs(BaseModel):
    """Tool preferences passed explicitly into the scoring engines."""

    mode: str = "auto"  # "auto" | "home" | "dining"
    party_size: int = 2
    budget: str = "any"  # "any" | "$" | "$$" | "$$$"
    vibe: str = "any"  # "any" | "romantic" | "quiet" | "family" | "trendy"
    urgency: str = "auto"  # "auto" | "same_day" | "soon" | "can_wait"
    distance: str = "any"  # "any" | "nearby" | "short_drive"
