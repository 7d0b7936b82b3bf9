from pydantic import BaseModel, ConfigDict, Field

from app.schemas.scoring import ScoringPrefs


class _CamelRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class HoursRequest(_CamelRequest):
    business_id: str | None = Field(default=None, alias="businessId")


class SearchRequest(_CamelRequest):
    user_text: str | None = Field(default=None, alias="userText")
    latitude: float | None = None
    longitude: float | None = None
    chat_id: str | None = Field(default=None, alias="chatId")


class QuoteRequest(_CamelRequest):
    chat_id: str | None = Field(default=None, alias="chatId")
    provider_name: str | None = Field(default=None, alias="providerName")
    provider_url: str | None = Field(default=None, alias="providerUrl")
    preferred_time: str | None = Field(default=None, alias="preferredTime")
    user_notes: str | None = Field(default=None, alias="userNotes")


class ToolRequest(_CamelRequest):
    query: str | None = None
    latitude: float | None = None
    longitude: float | None = None


class TruePriceRequest(ToolRequest):
    budget: float = 50


class SafeEatsRequest(ToolRequest):
    allergies: list[str] = []


class WaitWiseRequest(ToolRequest):
    party_size: int = Field(default=2, alias="partySize")


class DateStackRequest(_CamelRequest):
    latitude: float | None = None
    longitude: float | None = None
    budget: float = 150
    vibe: str = "Romantic"
    date: str | None = None


class QuickFindRequest(SearchRequest):
    session_id: str | None = Field(default=None, alias="sessionId")
    prefs: ScoringPrefs | None = None
