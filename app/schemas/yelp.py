"""Raw shapes returned by the Yelp chat endpoint.

Every field is optional and tolerant: a list that arrives as null or with
junk entries becomes the usable subset, and a scalar or nested object that
fails validation becomes None. One bad field never costs the whole record.
"""

from typing import Any

from pydantic import BaseModel, ValidationError, ValidatorFunctionWrapHandler, field_validator


def _dict_items(value: Any) -> list:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _or_none(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    try:
        return handler(value)
    except ValidationError:
        return None


class YelpCategory(BaseModel):
    alias: str | None = None
    title: str | None = None

    @field_validator("alias", "title", mode="wrap")
    @classmethod
    def drop_bad_values(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        return _or_none(value, handler)


class YelpLocation(BaseModel):
    formatted_address: str | None = None

    @field_validator("formatted_address", mode="wrap")
    @classmethod
    def drop_bad_values(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        return _or_none(value, handler)


class YelpPhoto(BaseModel):
    original_url: str | None = None

    @field_validator("original_url", mode="wrap")
    @classmethod
    def drop_bad_values(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        return _or_none(value, handler)


class YelpContextualInfo(BaseModel):
    photos: list[YelpPhoto] = []
    accepts_reservations_through_yelp: bool | None = None
    # Raw day list as sent by the chat endpoint; normalized downstream.
    business_hours: Any = None

    @field_validator("photos", mode="before")
    @classmethod
    def keep_dict_items(cls, value: Any) -> list:
        return _dict_items(value)

    @field_validator("accepts_reservations_through_yelp", mode="wrap")
    @classmethod
    def drop_bad_values(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        return _or_none(value, handler)


class YelpSummaries(BaseModel):
    short: str | None = None

    @field_validator("short", mode="wrap")
    @classmethod
    def drop_bad_values(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        return _or_none(value, handler)


class YelpBusiness(BaseModel):
    id: str | None = None
    name: str | None = None
    url: str | None = None
    rating: float | None = None
    review_count: int | None = None
    phone: str | None = None
    location: YelpLocation | None = None
    categories: list[YelpCategory] = []
    contextual_info: YelpContextualInfo | None = None
    summaries: YelpSummaries | None = None
    price: str | None = None
    attributes: dict[str, Any] | None = None

    @field_validator("categories", mode="before")
    @classmethod
    def keep_dict_items(cls, value: Any) -> list:
        return _dict_items(value)

    @field_validator(
        "id",
        "name",
        "url",
        "rating",
        "review_count",
        "phone",
        "location",
        "contextual_info",
        "summaries",
        "price",
        "attributes",
        mode="wrap",
    )
    @classmethod
    def drop_bad_values(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        return _or_none(value, handler)

    @property
    def formatted_address(self) -> str:
        if self.location and self.location.formatted_address:
            return self.location.formatted_address
        return ""

    @property
    def raw_business_hours(self) -> Any:
        return self.contextual_info.business_hours if self.contextual_info else None


class YelpAIResponseText(BaseModel):
    text: str | None = None

    @field_validator("text", mode="wrap")
    @classmethod
    def drop_bad_values(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        return _or_none(value, handler)


class YelpAIResponse(BaseModel):
    chat_id: str | None = None
    response: YelpAIResponseText | None = None

    @field_validator("chat_id", "response", mode="wrap")
    @classmethod
    def drop_bad_values(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        return _or_none(value, handler)

    @property
    def text(self) -> str:
        return (self.response.text if self.response else None) or ""
