import logging

import httpx

from app.exceptions.custom import MissingCredentialError, RateLimitError, YelpAIError

logger = logging.getLogger(__name__)

CHAT_URL = "https://api.yelp.com/ai/chat/v2"


def build_user_context(
    locale: str,
    latitude: float | None = None,
    longitude: float | None = None,
) -> dict:
    context: dict = {"locale": locale}
    if latitude is not None and longitude is not None:
        context["latitude"] = latitude
        context["longitude"] = longitude
    return context


class YelpAIService:
    def __init__(self, client: httpx.AsyncClient, api_key: str, locale: str = "en_US"):
        self._client = client
        self._api_key = api_key
        self._locale = locale

    async def chat(
        self,
        query: str,
        chat_id: str | None = None,
        latitude: float | None = None,
        longitude: float | None = None,
    ) -> dict:
        """Send one conversational query and return the decoded JSON body."""
        if not self._api_key:
            raise MissingCredentialError("YELP_AI_API_KEY")

        payload: dict = {
            "query": query,
            "user_context": build_user_context(self._locale, latitude, longitude),
        }
        if chat_id:
            payload["chat_id"] = chat_id

        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

        logger.debug("Yelp AI query (%d chars, chat_id=%s)", len(query), chat_id)
        try:
            resp = await self._client.post(CHAT_URL, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            raise YelpAIError(f"transport error: {exc}") from exc

        if resp.status_code == 429:
            raise RateLimitError("Yelp AI")
        if resp.status_code >= 400:
            raise YelpAIError(
                f"upstream returned {resp.status_code}",
                status_code=resp.status_code,
                raw=resp.text,
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise YelpAIError(f"Bad JSON: {exc}", status_code=500, raw=resp.text) from exc
        if not isinstance(data, dict):
            raise YelpAIError("Bad JSON: expected an object", status_code=500, raw=resp.text)
        return data
