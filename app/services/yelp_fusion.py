import logging
from urllib.parse import quote

import httpx

from app.exceptions.custom import MissingCredentialError, RateLimitError, YelpFusionError

logger = logging.getLogger(__name__)

API_BASE = "https://api.yelp.com/v3"
DETAILS_URL = f"{API_BASE}/businesses"


class YelpFusionService:
    def __init__(self, client: httpx.AsyncClient, api_key: str):
        self._client = client
        self._api_key = api_key

    async def get_business(self, business_id: str) -> dict:
        if not self._api_key:
            raise MissingCredentialError("YELP_API_KEY")

        headers = {"Authorization": f"Bearer {self._api_key}"}
        try:
            resp = await self._client.get(
                f"{DETAILS_URL}/{quote(business_id, safe='')}", headers=headers
            )
        except httpx.HTTPError as exc:
            raise YelpFusionError(f"transport error: {exc}") from exc

        if resp.status_code == 429:
            raise RateLimitError("Yelp Fusion")
        if resp.status_code >= 400:
            raise YelpFusionError(
                f"Yelp error {resp.status_code}: {resp.text}",
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise YelpFusionError(f"Bad JSON: {exc}") from exc
        return data if isinstance(data, dict) else {}
