import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from app.config import Settings
from app.exceptions.custom import (
    MissingCredentialError,
    RateLimitError,
    YelpAIError,
    YelpFusionError,
)
from app.exceptions.handlers import (
    missing_credential_error_handler,
    rate_limit_error_handler,
    yelp_ai_error_handler,
    yelp_fusion_error_handler,
)
from app.routers.session import router as session_router
from app.routers.tools import router as tools_router
from app.routers.yelp import router as yelp_router
from app.services.followup import FollowupService
from app.services.hours_enrichment import HoursEnrichmentService
from app.services.search import SearchService
from app.services.tools import ToolsService
from app.services.yelp_ai import YelpAIService
from app.services.yelp_fusion import YelpFusionService
from app.store import SessionStore


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        yelp_ai = YelpAIService(client, settings.yelp_ai_api_key, locale=settings.locale)
        fusion = YelpFusionService(client, settings.yelp_api_key)

        search = SearchService(
            yelp_ai,
            HoursEnrichmentService(yelp_ai),
            fusion,
            max_providers=settings.max_providers,
        )
        store = SessionStore()

        app.state.search_service = search
        app.state.followup_service = FollowupService(yelp_ai)
        app.state.session_store = store
        app.state.tools_service = ToolsService(search, store)

        yield


app = FastAPI(title="Yelp Toolkit", lifespan=lifespan)

app.add_exception_handler(MissingCredentialError, missing_credential_error_handler)
app.add_exception_handler(YelpAIError, yelp_ai_error_handler)
app.add_exception_handler(YelpFusionError, yelp_fusion_error_handler)
app.add_exception_handler(RateLimitError, rate_limit_error_handler)

app.include_router(yelp_router)
app.include_router(tools_router)
app.include_router(session_router)
