import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import MissingCredentialError, RateLimitError, YelpAIError, YelpFusionError

logger = logging.getLogger(__name__)


async def yelp_ai_error_handler(_request: Request, exc: YelpAIError) -> JSONResponse:
    logger.error("Yelp AI error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=502,
        content={
            "detail": f"Yelp AI error: {exc.message}",
            "status": exc.status_code,
            "raw": exc.raw,
        },
    )


async def missing_credential_error_handler(
    _request: Request, exc: MissingCredentialError
) -> JSONResponse:
    logger.error("Missing credential: %s", exc.env_var)
    return JSONResponse(
        status_code=500,
        content={"detail": exc.message},
    )


async def yelp_fusion_error_handler(_request: Request, exc: YelpFusionError) -> JSONResponse:
    logger.error("Yelp Fusion error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=502,
        content={"detail": f"Failed to fetch business hours: {exc.message}"},
    )


async def rate_limit_error_handler(_request: Request, exc: RateLimitError) -> JSONResponse:
    logger.warning("Rate limit hit for %s", exc.service)
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded for {exc.service}"},
    )
