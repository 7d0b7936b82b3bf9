from typing import Annotated

from fastapi import Depends, HTTPException, Request

from app.services.followup import FollowupService
from app.services.search import SearchService
from app.services.tools import ToolsService
from app.store import SessionStore


def get_search_service(request: Request) -> SearchService:
    return request.app.state.search_service


def get_followup_service(request: Request) -> FollowupService:
    return request.app.state.followup_service


def get_tools_service(request: Request) -> ToolsService:
    return request.app.state.tools_service


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


SearchDep = Annotated[SearchService, Depends(get_search_service)]
FollowupDep = Annotated[FollowupService, Depends(get_followup_service)]
ToolsDep = Annotated[ToolsService, Depends(get_tools_service)]
SessionStoreDep = Annotated[SessionStore, Depends(get_session_store)]


def require(value, field: str):
    """400 naming the field when a required request value is missing or blank."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise HTTPException(status_code=400, detail=f"{field} is required")
    return value.strip() if isinstance(value, str) else value


def require_location(latitude: float | None, longitude: float | None) -> tuple[float, float]:
    if latitude is None or longitude is None:
        raise HTTPException(status_code=400, detail="latitude and longitude are required")
    return latitude, longitude
