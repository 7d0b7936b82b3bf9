from typing import Any

from fastapi import APIRouter, Body, HTTPException

from app.dependencies import SessionStoreDep

router = APIRouter(prefix="/session")


@router.get("/{session_id}/{key}")
async def read_value(session_id: str, key: str, store: SessionStoreDep) -> dict:
    value = store.get(session_id, key)
    if value is None:
        raise HTTPException(status_code=404, detail="Key not found")
    return {"key": key, "value": value}


@router.put("/{session_id}/{key}")
async def write_value(
    session_id: str,
    key: str,
    store: SessionStoreDep,
    value: Any = Body(...),
) -> dict:
    store.set(session_id, key, value)
    return {"key": key, "value": value}
