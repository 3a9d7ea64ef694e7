# ./app/api/v1/endpoints/health.py
from __future__ import annotations
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from app.core.config import settings
from app.core.state import get_roster, get_store
from app.services.projects import ProjectStore
from app.services.users import UserRoster

router = APIRouter(prefix="/health", tags=["health"])

class HealthOut(BaseModel):
    status: str
    env: str
    projects: int | None = None
    users: int | None = None

@router.get("", response_model=dict)
def health_simple():
    return {"status": "ok", "env": settings.APP_ENV}

@router.get("/extended", response_model=HealthOut)
def health_extended(
    store: ProjectStore = Depends(get_store),
    roster: UserRoster = Depends(get_roster),
):
    return HealthOut(status="ok", env=settings.APP_ENV,
                     projects=len(store), users=len(roster))
